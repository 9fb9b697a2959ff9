"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from linked_lru.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_CAPACITY", "SEPARATOR", "LOG_LEVEL"):
            monkeypatch.delenv(f"LINKED_LRU_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.default_capacity == 10
        assert settings.separator == " -> "
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LINKED_LRU_DEFAULT_CAPACITY", "4")
        monkeypatch.setenv("LINKED_LRU_SEPARATOR", " | ")
        settings = Settings(_env_file=None)
        assert settings.default_capacity == 4
        assert settings.separator == " | "

    def test_capacity_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("LINKED_LRU_DEFAULT_CAPACITY", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
