"""
Tests for the demonstration driver.
"""

import pytest

from linked_lru import LinkedListLRU, demo
from linked_lru.config import Settings


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    monkeypatch.setattr(demo, "settings", Settings(_env_file=None, default_capacity=4, separator=" -> "))


class TestRunDemo:

    def test_prints_order_after_each_access(self, capsys):
        orders = demo.run_demo(LinkedListLRU(1, 3), [2, 3, 4, 2], " -> ")

        assert orders == ["2 -> 1", "3 -> 2 -> 1", "4 -> 3 -> 2", "2 -> 4 -> 3"]
        out = capsys.readouterr().out
        assert "start:     1" in out
        assert "access(4): 4 -> 3 -> 2" in out
        assert "hits=1 misses=3 evictions=1 size=3/3" in out


class TestMain:

    def test_replays_scenario_without_values(self, capsys):
        assert demo.main([]) == 0
        out = capsys.readouterr().out
        assert "access(2): 2 -> 4 -> 3" in out

    def test_custom_values_use_settings_capacity(self, capsys):
        assert demo.main(["1", "2", "3", "4", "5"]) == 0
        out = capsys.readouterr().out
        assert "access(5): 5 -> 4 -> 3 -> 2" in out
        assert "size=4/4" in out

    def test_string_values_and_initial(self, capsys):
        assert demo.main(["--type", "str", "--initial", "a", "--capacity", "2", "b", "c"]) == 0
        out = capsys.readouterr().out
        assert "access(c): c -> b" in out

    def test_invalid_capacity_exits(self):
        with pytest.raises(SystemExit):
            demo.main(["--capacity", "0", "1", "2"])

    def test_unparseable_value_exits(self):
        with pytest.raises(SystemExit):
            demo.main(["1", "two"])

    def test_invalid_log_level_exits(self):
        with pytest.raises(SystemExit):
            demo.main(["--log-level", "nope", "1", "2"])

    def test_log_level_is_case_insensitive(self, capsys):
        assert demo.main(["--log-level", "debug", "1", "2"]) == 0
        assert "access(2): 2 -> 1" in capsys.readouterr().out
