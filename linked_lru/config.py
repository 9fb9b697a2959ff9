from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    app_name: str = "Linked LRU Demo"

    # Cache Settings
    default_capacity: int = Field(10, ge=1)
    separator: str = " -> "

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LINKED_LRU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


settings = Settings()
