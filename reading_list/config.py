# reading_list/config.py
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Values loaded from ``READING_LIST_*`` environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="READING_LIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # Base URL under which attachment files are served.
    uploads_url: str = Field(default="/wp-content/uploads")

    # Optional JSON file with books and attachments loaded at startup.
    seed_file: Optional[str] = Field(default=None)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
