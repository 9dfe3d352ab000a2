"""Configuration management for hugo-literate."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Fallbacks for --lexer / --anchor
    default_lexer: Optional[str] = Field(
        default=None,
        alias="LITERATE_LEXER",
    )
    default_anchor: Optional[str] = Field(
        default=None,
        alias="LITERATE_ANCHOR",
    )

    # Source decoding
    encoding: str = Field(
        default="utf-8",
        alias="LITERATE_ENCODING",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
