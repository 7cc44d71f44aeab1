"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickerlens.domain.symbols.extraction import DEFAULT_MAX_TEXT_LENGTH


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name used in CLI help and logs.
        version: Current version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        max_message_length: Messages longer than this are truncated
            before symbol extraction.
        extra_aliases: Additional name → symbol aliases merged into the
            built-in table. Given as JSON in the environment, e.g.
            EXTRA_ALIASES='{"palantir": "PLTR"}'.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TickerLens"
    version: str = "0.1.0"
    log_level: str = "INFO"
    max_message_length: int = Field(default=DEFAULT_MAX_TEXT_LENGTH, gt=0)
    extra_aliases: dict[str, str] = Field(default_factory=dict)

    @field_validator("extra_aliases")
    @classmethod
    def _normalize_aliases(cls, value: dict[str, str]) -> dict[str, str]:
        return {
            name.strip().lower(): symbol.strip().upper()
            for name, symbol in value.items()
            if name.strip() and symbol.strip()
        }


settings = Settings()
