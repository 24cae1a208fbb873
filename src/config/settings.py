"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Chartspec"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("port")
    @classmethod
    def validate_port_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"port must be positive, got {v}")
        return v

    @field_validator("allowed_origins")
    @classmethod
    def warn_wildcard_origins(cls, v: list[str]) -> list[str]:
        if v == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], restrict it in production"
            )
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    allowed_origins: list[str] = ["*"]

    # Static demo page
    static_dir: str = "static"

    # Translator
    include_confidence: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
