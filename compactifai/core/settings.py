"""Configuration management - loads environment variables into typed settings."""

import logging
from functools import lru_cache
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from compactifai.core.config import DEFAULT_BASE_URL, ClientConfig, CompactifAIModels


class CompactifAISettings(BaseSettings):
    """Client settings loaded from COMPACTIFAI_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COMPACTIFAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="API key sent as Authorization: Bearer <API_KEY>")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the CompactifAI API")
    default_model: str = Field(
        default=CompactifAIModels.LLAMA_3_1_8B_SLIM,
        description="Model used when a request does not name one",
    )

    # Timeout Configuration
    timeout_s: float = Field(default=120.0, description="Total timeout for API requests (seconds)")
    connect_timeout_s: float = Field(default=10.0, description="Connection timeout for API requests (seconds)")

    strict_choices: bool = Field(
        default=False,
        description="Raise instead of returning an empty string when a response has no choices",
    )

    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL")

    @field_validator("timeout_s", "connect_timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got {v}")
        if not parsed.netloc:
            raise ValueError(f"URL must have a valid host, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}, got {v}")
        return v.upper()

    def get_log_level(self) -> int:
        """Convert log level string to logging constant."""
        return getattr(logging, self.log_level, logging.INFO)

    def to_config(self) -> ClientConfig:
        """Build the immutable client configuration from these settings."""
        return ClientConfig(
            api_key=self.api_key,
            base_url=self.base_url,
            default_model=self.default_model,
            timeout_s=self.timeout_s,
            connect_timeout_s=self.connect_timeout_s,
            strict_choices=self.strict_choices,
        )


@lru_cache(maxsize=1)
def get_settings() -> CompactifAISettings:
    """
    Get the client settings singleton.

    Settings are loaded from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Raises:
        ValueError: If settings are invalid.

    Returns:
        CompactifAISettings: The validated settings instance.
    """
    try:
        return CompactifAISettings()
    except Exception as e:
        raise ValueError(
            f"Failed to load configuration: {e}\n"
            "Please check your COMPACTIFAI_* environment variables and .env file."
        ) from e
