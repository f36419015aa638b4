"""
Configuration management for the Dependency-Track client.

This module handles environment variables, settings validation, and configuration
management using Pydantic Settings for type safety and validation.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HTTPConfig(BaseModel):
    """HTTP transport configuration settings."""

    base_url: str = Field(..., description="Dependency-Track API server URL")
    api_key: str = Field(default="", description="API key sent as X-Api-Key")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    user_agent: str = Field(default="", description="User-Agent header override")


class WaitConfig(BaseModel):
    """Event wait configuration settings."""

    timeout: float | None = Field(
        default=None, description="Deadline for event waits in seconds"
    )
    interval: float = Field(
        default=0.0, description="Delay between event status checks in seconds"
    )


class Settings(BaseSettings):
    """Main client settings."""

    model_config = SettingsConfigDict(
        env_prefix="DTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    base_url: str = Field(default="", description="Dependency-Track API server URL")
    api_key: str = Field(default="", description="API key sent as X-Api-Key")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    user_agent: str = Field(default="", description="User-Agent header override")

    # Logging configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Log format")

    # Event wait configuration
    wait_timeout: float | None = Field(
        default=None, description="Deadline for event waits in seconds"
    )
    wait_interval: float = Field(
        default=0.0, description="Delay between event status checks in seconds"
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_base_url(cls, v: Any) -> str:
        """Strip whitespace and trailing slashes from the server URL."""
        if v is None:
            return ""
        if not isinstance(v, str):
            raise ValueError(f"base_url must be a string, got {type(v)}")
        return v.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        allowed_formats = {"json", "console"}
        if v.lower() not in allowed_formats:
            raise ValueError(f"Invalid log format: {v}")
        return v.lower()

    @field_validator("timeout", "wait_interval")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Reject negative durations."""
        if v < 0:
            raise ValueError("Durations must not be negative")
        return v

    @field_validator("wait_timeout")
    @classmethod
    def validate_wait_timeout(cls, v: float | None) -> float | None:
        """Reject non-positive deadlines."""
        if v is not None and v <= 0:
            raise ValueError("wait_timeout must be positive")
        return v

    @property
    def is_configured(self) -> bool:
        """Check if a server URL has been provided."""
        return bool(self.base_url)

    @property
    def http_config(self) -> HTTPConfig:
        """Get HTTP transport configuration."""
        return HTTPConfig(
            base_url=self.base_url,
            api_key=self.api_key,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
            user_agent=self.user_agent,
        )

    @property
    def wait_config(self) -> WaitConfig:
        """Get event wait configuration."""
        return WaitConfig(timeout=self.wait_timeout, interval=self.wait_interval)


# Global settings instance - initialized lazily to avoid import-time errors
_settings_instance = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
