"""
Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation and type safety.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are loaded from .env file or environment variables
    prefixed with ``SPENT_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="spent", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="production", description="Environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="text", description="Log format")
    debug: bool = Field(default=False, description="Debug mode")

    # Database
    database_url: str = Field(
        default="sqlite:///./data/spent.db",
        description="Database connection URL for durable settings storage",
    )

    # Currency settings persistence
    persist_currency: bool = Field(
        default=True, description="Persist the active currency across restarts"
    )
    currency_storage_key: str = Field(
        default="spent_currency", description="Storage key of the persisted currency record"
    )

    @field_validator("currency_storage_key")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        """Reject empty storage keys."""
        v = v.strip()
        if not v:
            raise ValueError("currency_storage_key must not be empty")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.app_env == "development"


# Global settings instance
settings = Settings()
