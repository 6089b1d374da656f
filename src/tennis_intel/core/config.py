"""
Configuration management for Tennis Intel.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://tennis-intel-production.up.railway.app"
DEFAULT_ICON_URL = "https://raw.githubusercontent.com/langoustine69/tennis-intel/main/icon.png"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "tennis-intel"
    app_version: str = "1.0.0"
    app_description: str = (
        "Professional tennis intelligence - ATP/WTA rankings, live scores, "
        "news, and player data via ESPN."
    )
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    # ==========================================================================
    # Server Configuration
    # ==========================================================================
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    public_domain: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("public_domain", "PUBLIC_DOMAIN", "RAILWAY_PUBLIC_DOMAIN"),
        description="Public hostname used to build discovery URLs",
    )
    icon_url: str = DEFAULT_ICON_URL

    @computed_field
    @property
    def base_url(self) -> str:
        """Get the public base URL of this service."""
        if self.public_domain:
            return f"https://{self.public_domain}"
        return DEFAULT_BASE_URL

    # ==========================================================================
    # Upstream (ESPN) Configuration
    # ==========================================================================
    upstream_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Timeout for ESPN requests in seconds (unset = wait indefinitely)",
    )

    # ==========================================================================
    # Analytics
    # ==========================================================================
    analytics_enabled: bool = Field(
        default=True,
        description="Track paid invocations in the in-memory payment tracker",
    )
    analytics_max_transactions: Optional[int] = Field(
        default=10_000,
        gt=0,
        description="Oldest transactions are dropped beyond this many (unset = unbounded)",
    )

    # ==========================================================================
    # CORS Configuration
    # ==========================================================================
    cors_allow_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list[str] = ["Accept", "Accept-Encoding", "Content-Type", "X-Payment"]
    cors_expose_headers: list[str] = ["X-Process-Time"]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
