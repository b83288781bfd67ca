# src/shopfx/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a local .env file) with validation.

Files that USE this module:
- shopfx.adapters.providers.* (rate source URL, API key, timeout)
- shopfx.application.rates_service (cache window, rate source kind)
- shopfx.shared.logging_conf (log destinations)

Files that this module USES:
- shopfx.shared.validators (validation functions for settings)
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopfx.domain.models import CurrencyCode
from shopfx.shared.validators import validate_api_key, validate_currency_code

RATE_SOURCES = ("currencyapi", "static")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Rate source ---
    rate_source: str = Field(default="currencyapi", alias="RATE_SOURCE")
    rates_api_url: str = Field(
        default="https://api.currencyapi.com/v3/latest", alias="RATES_API_URL"
    )
    rates_api_key: str = Field(default="", alias="RATES_API_KEY")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Cache Settings (in minutes) ---
    rates_cache_minutes: int = Field(default=60, alias="RATES_CACHE_MINUTES", ge=1, le=1440)

    # --- Display ---
    default_currency: CurrencyCode = Field(default=CurrencyCode.EUR, alias="DEFAULT_CURRENCY")

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="SHOPFX_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def rates_cache_seconds(self) -> int:
        return self.rates_cache_minutes * 60

    @field_validator("rate_source")
    @classmethod
    def validate_rate_source(cls, v: str) -> str:
        """Validate rate source kind."""
        v = v.strip().lower()
        if v not in RATE_SOURCES:
            raise ValueError(f"RATE_SOURCE must be one of {RATE_SOURCES}")
        return v

    @field_validator("rates_api_key")
    @classmethod
    def validate_rates_api_key(cls, v: str) -> str:
        """Validate API key format (empty means not configured)."""
        if v and not validate_api_key(v):
            raise ValueError("Invalid RATES_API_KEY format")
        return v

    @field_validator("default_currency", mode="before")
    @classmethod
    def validate_default_currency(cls, v):
        """Validate currency code against the allow-list."""
        if not validate_currency_code(v):
            raise ValueError("DEFAULT_CURRENCY must be one of EUR, USD, CZK")
        if isinstance(v, str):
            return v.strip().upper()
        return v


# Global settings instance
settings = Settings()
