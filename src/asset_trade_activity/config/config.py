# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, ACTIVITY__WINDOW_DAYS.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from asset_trade_activity.utils.coin_format import parse_coin
from asset_trade_activity.utils.listing_dates import parse_listing_dates


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "asset-trade-activity"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/asset_trade_activity.log"
    # Rotated at UTC midnight; one file per report day
    log_file_backup_count: int = 30

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ActivitySettings(BaseSettings):
    """Thresholds and warm-up configuration for the trade activity check (ACTIVITY__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    window_days: int = Field(
        default=120,
        ge=1,
        le=3650,
        description="Length of the trailing trade window in days.",
    )
    min_trade_amount_btc: str = Field(
        default="0.001",
        description="Minimum traded volume (BTC) in the window to count as sufficiently traded.",
        validation_alias="min_trade_amount",
    )
    min_num_of_trades: int = Field(
        default=3,
        ge=1,
        description="Minimum number of trades in the window to count as sufficiently traded.",
    )
    grace_period_days: int = Field(
        default=120,
        ge=0,
        le=3650,
        description="Days after listing during which an asset is exempt from removal.",
    )
    # Raw string from env so pydantic-settings does not try to JSON-decode it.
    listing_dates_raw: str = Field(
        default="",
        description="Listing dates as CODE=YYYY-MM-DD, comma-separated. Env: ACTIVITY__LISTING_DATES.",
        validation_alias="listing_dates",
    )

    @field_validator("min_trade_amount_btc")
    @classmethod
    def _check_min_trade_amount(cls, value: str) -> str:
        if parse_coin(value) < 0:
            raise ValueError("min_trade_amount must not be negative")
        return value.strip()

    @field_validator("listing_dates_raw")
    @classmethod
    def _check_listing_dates(cls, value: str) -> str:
        parse_listing_dates(value)
        return value

    @computed_field
    @property
    def min_trade_amount_sat(self) -> int:
        """Minimum traded volume in satoshi."""
        return parse_coin(self.min_trade_amount_btc)

    @computed_field
    @property
    def listing_dates(self) -> dict[str, datetime]:
        """Parse listing_dates_raw into a code -> listing datetime (UTC) mapping."""
        return parse_listing_dates(self.listing_dates_raw)


class SourceSettings(BaseSettings):
    """Locations of the trade statistics and asset registry sources (SOURCES__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    trade_statistics_path: Optional[str] = Field(
        default=None,
        description="JSON file with trade statistics. Empty source when unset.",
    )
    asset_registry_path: Optional[str] = Field(
        default=None,
        description="JSON file with the asset whitelist. Empty registry when unset.",
    )


class ReportSettings(BaseSettings):
    """Report output (REPORT__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    output_path: Optional[str] = Field(
        default=None,
        description="Also write the report text to this file when set.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, ACTIVITY__MIN_NUM_OF_TRADES.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    activity: ActivitySettings = Field(default_factory=ActivitySettings)
    sources: SourceSettings = Field(default_factory=SourceSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as flat keys or nested dicts, e.g.:
        - from_env(activity={"window_days": 90})
        - from_env(sources={"asset_registry_path": "registry.json"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from asset_trade_activity.config import get_settings

        settings = get_settings()
        window_days = settings.activity.window_days
    """
    return Settings()
