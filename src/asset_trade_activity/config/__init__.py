"""Configuration subpackage."""

from asset_trade_activity.config.config import (
    ActivitySettings,
    AppSettings,
    LoggingSettings,
    ReportSettings,
    Settings,
    SourceSettings,
    get_settings,
)

__all__ = [
    "ActivitySettings",
    "AppSettings",
    "LoggingSettings",
    "ReportSettings",
    "Settings",
    "SourceSettings",
    "get_settings",
]
