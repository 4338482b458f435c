"""Logging subpackage."""

from asset_trade_activity.logging.config import configure_logging

__all__ = ["configure_logging"]
