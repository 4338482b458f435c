"""Exceptions subpackage."""

from asset_trade_activity.exceptions.exceptions import (
    AssetActivityError,
    InvalidListingDateError,
    SourceIOError,
)

__all__ = [
    "AssetActivityError",
    "InvalidListingDateError",
    "SourceIOError",
]
