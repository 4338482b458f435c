"""Asset trade activity check: classify whitelisted assets by recent trading and list delisting candidates."""

from asset_trade_activity.config import get_settings
from asset_trade_activity.DI import Container
from asset_trade_activity.services import (
    ActivityReportFormatter,
    AssetActivityClassifier,
    AssetTradeActivityCheck,
)

__version__ = "0.0.1"
__all__ = [
    "ActivityReportFormatter",
    "AssetActivityClassifier",
    "AssetTradeActivityCheck",
    "Container",
    "get_settings",
]
