"""JSON-file-backed repository implementations."""

from asset_trade_activity.persistence.repositories.json_file.asset_registry import (
    JsonFileAssetRegistry,
)
from asset_trade_activity.persistence.repositories.json_file.trade_statistics_repository import (
    JsonFileTradeStatisticsRepository,
)

__all__ = [
    "JsonFileAssetRegistry",
    "JsonFileTradeStatisticsRepository",
]
