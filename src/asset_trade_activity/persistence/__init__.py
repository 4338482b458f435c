"""Persistence layer (read-only sources)."""

from asset_trade_activity.persistence.repositories import (
    IAssetRegistry,
    InMemoryAssetRegistry,
    InMemoryTradeStatisticsRepository,
    ITradeStatisticsRepository,
    JsonFileAssetRegistry,
    JsonFileTradeStatisticsRepository,
)

__all__ = [
    "IAssetRegistry",
    "ITradeStatisticsRepository",
    "InMemoryAssetRegistry",
    "InMemoryTradeStatisticsRepository",
    "JsonFileAssetRegistry",
    "JsonFileTradeStatisticsRepository",
]
