# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, json_file)."""

from asset_trade_activity.persistence.repositories.interfaces import (
    IAssetRegistry,
    ITradeStatisticsRepository,
)
from asset_trade_activity.persistence.repositories.in_memory import (
    InMemoryAssetRegistry,
    InMemoryTradeStatisticsRepository,
)
from asset_trade_activity.persistence.repositories.json_file import (
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
