"""In-memory repository implementations."""

from asset_trade_activity.persistence.repositories.in_memory.asset_registry import (
    InMemoryAssetRegistry,
)
from asset_trade_activity.persistence.repositories.in_memory.trade_statistics_repository import (
    InMemoryTradeStatisticsRepository,
)

__all__ = [
    "InMemoryAssetRegistry",
    "InMemoryTradeStatisticsRepository",
]
