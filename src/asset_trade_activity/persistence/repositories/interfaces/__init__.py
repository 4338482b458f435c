# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/, json_file/."""

from asset_trade_activity.persistence.repositories.interfaces.asset_registry import (
    IAssetRegistry,
)
from asset_trade_activity.persistence.repositories.interfaces.trade_statistics_repository import (
    ITradeStatisticsRepository,
)

__all__ = [
    "IAssetRegistry",
    "ITradeStatisticsRepository",
]
