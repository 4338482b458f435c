# -*- coding: utf-8 -*-
"""In-memory trade statistics repository."""

from __future__ import annotations

from collections.abc import Iterable

from asset_trade_activity.models.trade_record import TradeRecord
from asset_trade_activity.persistence.repositories.interfaces.trade_statistics_repository import (
    ITradeStatisticsRepository,
)


class InMemoryTradeStatisticsRepository(ITradeStatisticsRepository):
    """In-memory implementation of ITradeStatisticsRepository."""

    def __init__(self, trades: Iterable[TradeRecord] = ()) -> None:
        """Initialize the store with the given trades (empty by default)."""
        self._trades: list[TradeRecord] = list(trades)

    def list_all(self) -> list[TradeRecord]:
        """Return a copy of all stored trades."""
        return list(self._trades)

    def add(self, trade: TradeRecord) -> None:
        """Append a trade record."""
        self._trades.append(trade)
