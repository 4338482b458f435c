"""Abstract interface for the trade statistics source (in-memory, JSON file, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from asset_trade_activity.models.trade_record import TradeRecord


class ITradeStatisticsRepository(ABC):
    """Read-only access to historical, already deduplicated trade records."""

    @abstractmethod
    def list_all(self) -> list[TradeRecord]:
        """Return every known trade record (no particular order)."""
        ...
