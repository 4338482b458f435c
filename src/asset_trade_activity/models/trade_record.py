"""TradeRecord: one historical trade from the trade statistics source.

Records are read-only; the source is assumed to be deduplicated already.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from asset_trade_activity.utils.datetimes import as_utc


@dataclass(frozen=True, slots=True)
class TradeRecord:
    """A completed trade, reduced to what the activity check needs."""

    base_currency: str
    """Currency code of the traded asset (e.g. XMR)."""
    trade_date: datetime
    """When the trade happened. Always stored timezone-aware in UTC (naive input is taken as UTC)."""
    trade_amount: int
    """Traded amount in the smallest unit (satoshi)."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "trade_date", as_utc(self.trade_date))

    @classmethod
    def create(
        cls,
        base_currency: str,
        trade_date: datetime,
        trade_amount: int,
    ) -> TradeRecord:
        """Create a TradeRecord with a stripped, non-empty code."""
        base_currency = base_currency.strip()
        if not base_currency:
            raise ValueError("base_currency must be non-empty")
        return cls(
            base_currency=base_currency,
            trade_date=trade_date,
            trade_amount=int(trade_amount),
        )
