# -*- coding: utf-8 -*-
"""Trade aggregation: filter trade records to the window and sum them per currency code.

Pure functions, no I/O.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from asset_trade_activity.models.activity import AggregateEntry
from asset_trade_activity.models.trade_record import TradeRecord


def window_cutoff(now: datetime, window_days: int) -> datetime:
    """Start of the trailing window; trades must be strictly after it."""
    return now - timedelta(days=window_days)


def aggregate_trade_statistics(
    trades: Iterable[TradeRecord],
    *,
    cutoff: datetime,
    is_crypto_currency: Callable[[str], bool],
) -> dict[str, AggregateEntry]:
    """Sum trade amount and count per base currency code.

    Only trades whose currency is a recognized crypto asset and whose
    trade_date is strictly after cutoff are counted. Codes without any
    counted trade are absent from the result.

    Args:
        trades: Trade records (any order).
        cutoff: Window start (exclusive).
        is_crypto_currency: Predicate for recognized crypto codes.

    Returns:
        Mapping code -> AggregateEntry.
    """
    aggregates: dict[str, AggregateEntry] = {}
    for trade in trades:
        if trade.trade_date <= cutoff:
            continue
        if not is_crypto_currency(trade.base_currency):
            continue
        entry = aggregates.get(trade.base_currency)
        if entry is None:
            entry = aggregates[trade.base_currency] = AggregateEntry(code=trade.base_currency)
        entry.add(trade.trade_amount)
    return aggregates
