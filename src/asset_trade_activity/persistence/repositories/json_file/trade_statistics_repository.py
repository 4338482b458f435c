# -*- coding: utf-8 -*-
"""Trade statistics read from a JSON file (array of TradeStatisticsSchema)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import structlog

from asset_trade_activity.exceptions import SourceIOError
from asset_trade_activity.models.trade_record import TradeRecord
from asset_trade_activity.persistence.repositories.interfaces.trade_statistics_repository import (
    ITradeStatisticsRepository,
)
from asset_trade_activity.persistence.repositories.json_file._io import load_json
from asset_trade_activity.persistence.repositories.json_file.schema import (
    TradeStatisticsSchema,
)

SOURCE_NAME = "trade_statistics"


def _parse_trade(item: TradeStatisticsSchema) -> TradeRecord | None:
    """Build a TradeRecord from a file item. None if invalid."""
    code = item.get("baseCurrency")
    date_ms = item.get("tradeDate")
    amount = item.get("tradeAmount")
    if not isinstance(code, str) or not code.strip():
        return None
    if isinstance(date_ms, bool) or isinstance(amount, bool):
        return None
    if not isinstance(date_ms, int) or not isinstance(amount, int):
        return None
    try:
        trade_date = datetime.fromtimestamp(date_ms / 1000, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None
    return TradeRecord.create(code, trade_date, amount)


class JsonFileTradeStatisticsRepository(ITradeStatisticsRepository):
    """Reads trade statistics from a JSON file on every list_all() call."""

    def __init__(
        self,
        path: str | Path,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            path: JSON file holding an array of trade statistics items.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._path = Path(path)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def list_all(self) -> list[TradeRecord]:
        """Load and parse all trades; malformed items are skipped and counted.

        Raises:
            SourceIOError: if the file is unreadable, not JSON, or not a JSON array.
        """
        raw = load_json(self._path, source=SOURCE_NAME)
        if not isinstance(raw, list):
            raise SourceIOError(
                f"source I/O error: expected a JSON array in {self._path}",
                source=SOURCE_NAME,
            )

        trades: list[TradeRecord] = []
        invalid_items = 0
        for item in raw:
            parsed = _parse_trade(item) if isinstance(item, dict) else None
            if parsed is None:
                invalid_items += 1
                continue
            trades.append(parsed)

        if invalid_items:
            self._logger.warning(
                "trade_statistics_invalid_items_skipped",
                path=str(self._path),
                invalid_items=invalid_items,
            )
        self._logger.debug(
            "trade_statistics_loaded",
            path=str(self._path),
            trades=len(trades),
        )
        return trades
