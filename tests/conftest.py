# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from asset_trade_activity.models.asset import Asset
from asset_trade_activity.models.trade_record import TradeRecord
from asset_trade_activity.services.activity_check.classifier import (
    ActivityThresholds,
    AssetActivityClassifier,
)


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def asset_factory() -> Callable[..., Asset]:
    """Build Asset with sensible defaults: asset_factory('XMR', name='Monero', fee_paid=True)."""

    def _build(code: str = "XYZ", **overrides: Any) -> Asset:
        return Asset.create(
            code,
            name=overrides.pop("name", None),
            fee_paid=overrides.pop("fee_paid", False),
        )

    return _build


@pytest.fixture
def trade_factory(now_utc: datetime) -> Callable[..., TradeRecord]:
    """Build TradeRecord relative to now_utc: trade_factory('XYZ', amount=2000, days_ago=10)."""

    def _build(code: str = "XYZ", **overrides: Any) -> TradeRecord:
        trade_date = overrides.pop("trade_date", None) or now_utc - timedelta(
            days=overrides.pop("days_ago", 10)
        )
        return TradeRecord.create(code, trade_date, overrides.pop("amount", 1000))

    return _build


@pytest.fixture
def thresholds() -> ActivityThresholds:
    """Thresholds used by the scenario tests (1000 sat, 3 trades, no listings)."""
    return ActivityThresholds(
        window_days=120,
        min_trade_amount=1000,
        min_num_of_trades=3,
        grace_period=timedelta(days=120),
        listing_dates={},
    )


@pytest.fixture
def classifier(thresholds: ActivityThresholds) -> AssetActivityClassifier:
    return AssetActivityClassifier(thresholds)
