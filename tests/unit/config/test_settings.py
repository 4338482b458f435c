# -*- coding: utf-8 -*-
"""Unit tests for settings."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from asset_trade_activity.config.config import ActivitySettings, Settings


def test_activity_defaults() -> None:
    settings = ActivitySettings()

    assert settings.window_days == 120
    assert settings.min_trade_amount_sat == 100_000
    assert settings.min_num_of_trades == 3
    assert settings.grace_period_days == 120
    assert settings.listing_dates == {}


def test_activity_aliases_and_computed_fields() -> None:
    settings = ActivitySettings(
        min_trade_amount="0.01",
        listing_dates="XYZ=2026-09-01",
    )

    assert settings.min_trade_amount_sat == 1_000_000
    assert settings.listing_dates == {"XYZ": datetime(2026, 9, 1, tzinfo=timezone.utc)}


def test_invalid_listing_dates_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ActivitySettings(listing_dates="XYZ")


@pytest.mark.parametrize("amount", ["abc", "-1"])
def test_invalid_min_trade_amount_is_rejected(amount: str) -> None:
    with pytest.raises(ValidationError):
        ActivitySettings(min_trade_amount=amount)


def test_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTIVITY__WINDOW_DAYS", "90")
    monkeypatch.setenv("ACTIVITY__LISTING_DATES", "NEW=2026-02-01")
    monkeypatch.setenv("SOURCES__ASSET_REGISTRY_PATH", "registry.json")

    settings = Settings.from_env()

    assert settings.activity.window_days == 90
    assert settings.activity.listing_dates == {"NEW": datetime(2026, 2, 1, tzinfo=timezone.utc)}
    assert settings.sources.asset_registry_path == "registry.json"
    assert settings.sources.trade_statistics_path is None
