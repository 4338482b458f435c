# -*- coding: utf-8 -*-
"""Unit tests for domain models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from asset_trade_activity.models.activity import (
    ActivityCategory,
    ActivityReport,
    AggregateEntry,
    AssetClassification,
)
from asset_trade_activity.models.asset import Asset
from asset_trade_activity.models.trade_record import TradeRecord


def test_trade_record_create_normalizes_code_and_timezone() -> None:
    naive = datetime(2026, 1, 2, 3, 4, 5)
    aware = datetime(2026, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))

    a = TradeRecord.create(" XMR ", naive, 10)
    b = TradeRecord.create("XMR", aware, 10)

    assert a.base_currency == "XMR"
    assert a.trade_date == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert b.trade_date == a.trade_date


def test_trade_record_constructor_takes_naive_date_as_utc() -> None:
    record = TradeRecord("XYZ", datetime(2026, 2, 1, 8, 30), 5)

    assert record.trade_date == datetime(2026, 2, 1, 8, 30, tzinfo=timezone.utc)
    assert record.trade_date.tzinfo is not None


def test_trade_record_requires_code() -> None:
    with pytest.raises(ValueError):
        TradeRecord.create("  ", datetime.now(timezone.utc), 1)


def test_asset_name_and_code() -> None:
    assert Asset.create("XMR", name="Monero").name_and_code == "Monero (XMR)"
    assert Asset.create("XMR").name_and_code == "XMR"
    assert Asset.create("XMR", name="XMR").name_and_code == "XMR"


def test_asset_requires_code() -> None:
    with pytest.raises(ValueError):
        Asset.create("")


def test_aggregate_entry_add_accumulates() -> None:
    entry = AggregateEntry(code="XMR")
    entry.add(100)
    entry.add(250)

    assert (entry.total_amount, entry.trade_count) == (350, 2)


@pytest.mark.parametrize(
    ("category", "candidate"),
    [
        (ActivityCategory.NEWLY_ADDED, False),
        (ActivityCategory.SUFFICIENTLY_TRADED, False),
        (ActivityCategory.FEE_PAID, False),
        (ActivityCategory.INSUFFICIENTLY_TRADED, True),
        (ActivityCategory.NOT_TRADED, True),
    ],
)
def test_removal_candidates_by_category(category: ActivityCategory, candidate: bool) -> None:
    assert category.is_removal_candidate is candidate


def test_report_counts_cover_all_categories(now_utc: datetime) -> None:
    report = ActivityReport(
        generated_at=now_utc,
        cutoff=now_utc - timedelta(days=120),
        classifications=(
            AssetClassification(Asset.create("A"), ActivityCategory.NOT_TRADED),
            AssetClassification(Asset.create("B"), ActivityCategory.NOT_TRADED),
        ),
    )

    counts = report.counts()

    assert counts[ActivityCategory.NOT_TRADED] == 2
    assert counts[ActivityCategory.NEWLY_ADDED] == 0
    assert set(counts) == set(ActivityCategory)
