# -*- coding: utf-8 -*-
"""Unit tests for listing date parsing."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from asset_trade_activity.exceptions import InvalidListingDateError
from asset_trade_activity.utils.listing_dates import parse_listing_dates


def test_empty_input_gives_empty_mapping() -> None:
    assert parse_listing_dates("") == {}
    assert parse_listing_dates("  ") == {}


def test_parses_dates_and_datetimes_as_utc() -> None:
    result = parse_listing_dates(
        "XYZ=2026-09-01, ABC=2026-10-02T12:30:00+02:00 ,DEF=2026-10-03T08:00:00"
    )

    assert result == {
        "XYZ": datetime(2026, 9, 1, tzinfo=timezone.utc),
        "ABC": datetime(2026, 10, 2, 10, 30, tzinfo=timezone.utc),
        "DEF": datetime(2026, 10, 3, 8, 0, tzinfo=timezone.utc),
    }


def test_ignores_empty_entries_and_keeps_last_duplicate() -> None:
    result = parse_listing_dates("XYZ=2026-09-01,,XYZ=2026-09-05,")

    assert result == {"XYZ": datetime(2026, 9, 5, tzinfo=timezone.utc)}


@pytest.mark.parametrize("raw", ["XYZ", "=2026-09-01", "XYZ=yesterday", "XYZ=2026-13-01"])
def test_invalid_entries_raise(raw: str) -> None:
    with pytest.raises(InvalidListingDateError):
        parse_listing_dates(raw)


def test_invalid_listing_date_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="expected CODE=DATE"):
        parse_listing_dates("XYZ")
