# -*- coding: utf-8 -*-
"""Unit tests for coin formatting helpers."""

from __future__ import annotations

import pytest

from asset_trade_activity.utils.coin_format import format_coin, parse_coin


@pytest.mark.parametrize(
    ("satoshis", "expected"),
    [
        (0, "0.00 BTC"),
        (100_000_000, "1.00 BTC"),
        (150_000_000, "1.50 BTC"),
        (100_000, "0.001 BTC"),
        (2000, "0.00002 BTC"),
        (1, "0.00000001 BTC"),
        (123_456_789, "1.23456789 BTC"),
    ],
)
def test_format_coin_keeps_two_to_eight_decimals(satoshis: int, expected: str) -> None:
    assert format_coin(satoshis) == expected


def test_format_coin_uses_given_code() -> None:
    assert format_coin(50_000_000, "LTC") == "0.50 LTC"


def test_parse_coin_converts_to_satoshi() -> None:
    assert parse_coin("0.001") == 100_000
    assert parse_coin(" 1 ") == 100_000_000
    assert parse_coin("0.00000001") == 1


@pytest.mark.parametrize("text", ["abc", "", "0.000000001"])
def test_parse_coin_rejects_invalid_amounts(text: str) -> None:
    with pytest.raises(ValueError):
        parse_coin(text)
