# -*- coding: utf-8 -*-
"""Utility modules."""

from asset_trade_activity.utils.coin_format import format_coin, parse_coin
from asset_trade_activity.utils.datetimes import as_utc
from asset_trade_activity.utils.listing_dates import parse_listing_dates

__all__ = ["as_utc", "format_coin", "parse_coin", "parse_listing_dates"]
