# -*- coding: utf-8 -*-
"""Domain models."""

from asset_trade_activity.models.activity import (
    ActivityCategory,
    ActivityReport,
    AggregateEntry,
    AssetClassification,
)
from asset_trade_activity.models.asset import Asset
from asset_trade_activity.models.trade_record import TradeRecord

__all__ = [
    "ActivityCategory",
    "ActivityReport",
    "AggregateEntry",
    "Asset",
    "AssetClassification",
    "TradeRecord",
]
