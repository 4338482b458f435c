# -*- coding: utf-8 -*-
"""Application services."""

from asset_trade_activity.services.activity_check import (
    ActivityReportFormatter,
    ActivityThresholds,
    AssetActivityClassifier,
    AssetTradeActivityCheck,
)

__all__ = [
    "ActivityReportFormatter",
    "ActivityThresholds",
    "AssetActivityClassifier",
    "AssetTradeActivityCheck",
]
