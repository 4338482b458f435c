# -*- coding: utf-8 -*-
"""Asset trade activity check (sync, no I/O besides the injected sources)."""

from asset_trade_activity.services.activity_check.activity_check_service import (
    AssetTradeActivityCheck,
)
from asset_trade_activity.services.activity_check.aggregation import (
    aggregate_trade_statistics,
    window_cutoff,
)
from asset_trade_activity.services.activity_check.classifier import (
    ActivityThresholds,
    AssetActivityClassifier,
)
from asset_trade_activity.services.activity_check.report_formatter import (
    ActivityReportFormatter,
)

__all__ = [
    "ActivityReportFormatter",
    "ActivityThresholds",
    "AssetActivityClassifier",
    "AssetTradeActivityCheck",
    "aggregate_trade_statistics",
    "window_cutoff",
]
