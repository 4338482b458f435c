# -*- coding: utf-8 -*-
"""Plain-text rendering of an ActivityReport."""

from __future__ import annotations

from asset_trade_activity.models.activity import (
    ActivityCategory,
    ActivityReport,
    AssetClassification,
)
from asset_trade_activity.utils.coin_format import format_coin

# Section order in the report; FEE_PAID assets are never listed.
SECTION_TITLES: dict[ActivityCategory, str] = {
    ActivityCategory.INSUFFICIENTLY_TRADED: "Insufficiently traded assets:",
    ActivityCategory.NOT_TRADED: "Not traded assets:",
    ActivityCategory.NEWLY_ADDED: "New assets (in warming up phase):",
    ActivityCategory.SUFFICIENTLY_TRADED: "Sufficiently traded assets:",
}


class ActivityReportFormatter:
    """Renders the header, the removal list and the four category sections."""

    def __init__(self, amount_code: str = "BTC") -> None:
        self._amount_code = amount_code

    def format_entry(self, classification: AssetClassification) -> str:
        label = classification.asset.name_and_code
        if classification.category is ActivityCategory.NOT_TRADED:
            return label
        amount = format_coin(classification.trade_amount, self._amount_code)
        return f"{label}: Trade amount: {amount}, number of trades: {classification.trade_count}"

    def format(self, report: ActivityReport) -> str:
        to_remove = report.assets_to_remove
        blocks = [
            f"Date for checking trade activity: {report.cutoff.strftime('%Y-%m-%d')}",
            "\n".join([f"Assets to remove ({len(to_remove)}):", *(a.code for a in to_remove)]),
        ]
        for category, title in SECTION_TITLES.items():
            entries = [self.format_entry(c) for c in report.bucket(category)]
            blocks.append("\n".join([title, *entries]))
        return "\n\n".join(blocks)
