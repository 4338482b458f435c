# -*- coding: utf-8 -*-
"""Activity classification types.

AggregateEntry and AssetClassification are built fresh for every report and
never persisted. ActivityReport is the structured result that the formatter
turns into text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from asset_trade_activity.models.asset import Asset


class ActivityCategory(str, Enum):
    """Outcome of the activity check for one whitelisted asset."""

    NEWLY_ADDED = "NEWLY_ADDED"
    """In the warm-up period; exempt from removal."""
    SUFFICIENTLY_TRADED = "SUFFICIENTLY_TRADED"
    """Met the amount or the trade count threshold; exempt from removal."""
    INSUFFICIENTLY_TRADED = "INSUFFICIENTLY_TRADED"
    """Traded in the window but below both thresholds; removal candidate."""
    NOT_TRADED = "NOT_TRADED"
    """No trade in the window; removal candidate."""
    FEE_PAID = "FEE_PAID"
    """Listing fee paid; exempt from removal and not part of any report section."""

    @property
    def is_removal_candidate(self) -> bool:
        return self in (ActivityCategory.INSUFFICIENTLY_TRADED, ActivityCategory.NOT_TRADED)


@dataclass(slots=True)
class AggregateEntry:
    """Running total of trade amount and count for one currency code."""

    code: str
    total_amount: int = 0
    trade_count: int = 0

    def add(self, trade_amount: int) -> None:
        """Account for one more trade."""
        self.total_amount += trade_amount
        self.trade_count += 1


@dataclass(frozen=True, slots=True)
class AssetClassification:
    """Classification of one whitelisted asset, with the aggregate it was based on."""

    asset: Asset
    category: ActivityCategory
    aggregate: AggregateEntry | None = None
    """None when the asset had no trade in the window."""

    @property
    def code(self) -> str:
        return self.asset.code

    @property
    def trade_amount(self) -> int:
        return self.aggregate.total_amount if self.aggregate is not None else 0

    @property
    def trade_count(self) -> int:
        return self.aggregate.trade_count if self.aggregate is not None else 0

    @property
    def is_removal_candidate(self) -> bool:
        return self.category.is_removal_candidate


@dataclass(frozen=True)
class ActivityReport:
    """Result of one activity check run."""

    generated_at: datetime
    cutoff: datetime
    """Trades at or before this instant were ignored."""
    classifications: tuple[AssetClassification, ...] = field(default_factory=tuple)
    """One entry per whitelisted asset, in registry order."""

    @property
    def assets_to_remove(self) -> list[Asset]:
        """Removal candidates sorted ascending by code."""
        return sorted(
            (c.asset for c in self.classifications if c.is_removal_candidate),
            key=lambda a: a.code,
        )

    def bucket(self, category: ActivityCategory) -> list[AssetClassification]:
        """Classifications in the given category, in registry order."""
        return [c for c in self.classifications if c.category is category]

    def counts(self) -> dict[ActivityCategory, int]:
        """Number of assets per category (all categories present, possibly zero)."""
        result = {category: 0 for category in ActivityCategory}
        for c in self.classifications:
            result[c.category] += 1
        return result
