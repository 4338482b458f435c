# -*- coding: utf-8 -*-
"""AssetActivityClassifier: pure logic deciding the activity category of each whitelisted asset.

No I/O. Receives aggregates, fee status and the current time from the orchestrator.
Order of checks: warm-up, fee paid, thresholds (amount OR count, inclusive), traded at all.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from asset_trade_activity.models.activity import (
    ActivityCategory,
    AggregateEntry,
    AssetClassification,
)
from asset_trade_activity.models.asset import Asset
from asset_trade_activity.utils.datetimes import as_utc

if TYPE_CHECKING:
    from asset_trade_activity.config import ActivitySettings


@dataclass(frozen=True)
class ActivityThresholds:
    """Parameters of the activity check."""

    window_days: int = 120
    min_trade_amount: int = 100_000
    """Satoshi (0.001 BTC)."""
    min_num_of_trades: int = 3
    grace_period: timedelta = timedelta(days=120)
    listing_dates: Mapping[str, datetime] = field(default_factory=dict)
    """Code -> listed since (UTC). Codes without a date never warm up."""

    @classmethod
    def from_settings(cls, settings: "ActivitySettings") -> ActivityThresholds:
        """Build thresholds from ACTIVITY__* settings."""
        return cls(
            window_days=settings.window_days,
            min_trade_amount=settings.min_trade_amount_sat,
            min_num_of_trades=settings.min_num_of_trades,
            grace_period=timedelta(days=settings.grace_period_days),
            listing_dates=dict(settings.listing_dates),
        )


class AssetActivityClassifier:
    """Classifies whitelisted assets by trade activity."""

    def __init__(self, thresholds: ActivityThresholds | None = None) -> None:
        self._thresholds = thresholds or ActivityThresholds()

    @property
    def thresholds(self) -> ActivityThresholds:
        return self._thresholds

    def is_warming_up(self, code: str, now: datetime) -> bool:
        """True if code was listed less than grace_period ago (or is listed in the future)."""
        listed_since = self._thresholds.listing_dates.get(code)
        if listed_since is None:
            return False
        return as_utc(listed_since) > as_utc(now) - self._thresholds.grace_period

    def is_sufficiently_traded(self, aggregate: AggregateEntry) -> bool:
        """Amount OR count threshold met (both inclusive)."""
        return (
            aggregate.total_amount >= self._thresholds.min_trade_amount
            or aggregate.trade_count >= self._thresholds.min_num_of_trades
        )

    def classify(
        self,
        asset: Asset,
        aggregate: AggregateEntry | None,
        *,
        now: datetime,
        fee_paid: bool,
    ) -> AssetClassification:
        """Return the classification of one asset.

        A newly added asset is NEWLY_ADDED even when its fee is paid.
        """
        if self.is_warming_up(asset.code, now):
            category = ActivityCategory.NEWLY_ADDED
        elif fee_paid:
            category = ActivityCategory.FEE_PAID
        elif aggregate is None:
            category = ActivityCategory.NOT_TRADED
        elif self.is_sufficiently_traded(aggregate):
            category = ActivityCategory.SUFFICIENTLY_TRADED
        else:
            category = ActivityCategory.INSUFFICIENTLY_TRADED
        return AssetClassification(asset=asset, category=category, aggregate=aggregate)

    def classify_all(
        self,
        whitelist: Sequence[Asset],
        aggregates: Mapping[str, AggregateEntry],
        *,
        now: datetime,
        has_paid_listing_fee: Callable[[str], bool],
    ) -> tuple[AssetClassification, ...]:
        """Classify every whitelisted asset, keeping whitelist order."""
        return tuple(
            self.classify(
                asset,
                aggregates.get(asset.code),
                now=now,
                fee_paid=has_paid_listing_fee(asset.code),
            )
            for asset in whitelist
        )
