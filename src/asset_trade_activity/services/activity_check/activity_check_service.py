# -*- coding: utf-8 -*-
"""AssetTradeActivityCheck: builds the delisting report from trade statistics and the asset registry.

Flow: read sources -> filter + aggregate -> classify -> format.
Single synchronous pass; nothing is persisted between runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import structlog

from asset_trade_activity.exceptions import SourceIOError
from asset_trade_activity.models.activity import ActivityCategory, ActivityReport
from asset_trade_activity.models.asset import Asset
from asset_trade_activity.models.trade_record import TradeRecord
from asset_trade_activity.persistence.repositories.interfaces.asset_registry import (
    IAssetRegistry,
)
from asset_trade_activity.persistence.repositories.interfaces.trade_statistics_repository import (
    ITradeStatisticsRepository,
)
from asset_trade_activity.services.activity_check.aggregation import (
    aggregate_trade_statistics,
    window_cutoff,
)
from asset_trade_activity.services.activity_check.classifier import AssetActivityClassifier
from asset_trade_activity.utils.datetimes import as_utc
from asset_trade_activity.services.activity_check.report_formatter import (
    ActivityReportFormatter,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class _SourceSnapshot:
    """Everything read from the sources for one run."""

    trades: list[TradeRecord]
    whitelist: list[Asset]
    crypto_codes: frozenset[str]
    fee_paid_codes: frozenset[str]


class AssetTradeActivityCheck:
    """Classifies whitelisted assets by recent trade activity and reports removal candidates."""

    def __init__(
        self,
        trade_statistics_repository: ITradeStatisticsRepository,
        asset_registry: IAssetRegistry,
        classifier: AssetActivityClassifier,
        formatter: ActivityReportFormatter | None = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the activity check.

        Args:
            trade_statistics_repository: Trade statistics source (injected).
            asset_registry: Whitelist and listing fee status (injected).
            classifier: Threshold and warm-up logic (injected).
            formatter: Report renderer (defaults to ActivityReportFormatter()).
            clock: Returns the current time (UTC); the window ends there.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._trades_repo = trade_statistics_repository
        self._registry = asset_registry
        self._classifier = classifier
        self._formatter = formatter or ActivityReportFormatter()
        self._clock = clock
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _read_sources(self) -> _SourceSnapshot:
        """Read trades, whitelist, crypto recognition and fee status in one step.

        Raises:
            SourceIOError: wrapping any failure raised by a source.
        """
        source = "trade_statistics"
        try:
            trades = self._trades_repo.list_all()
            source = "asset_registry"
            whitelist = self._registry.get_whitelisted_assets()
            traded_codes = {t.base_currency for t in trades}
            crypto_codes = frozenset(c for c in traded_codes if self._registry.is_crypto_currency(c))
            fee_paid_codes = frozenset(
                a.code for a in whitelist if self._registry.has_paid_listing_fee(a.code)
            )
        except SourceIOError as e:
            self._logger.exception(
                "asset_activity_source_error",
                source=e.source or source,
                error_type=type(e.cause or e).__name__,
                error_message=str(e),
            )
            raise
        except Exception as e:
            self._logger.exception(
                "asset_activity_source_error",
                source=source,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise SourceIOError(
                f"source I/O error: {source} failed: {e}", source=source, cause=e
            ) from e
        return _SourceSnapshot(
            trades=trades,
            whitelist=whitelist,
            crypto_codes=crypto_codes,
            fee_paid_codes=fee_paid_codes,
        )

    def build_report(self) -> ActivityReport:
        """Run the check and return the structured report.

        Raises:
            SourceIOError: if a source fails.
        """
        now = as_utc(self._clock())
        cutoff = window_cutoff(now, self._classifier.thresholds.window_days)
        snapshot = self._read_sources()

        aggregates = aggregate_trade_statistics(
            snapshot.trades,
            cutoff=cutoff,
            is_crypto_currency=snapshot.crypto_codes.__contains__,
        )
        self._logger.debug(
            "asset_activity_trades_aggregated",
            trades_total=len(snapshot.trades),
            traded_codes=len(aggregates),
            cutoff=cutoff.isoformat(),
        )

        classifications = self._classifier.classify_all(
            snapshot.whitelist,
            aggregates,
            now=now,
            has_paid_listing_fee=snapshot.fee_paid_codes.__contains__,
        )
        report = ActivityReport(generated_at=now, cutoff=cutoff, classifications=classifications)

        counts = report.counts()
        self._logger.info(
            "asset_activity_report_built",
            whitelisted=len(snapshot.whitelist),
            assets_to_remove=len(report.assets_to_remove),
            newly_added=counts[ActivityCategory.NEWLY_ADDED],
            sufficiently_traded=counts[ActivityCategory.SUFFICIENTLY_TRADED],
            insufficiently_traded=counts[ActivityCategory.INSUFFICIENTLY_TRADED],
            not_traded=counts[ActivityCategory.NOT_TRADED],
            fee_paid=counts[ActivityCategory.FEE_PAID],
        )
        return report

    def generate_report(self) -> str:
        """Run the check and return the report text."""
        return self._formatter.format(self.build_report())

    def run(self) -> str:
        """Generate the report and log it (startup hook). Returns the report text."""
        text = self.generate_report()
        self._logger.info("asset_activity_report", report=text)
        return text
