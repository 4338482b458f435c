# -*- coding: utf-8 -*-
"""
Entry point for the asset trade activity check.

Orchestrates: logging, settings, container, one report run, optional report file.
Trades flow: trade statistics source -> AssetTradeActivityCheck -> report text (logged).

Run with: python -m asset_trade_activity.main
"""
from __future__ import annotations

import sys
from pathlib import Path

import structlog

from asset_trade_activity.DI import Container
from asset_trade_activity.config import get_settings
from asset_trade_activity.exceptions import SourceIOError
from asset_trade_activity.logging.config import configure_logging


def _write_report(path: str, text: str) -> None:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")


def run(container: Container | None = None) -> str:
    """Build and log one activity report. Returns the report text.

    Raises:
        SourceIOError: if the trade statistics source or the asset registry fails.
    """
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    container = container or Container()

    activity_check = container.asset_trade_activity_check()
    logger.info(
        "main_activity_check_started",
        window_days=settings.activity.window_days,
        min_trade_amount_sat=settings.activity.min_trade_amount_sat,
        min_num_of_trades=settings.activity.min_num_of_trades,
        trade_statistics_path=settings.sources.trade_statistics_path,
        asset_registry_path=settings.sources.asset_registry_path,
    )
    report = activity_check.run()

    output_path = settings.report.output_path
    if output_path:
        _write_report(output_path, report)
        logger.info("main_report_written", output_path=output_path)
    return report


def main() -> None:
    try:
        run()
    except SourceIOError as e:
        structlog.get_logger("main").error(
            "main_activity_check_failed",
            source=e.source,
            error_message=str(e),
        )
        sys.exit(1)


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
