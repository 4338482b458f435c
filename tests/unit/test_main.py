# -*- coding: utf-8 -*-
"""Unit tests for the entry point."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any
from unittest.mock import Mock

import pytest
from dependency_injector import providers

from asset_trade_activity import main as main_module
from asset_trade_activity.config.config import Settings
from asset_trade_activity.DI import Container
from asset_trade_activity.exceptions import SourceIOError


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    settings = Settings(report={"output_path": str(tmp_path / "out" / "report.txt")})
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    return settings


def test_run_returns_and_writes_report(settings: Settings) -> None:
    container = Container()
    container.config.override(providers.Object(settings))

    report = main_module.run(container)

    assert report.startswith("Date for checking trade activity: ")
    assert settings.report.output_path is not None
    assert Path(settings.report.output_path).read_text(encoding="utf-8") == report + "\n"


def test_main_exits_with_error_on_source_failure(
    settings: Settings,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    failing = Mock(side_effect=SourceIOError("source I/O error: boom", source="trade_statistics"))
    monkeypatch.setattr(main_module, "run", failing)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1


def test_run_propagates_source_io_error(settings: Settings) -> None:
    check: Any = SimpleNamespace(run=Mock(side_effect=SourceIOError("source I/O error: x")))
    container = Container()
    container.config.override(providers.Object(settings))
    container.asset_trade_activity_check.override(providers.Object(check))

    with pytest.raises(SourceIOError):
        main_module.run(container)
