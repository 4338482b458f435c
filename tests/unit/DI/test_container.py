# -*- coding: utf-8 -*-
"""Unit tests for the dependency injection container."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

from dependency_injector import providers

from asset_trade_activity.config.config import Settings
from asset_trade_activity.DI import Container
from asset_trade_activity.persistence.repositories.in_memory import (
    InMemoryAssetRegistry,
    InMemoryTradeStatisticsRepository,
)
from asset_trade_activity.persistence.repositories.json_file import (
    JsonFileAssetRegistry,
    JsonFileTradeStatisticsRepository,
)


def _container(settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    return container


def test_defaults_to_empty_in_memory_sources() -> None:
    container = _container(Settings(sources={}))

    assert isinstance(container.trade_statistics_repository(), InMemoryTradeStatisticsRepository)
    assert isinstance(container.asset_registry(), InMemoryAssetRegistry)
    assert "Assets to remove (0):" in container.asset_trade_activity_check().generate_report()


def test_uses_json_sources_and_activity_settings(tmp_path: Path) -> None:
    recent_ms = int((datetime.now(timezone.utc) - timedelta(days=2)).timestamp() * 1000)
    trades = tmp_path / "trades.json"
    trades.write_text(
        json.dumps([{"baseCurrency": "XMR", "tradeDate": recent_ms, "tradeAmount": 1}]),
        encoding="utf-8",
    )
    registry = tmp_path / "registry.json"
    registry.write_text(
        json.dumps({"whitelist": [{"code": "XMR", "name": "Monero"}, {"code": "ZEC"}]}),
        encoding="utf-8",
    )
    settings = Settings(
        sources={"trade_statistics_path": str(trades), "asset_registry_path": str(registry)},
        activity={"min_num_of_trades": 1},
    )
    container = _container(settings)

    assert isinstance(container.trade_statistics_repository(), JsonFileTradeStatisticsRepository)
    assert isinstance(container.asset_registry(), JsonFileAssetRegistry)
    assert container.activity_thresholds().min_num_of_trades == 1

    text = container.asset_trade_activity_check().generate_report()

    assert "Assets to remove (1):\nZEC" in text
    assert "Monero (XMR): Trade amount: 0.00000001 BTC, number of trades: 1" in text
