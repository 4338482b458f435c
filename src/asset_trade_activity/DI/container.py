# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from asset_trade_activity.config import Settings, get_settings
from asset_trade_activity.persistence.repositories.in_memory import (
    InMemoryAssetRegistry,
    InMemoryTradeStatisticsRepository,
)
from asset_trade_activity.persistence.repositories.interfaces import (
    IAssetRegistry,
    ITradeStatisticsRepository,
)
from asset_trade_activity.persistence.repositories.json_file import (
    JsonFileAssetRegistry,
    JsonFileTradeStatisticsRepository,
)
from asset_trade_activity.services.activity_check import (
    ActivityReportFormatter,
    ActivityThresholds,
    AssetActivityClassifier,
    AssetTradeActivityCheck,
)


def _build_trade_statistics_repository(settings: Settings) -> ITradeStatisticsRepository:
    """JSON file source when SOURCES__TRADE_STATISTICS_PATH is set, else an empty in-memory one."""
    path = settings.sources.trade_statistics_path
    if path:
        return JsonFileTradeStatisticsRepository(path)
    return InMemoryTradeStatisticsRepository()


def _build_asset_registry(settings: Settings) -> IAssetRegistry:
    """JSON file registry when SOURCES__ASSET_REGISTRY_PATH is set, else an empty in-memory one."""
    path = settings.sources.asset_registry_path
    if path:
        return JsonFileAssetRegistry(path)
    return InMemoryAssetRegistry()


def _build_thresholds(settings: Settings) -> ActivityThresholds:
    return ActivityThresholds.from_settings(settings.activity)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, sources, classifier and the activity check."""

    config = providers.Callable(get_settings)

    trade_statistics_repository = providers.Singleton(
        _build_trade_statistics_repository,
        config,
    )

    asset_registry = providers.Singleton(_build_asset_registry, config)

    activity_thresholds = providers.Singleton(_build_thresholds, config)

    activity_classifier = providers.Singleton(
        AssetActivityClassifier,
        thresholds=activity_thresholds,
    )

    report_formatter = providers.Singleton(ActivityReportFormatter)

    asset_trade_activity_check = providers.Singleton(
        AssetTradeActivityCheck,
        trade_statistics_repository=trade_statistics_repository,
        asset_registry=asset_registry,
        classifier=activity_classifier,
        formatter=report_formatter,
    )
