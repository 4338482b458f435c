"""Dependency injection."""

from asset_trade_activity.DI.container import Container

__all__ = ["Container"]
