"""JSON source file types. Keys match the exported trade statistics / registry (camelCase)."""

from __future__ import annotations

from typing import TypedDict


class TradeStatisticsSchema(TypedDict, total=False):
    """Trade statistics file item."""

    baseCurrency: str
    tradeDate: int
    """Epoch milliseconds."""
    tradeAmount: int
    """Satoshi."""


class AssetSchema(TypedDict, total=False):
    """Whitelist entry in the asset registry file."""

    code: str
    name: str
    feePaid: bool


class AssetRegistrySchema(TypedDict, total=False):
    """Asset registry file root object."""

    whitelist: list[AssetSchema]
    cryptoCurrencies: list[str]
