# -*- coding: utf-8 -*-
"""In-memory asset registry (keyed by currency code)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from asset_trade_activity.models.asset import Asset
from asset_trade_activity.persistence.repositories.interfaces.asset_registry import (
    IAssetRegistry,
)


class InMemoryAssetRegistry(IAssetRegistry):
    """In-memory implementation of IAssetRegistry.

    Every whitelisted code is a crypto currency; extra_crypto_codes adds
    registered assets that are not (or no longer) whitelisted.
    """

    def __init__(
        self,
        whitelist: Sequence[Asset] = (),
        *,
        extra_crypto_codes: Iterable[str] = (),
    ) -> None:
        """Initialize the registry from an ordered whitelist; repeated codes keep the first entry."""
        self._whitelist: list[Asset] = []
        self._by_code: dict[str, Asset] = {}
        for asset in whitelist:
            if asset.code in self._by_code:
                continue
            self._by_code[asset.code] = asset
            self._whitelist.append(asset)
        self._crypto_codes: set[str] = set(self._by_code) | {
            c.strip() for c in extra_crypto_codes if c.strip()
        }

    def get_whitelisted_assets(self) -> list[Asset]:
        """Return the whitelisted assets in registry order."""
        return list(self._whitelist)

    def has_paid_listing_fee(self, code: str) -> bool:
        """Return the fee_paid flag of the asset; False for unknown codes."""
        asset = self._by_code.get(code.strip())
        return asset is not None and asset.fee_paid

    def is_crypto_currency(self, code: str) -> bool:
        """Return True if code is whitelisted or listed as an extra crypto code."""
        return code.strip() in self._crypto_codes
