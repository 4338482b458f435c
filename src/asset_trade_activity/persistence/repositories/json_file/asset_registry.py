# -*- coding: utf-8 -*-
"""Asset registry read from a JSON file (AssetRegistrySchema)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog

from asset_trade_activity.exceptions import SourceIOError
from asset_trade_activity.models.asset import Asset
from asset_trade_activity.persistence.repositories.in_memory.asset_registry import (
    InMemoryAssetRegistry,
)
from asset_trade_activity.persistence.repositories.interfaces.asset_registry import (
    IAssetRegistry,
)
from asset_trade_activity.persistence.repositories.json_file._io import load_json
from asset_trade_activity.persistence.repositories.json_file.schema import AssetSchema

SOURCE_NAME = "asset_registry"


def _parse_asset(item: AssetSchema) -> Asset | None:
    """Build an Asset from a whitelist entry. None if invalid."""
    code = item.get("code")
    if not isinstance(code, str) or not code.strip():
        return None
    name = item.get("name")
    fee_paid = item.get("feePaid", False)
    return Asset.create(
        code,
        name=name if isinstance(name, str) else None,
        fee_paid=fee_paid is True,
    )


class JsonFileAssetRegistry(IAssetRegistry):
    """Asset registry backed by a JSON file, loaded once on first access."""

    def __init__(
        self,
        path: str | Path,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            path: JSON file with a 'whitelist' array and optional 'cryptoCurrencies'.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._path = Path(path)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._loaded: InMemoryAssetRegistry | None = None

    def _registry(self) -> InMemoryAssetRegistry:
        if self._loaded is None:
            self._loaded = self._load()
        return self._loaded

    def _load(self) -> InMemoryAssetRegistry:
        raw = load_json(self._path, source=SOURCE_NAME)
        if not isinstance(raw, dict) or not isinstance(raw.get("whitelist", []), list):
            raise SourceIOError(
                f"source I/O error: expected an object with a 'whitelist' array in {self._path}",
                source=SOURCE_NAME,
            )

        whitelist: list[Asset] = []
        seen: set[str] = set()
        invalid_items = 0
        for item in raw.get("whitelist", []):
            asset = _parse_asset(item) if isinstance(item, dict) else None
            if asset is None or asset.code in seen:
                invalid_items += 1
                continue
            seen.add(asset.code)
            whitelist.append(asset)

        extra = [c for c in raw.get("cryptoCurrencies") or [] if isinstance(c, str)]
        if invalid_items:
            self._logger.warning(
                "asset_registry_invalid_items_skipped",
                path=str(self._path),
                invalid_items=invalid_items,
            )
        self._logger.debug(
            "asset_registry_loaded",
            path=str(self._path),
            whitelisted=len(whitelist),
            extra_crypto_codes=len(extra),
        )
        return InMemoryAssetRegistry(whitelist, extra_crypto_codes=extra)

    def get_whitelisted_assets(self) -> list[Asset]:
        """Return the whitelisted assets in file order."""
        return self._registry().get_whitelisted_assets()

    def has_paid_listing_fee(self, code: str) -> bool:
        """Return the feePaid flag of the whitelist entry; False for unknown codes."""
        return self._registry().has_paid_listing_fee(code)

    def is_crypto_currency(self, code: str) -> bool:
        """Return True if code is whitelisted or listed under cryptoCurrencies."""
        return self._registry().is_crypto_currency(code)
