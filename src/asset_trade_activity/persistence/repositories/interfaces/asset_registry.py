"""Abstract interface for the asset registry (whitelist and listing fee status)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from asset_trade_activity.models.asset import Asset


class IAssetRegistry(ABC):
    """Read-only view of the registered crypto assets."""

    @abstractmethod
    def get_whitelisted_assets(self) -> list[Asset]:
        """Return the whitelisted assets in registry order."""
        ...

    @abstractmethod
    def has_paid_listing_fee(self, code: str) -> bool:
        """Return True if the listing fee for code has been paid.

        This is the only fee status the activity check consults. Registries
        that keep it on the asset read Asset.fee_paid.
        """
        ...

    @abstractmethod
    def is_crypto_currency(self, code: str) -> bool:
        """Return True if code is a recognized crypto asset (whitelisted or not)."""
        ...
