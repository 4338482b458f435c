"""Asset: a crypto-currency registered for trading on the platform."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Asset:
    """Whitelisted asset as supplied by the asset registry.

    Identity: code.
    """

    code: str
    name: str | None = None
    fee_paid: bool = False
    """Stored listing fee status.

    The in-memory and JSON registries answer has_paid_listing_fee from this
    field. Services never read it directly; they ask the registry.
    """

    @property
    def name_and_code(self) -> str:
        """Display label, e.g. 'Monero (XMR)', or just the code when the name is unknown."""
        if self.name and self.name != self.code:
            return f"{self.name} ({self.code})"
        return self.code

    @classmethod
    def create(
        cls,
        code: str,
        *,
        name: str | None = None,
        fee_paid: bool = False,
    ) -> Asset:
        """Create an Asset with a stripped, non-empty code."""
        code = code.strip()
        if not code:
            raise ValueError("code must be non-empty")
        name = name.strip() if name else None
        return cls(code=code, name=name or None, fee_paid=fee_paid)
