"""Custom exceptions for the asset trade activity check."""

from __future__ import annotations


class AssetActivityError(Exception):
    """Base exception for asset trade activity errors."""

    pass


class SourceIOError(AssetActivityError):
    """Raised when a trade statistics source or the asset registry cannot be read."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause


class InvalidListingDateError(AssetActivityError, ValueError):
    """Raised when a configured listing date entry cannot be parsed."""

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"Invalid listing date entry {entry!r}: {reason}")
        self.entry = entry
        self.reason = reason
