"""Parsing of configured asset listing dates (code -> listed since)."""

from __future__ import annotations

from datetime import UTC, date, datetime

from asset_trade_activity.exceptions import InvalidListingDateError
from asset_trade_activity.utils.datetimes import as_utc


def _parse_when(value: str) -> datetime:
    """Parse an ISO date or datetime; naive values are taken as UTC midnight / UTC time."""
    if "T" not in value and " " not in value:
        d = date.fromisoformat(value)
        return datetime(d.year, d.month, d.day, tzinfo=UTC)
    return as_utc(datetime.fromisoformat(value))


def parse_listing_dates(raw: str) -> dict[str, datetime]:
    """Parse 'CODE=YYYY-MM-DD,CODE2=YYYY-MM-DDTHH:MM:SS+00:00' into a code -> datetime mapping.

    Empty input gives an empty mapping. A code listed twice keeps the last date.

    Raises:
        InvalidListingDateError: on an entry without '=', an empty code or an unparseable date.
    """
    result: dict[str, datetime] = {}
    if not raw or not raw.strip():
        return result
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        code, sep, when = entry.partition("=")
        code = code.strip()
        when = when.strip()
        if not sep:
            raise InvalidListingDateError(entry, "expected CODE=DATE")
        if not code:
            raise InvalidListingDateError(entry, "empty currency code")
        try:
            result[code] = _parse_when(when)
        except ValueError as e:
            raise InvalidListingDateError(entry, str(e)) from e
    return result
