"""Bitcoin amount formatting for human-readable reports."""

from __future__ import annotations

from decimal import Decimal

SATOSHIS_PER_COIN_EXPONENT = 8
MIN_DECIMALS = 2


def format_coin(amount: int, code: str = "BTC") -> str:
    """Return a friendly string for an amount in satoshi, e.g. 100000 -> '0.001 BTC'.

    Shows at least two decimals and at most eight; trailing zeros beyond the
    second decimal are dropped (1 BTC -> '1.00 BTC', 2000 sat -> '0.00002 BTC').
    """
    value = Decimal(int(amount)).scaleb(-SATOSHIS_PER_COIN_EXPONENT)
    text = f"{value:.{SATOSHIS_PER_COIN_EXPONENT}f}".rstrip("0")
    whole, _, fraction = text.partition(".")
    fraction = fraction.ljust(MIN_DECIMALS, "0")
    return f"{whole}.{fraction} {code}"


def parse_coin(text: str) -> int:
    """Parse a decimal coin amount (e.g. '0.001') into satoshi.

    Raises:
        ValueError: if the text is not a number or has more than eight decimals.
    """
    try:
        value = Decimal(text.strip())
    except ArithmeticError as e:
        raise ValueError(f"not a coin amount: {text!r}") from e
    satoshis = value.scaleb(SATOSHIS_PER_COIN_EXPONENT)
    if satoshis != satoshis.to_integral_value():
        raise ValueError(f"more than {SATOSHIS_PER_COIN_EXPONENT} decimals: {text!r}")
    return int(satoshis)
