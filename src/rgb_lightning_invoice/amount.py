"""Exact HRP amount to milli-satoshi conversion.

1 BTC = 100,000,000 sat = 100,000,000,000 msat, so the multipliers scale
to msat as: m = 100,000,000  u = 100,000  n = 100  p = 1/10.
"""

from __future__ import annotations

_MSAT_PER_UNIT: dict[str, int] = {
    "m": 100_000_000,
    "u": 100_000,
    "n": 100,
}


def normalize_amount_msat(amount: int | None, multiplier: str | None) -> int | None:
    """Convert an HRP amount and multiplier into whole milli-satoshis.

    An amount with no multiplier is read as pico-bitcoin, the same as "p",
    which matches the RGB Lightning node. Sub-msat remainders are floored.

    Returns:
        Amount in msat, or None when the invoice carries no amount.

    Raises:
        ValueError: On a multiplier other than m, u, n or p.
    """
    if amount is None:
        return None

    if multiplier is None or multiplier == "p":
        return amount // 10

    try:
        return amount * _MSAT_PER_UNIT[multiplier]
    except KeyError:
        raise ValueError(f"Unknown amount multiplier: {multiplier!r}") from None
