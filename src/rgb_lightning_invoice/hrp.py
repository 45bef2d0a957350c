"""Human-readable part parsing.

BOLT11 prefix format: ln{currency}{amount}{multiplier}
Multipliers: m (milli), u (micro), n (nano), p (pico)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from rgb_lightning_invoice.exceptions import InvalidHrpError


class Network(str, Enum):
    """Bitcoin network an invoice targets, named as the RGB node reports it."""

    MAINNET = "Mainnet"
    TESTNET = "Testnet"
    REGTEST = "Regtest"
    SIGNET = "Signet"
    UNKNOWN = "Unknown"


_NETWORKS: dict[str, Network] = {
    "bc": Network.MAINNET,
    "tb": Network.TESTNET,
    "bcrt": Network.REGTEST,
    "sb": Network.SIGNET,
    "tbs": Network.SIGNET,
}

# Match: ln + currency + optional(amount + optional multiplier), whole prefix
_HRP_RE = re.compile(
    r'^ln(?P<currency>[a-z]+?)'
    r'(?:(?P<amount>[0-9]+)(?P<multiplier>[munp])?)?$'
)


@dataclass(frozen=True)
class HrpDescriptor:
    """Parsed human-readable part of an invoice."""

    currency: str
    amount: int | None
    multiplier: str | None
    network: Network


def parse_hrp(prefix: str) -> HrpDescriptor:
    """Parse an invoice prefix such as "lnbcrt30u".

    Unrecognised currency codes map to Network.UNKNOWN rather than failing.

    Raises:
        InvalidHrpError: If the prefix is not ln + currency + [digits][m|u|n|p].
    """
    match = _HRP_RE.match(prefix)
    if not match:
        raise InvalidHrpError(prefix)

    currency = match.group("currency")
    amount_str = match.group("amount")

    amount = None
    if amount_str is not None:
        try:
            amount = int(amount_str)
        except ValueError as e:
            # Digit count past the interpreter's int conversion limit
            raise InvalidHrpError(prefix) from e

    return HrpDescriptor(
        currency=currency,
        amount=amount,
        multiplier=match.group("multiplier"),
        network=_NETWORKS.get(currency, Network.UNKNOWN),
    )
