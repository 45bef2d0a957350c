"""Offline BOLT11 invoice decoding with RGB asset tags.

Turns an invoice string into the same record the RGB Lightning node's
decode endpoint returns, without network access or signature checks.

Data part layout: timestamp (7 words) | tagged fields | signature (104 words)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from rgb_lightning_invoice import bech32_codec
from rgb_lightning_invoice.amount import normalize_amount_msat
from rgb_lightning_invoice.bech32_codec import MAX_INVOICE_LENGTH
from rgb_lightning_invoice.bits import words_to_int
from rgb_lightning_invoice.exceptions import (
    DecodeFailure,
    InvalidHrpError,
    InvoiceError,
    InvoiceTooShortError,
    TruncatedFieldError,
)
from rgb_lightning_invoice.hrp import HrpDescriptor, Network, parse_hrp
from rgb_lightning_invoice.tagged_fields import scan_tagged_fields

log = logging.getLogger(__name__)

DEFAULT_EXPIRY_SECONDS = 3600

_TIMESTAMP_WORDS = 7
_SIGNATURE_WORDS = 104
_MIN_DATA_WORDS = _TIMESTAMP_WORDS + _SIGNATURE_WORDS


@dataclass(frozen=True)
class DecodedInvoice:
    """Payment terms decoded from a Lightning invoice.

    Attribute names match the RGB Lightning node's /decodelninvoice
    response so local and remote decoding are interchangeable.
    """

    amt_msat: int | None
    expiry_sec: int
    timestamp: int
    asset_id: str | None
    asset_amount: int | None
    payment_hash: str | None
    payment_secret: str | None
    payee_pubkey: str | None
    network: Network

    @property
    def amount_sats(self) -> int | None:
        if self.amt_msat is None:
            return None
        return self.amt_msat // 1000

    @property
    def expires_at(self) -> int:
        return self.timestamp + self.expiry_sec

    def is_expired(self, now: float | None = None) -> bool:
        if now is None:
            now = time.time()
        return now >= self.expires_at

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the node's JSON shape (network as its string value)."""
        return {
            "amt_msat": self.amt_msat,
            "expiry_sec": self.expiry_sec,
            "timestamp": self.timestamp,
            "asset_id": self.asset_id,
            "asset_amount": self.asset_amount,
            "payment_hash": self.payment_hash,
            "payment_secret": self.payment_secret,
            "payee_pubkey": self.payee_pubkey,
            "network": self.network.value,
        }


def assemble_invoice(
    hrp: HrpDescriptor, timestamp: int, fields: dict[str, Any]
) -> DecodedInvoice:
    """Combine the parsed prefix, timestamp and tagged fields into a record."""
    return DecodedInvoice(
        amt_msat=normalize_amount_msat(hrp.amount, hrp.multiplier),
        expiry_sec=fields.get("expiry_time", DEFAULT_EXPIRY_SECONDS),
        timestamp=timestamp,
        asset_id=fields.get("rgb_contract_id"),
        asset_amount=fields.get("rgb_amount"),
        payment_hash=fields.get("payment_hash"),
        payment_secret=fields.get("payment_secret"),
        payee_pubkey=fields.get("payee_pubkey"),
        network=hrp.network,
    )


def _decode(text: str, max_length: int) -> DecodedInvoice:
    prefix, words = bech32_codec.decode(text, max_length)
    hrp = parse_hrp(prefix)

    if len(words) < _MIN_DATA_WORDS:
        raise InvoiceTooShortError(len(words))

    timestamp = words_to_int(words[:_TIMESTAMP_WORDS])
    try:
        fields = scan_tagged_fields(words[_TIMESTAMP_WORDS:-_SIGNATURE_WORDS])
    except TruncatedFieldError as e:
        raise InvoiceTooShortError(len(words), str(e)) from e

    return assemble_invoice(hrp, timestamp, fields)


def decode_invoice(bolt11: str, max_length: int = MAX_INVOICE_LENGTH) -> DecodedInvoice:
    """Decode a BOLT11 / RGB Lightning invoice string.

    Args:
        bolt11: The invoice (e.g., "lnbcrt30u1p..."). Surrounding whitespace
            is ignored.
        max_length: Maximum accepted invoice length in characters.

    Returns:
        The fully populated DecodedInvoice.

    Raises:
        DecodeFailure: If any part of the invoice cannot be decoded. The
            underlying InvoiceError is chained as __cause__.
    """
    if not bolt11 or not bolt11.strip():
        raise DecodeFailure("empty invoice", bolt11)

    try:
        return _decode(bolt11.strip(), max_length)
    except InvoiceError as e:
        log.debug("Invoice decode failed: %s", e)
        raise DecodeFailure(str(e), bolt11) from e


def is_valid_invoice(bolt11: str) -> bool:
    """Return True if the string decodes as an invoice."""
    try:
        decode_invoice(bolt11)
    except DecodeFailure:
        return False
    return True


def extract_amount_sats(bolt11: str) -> int | None:
    """Extract the amount in satoshis from the invoice prefix alone.

    Cheap pre-check for budgets: the checksum and data part are not
    verified. Sub-satoshi amounts are floored.

    Returns:
        Amount in satoshis, or None for blank, malformed or "any amount"
        invoices.
    """
    if not bolt11:
        return None

    invoice = bolt11.strip().lower()
    if len(invoice) > MAX_INVOICE_LENGTH:
        return None

    pos = invoice.rfind("1")
    if pos < 1:
        return None

    try:
        hrp = parse_hrp(invoice[:pos])
    except InvalidHrpError:
        return None

    amt_msat = normalize_amount_msat(hrp.amount, hrp.multiplier)
    if amt_msat is None:
        return None
    return amt_msat // 1000
