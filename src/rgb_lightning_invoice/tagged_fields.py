"""Tagged field scanning for the BOLT11 data part.

Each field is one tag word, a 10-bit length split over two words, then
``length`` payload words. Fields this module does not know are skipped so
newer invoices still decode; a known field with the wrong size or an
undecodable payload is dropped on its own without failing the invoice.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from rgb_lightning_invoice.bits import words_to_bytes, words_to_int
from rgb_lightning_invoice.exceptions import TruncatedFieldError

log = logging.getLogger(__name__)

TAG_PAYMENT_HASH = 1
TAG_PRIVATE_ROUTE = 3
TAG_FEATURES = 5
TAG_EXPIRY_TIME = 6
TAG_FALLBACK = 9
TAG_DESCRIPTION = 13
TAG_PAYMENT_SECRET = 16
TAG_PAYEE_PUBKEY = 19
TAG_DESCRIPTION_HASH = 23
TAG_MIN_FINAL_CLTV_EXPIRY_DELTA = 24
TAG_PAYMENT_METADATA = 27
TAG_RGB_AMOUNT = 30
TAG_RGB_CONTRACT_ID = 31

_HEADER_WORDS = 3


@dataclass(frozen=True)
class TaggedField:
    """One raw (tag, length, payload) record."""

    tag: int
    length: int
    data: tuple[int, ...]


def _hex(words: Sequence[int]) -> str:
    return words_to_bytes(words).hex()


def _utf8(words: Sequence[int]) -> str:
    return words_to_bytes(words).decode("utf-8")


# tag -> (output key, required payload length in words or None, decoder)
_KNOWN_TAGS: dict[int, tuple[str, int | None, Callable[[Sequence[int]], Any]]] = {
    TAG_PAYMENT_HASH: ("payment_hash", 52, _hex),
    TAG_DESCRIPTION: ("description", None, _utf8),
    TAG_PAYEE_PUBKEY: ("payee_pubkey", 53, _hex),
    TAG_DESCRIPTION_HASH: ("description_hash", 52, _hex),
    TAG_EXPIRY_TIME: ("expiry_time", None, words_to_int),
    TAG_MIN_FINAL_CLTV_EXPIRY_DELTA: ("min_final_cltv_expiry_delta", None, words_to_int),
    TAG_PAYMENT_SECRET: ("payment_secret", 52, _hex),
    TAG_PAYMENT_METADATA: ("payment_metadata", None, _hex),
    TAG_FEATURES: ("features", None, _hex),
    TAG_RGB_AMOUNT: ("rgb_amount", None, words_to_int),
    TAG_RGB_CONTRACT_ID: ("rgb_contract_id", None, _utf8),
}


def iter_tagged_fields(words: Sequence[int]) -> Iterator[TaggedField]:
    """Yield raw tagged fields in order.

    Raises:
        TruncatedFieldError: If a header or payload runs past the end.
    """
    pos = 0
    total = len(words)
    while pos < total:
        if pos + _HEADER_WORDS > total:
            raise TruncatedFieldError(None, _HEADER_WORDS, total - pos)

        tag = words[pos]
        length = (words[pos + 1] << 5) | words[pos + 2]
        pos += _HEADER_WORDS

        if pos + length > total:
            raise TruncatedFieldError(tag, length, total - pos)

        yield TaggedField(tag=tag, length=length, data=tuple(words[pos:pos + length]))
        pos += length


def scan_tagged_fields(words: Sequence[int]) -> dict[str, Any]:
    """Decode the known tagged fields into a dict keyed by field name.

    Args:
        words: The tagged-field segment (between timestamp and signature).

    Returns:
        Mapping such as {"payment_hash": "...", "expiry_time": 3600}. Absent
        or dropped fields have no key. A repeated tag keeps its last valid value.

    Raises:
        TruncatedFieldError: If the segment is cut short mid-field.
    """
    fields: dict[str, Any] = {}
    for field in iter_tagged_fields(words):
        known = _KNOWN_TAGS.get(field.tag)
        if known is None:
            log.debug("Skipping unknown tag %d (%d words)", field.tag, field.length)
            continue

        name, expected_length, decoder = known
        if expected_length is not None and field.length != expected_length:
            log.debug(
                "Dropping %s: %d words, expected %d",
                name, field.length, expected_length,
            )
            continue

        try:
            fields[name] = decoder(field.data)
        except UnicodeDecodeError as e:
            log.debug("Dropping %s: %s", name, e)

    return fields
