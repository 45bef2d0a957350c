"""Shared fixtures: build checksummed synthetic invoices."""

from __future__ import annotations

import pytest
from bech32 import bech32_encode, convertbits


def int_to_words(value: int, count: int | None = None) -> list[int]:
    """Big-endian 5-bit words; minimal width unless count is given."""
    words = []
    while value:
        words.insert(0, value & 31)
        value >>= 5
    if count is None:
        return words or [0]
    return [0] * (count - len(words)) + words


class InvoiceBuilder:
    """Assembles timestamp | tagged fields | zeroed signature, then bech32-encodes."""

    def __init__(self, hrp: str = "lnbcrt30u", timestamp: int = 1_700_000_000):
        self.hrp = hrp
        self.timestamp = timestamp
        self.tagged: list[int] = []
        self.signature_words = 104

    def add_words(self, tag: int, payload: list[int]) -> InvoiceBuilder:
        length = len(payload)
        self.tagged += [tag, length >> 5, length & 31, *payload]
        return self

    def add_bytes(self, tag: int, data: bytes) -> InvoiceBuilder:
        return self.add_words(tag, convertbits(data, 8, 5, True))

    def add_int(self, tag: int, value: int) -> InvoiceBuilder:
        return self.add_words(tag, int_to_words(value))

    def add_raw(self, words: list[int]) -> InvoiceBuilder:
        self.tagged += words
        return self

    def words(self) -> list[int]:
        return int_to_words(self.timestamp, 7) + self.tagged + [0] * self.signature_words

    def build(self) -> str:
        return bech32_encode(self.hrp, self.words())


@pytest.fixture
def invoice_builder():
    return InvoiceBuilder
