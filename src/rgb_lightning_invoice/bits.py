"""Conversions from bech32 5-bit words."""

from __future__ import annotations

from collections.abc import Iterable


def words_to_bytes(words: Iterable[int]) -> bytes:
    """Repack 5-bit words into bytes, most significant bit first.

    Trailing bits that do not fill a whole byte are discarded, so 52 words
    (260 bits) yield 32 bytes.
    """
    out = bytearray()
    acc = 0
    bits = 0
    for word in words:
        acc = ((acc << 5) | word) & 0xFFF
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((acc >> bits) & 0xFF)
    return bytes(out)


def words_to_int(words: Iterable[int]) -> int:
    """Read 5-bit words as one big-endian base-32 unsigned integer."""
    result = 0
    for word in words:
        result = (result << 5) | word
    return result
