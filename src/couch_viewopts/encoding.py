"""Percent-encoding of option values.

A byte is left alone when it is an ASCII letter, digit, ``-``, ``_`` or
``.``; every other byte expands to ``%XX`` with uppercase hex digits.
Encoding is done in two passes: measure, then write into storage of the
measured size.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_safe_set = frozenset(b"-_.")
_hexdig = b"0123456789ABCDEF"


def needs_pct_encoding(b: int) -> bool:
    """Return ``True`` if byte value *b* must be escaped."""
    if (48 <= b <= 57) or (65 <= b <= 90) or (97 <= b <= 122):
        return False
    return b not in _safe_set


def pct_encoded_length(src: BytesLike) -> int:
    """Number of bytes the percent-encoded form of *src* occupies."""
    m = 0
    for b in memoryview(src).cast("B"):
        m += 3 if needs_pct_encoding(b) else 1
    return m


def pct_encode_into(dest: bytearray | memoryview, src: BytesLike) -> int:
    """Write the percent-encoded form of *src* into *dest*.

    *dest* must hold at least ``pct_encoded_length(src)`` bytes.
    Returns the number of bytes written.
    """
    j = 0
    for b in memoryview(src).cast("B"):
        if needs_pct_encoding(b):
            dest[j + 0] = 37  # %
            dest[j + 1] = _hexdig[(b >> 4) & 0xF]
            dest[j + 2] = _hexdig[(b >> 0) & 0xF]
            j += 3
        else:
            dest[j] = b
            j += 1
    return j


def pct_encode(src: BytesLike) -> bytes:
    """Return the percent-encoded form of *src*.

    When nothing needs escaping the input bytes are returned unchanged.
    """
    m = pct_encoded_length(src)
    if m == len(memoryview(src).cast("B")):
        return bytes(src)
    res = bytearray(m)
    pct_encode_into(res, src)
    return bytes(res)
