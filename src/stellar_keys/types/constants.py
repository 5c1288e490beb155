"""Constants used throughout the XDR type system."""

from __future__ import annotations

from typing import Final

XDR_UNIT: Final = 4
"""Every XDR item occupies a multiple of four bytes."""

LENGTH_PREFIX_BYTE_LENGTH: Final = 4
"""The number of bytes used to encode the length of variable-length opaque data."""


def padding_for(length: int) -> int:
    """Return the number of zero bytes needed to align `length` to a 4-byte boundary."""
    return (XDR_UNIT - length % XDR_UNIT) % XDR_UNIT
