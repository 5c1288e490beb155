"""
StrKey: versioned, checksummed base32 text encoding for typed payloads.

An encoded value is laid out as:

    base32( version_byte || payload || crc16_xmodem(version_byte || payload) )

The checksum is appended little-endian and base32 padding characters are
stripped. The version byte is chosen so that the first character of the text
identifies the payload type (`G` for account ids, `S` for seeds).

References:
    - https://github.com/stellar/stellar-protocol/blob/master/ecosystem/sep-0023.md
"""

from __future__ import annotations

import base64
import binascii
from enum import IntEnum
from typing import Final

from .errors import (
    ChecksumMismatchError,
    DecodeError,
    MalformedEncodingError,
    VersionMismatchError,
)

__all__ = [
    "VersionByte",
    "encode_check",
    "decode_check",
    "is_valid",
    "crc16_xmodem",
]


class VersionByte(IntEnum):
    """
    Version bytes identifying the payload type of a StrKey.

    The value is shifted left by three so that the top five bits (the first
    base32 character) spell the type letter.
    """

    ACCOUNT_ID = 6 << 3
    """Ed25519 public key. Renders with a leading `G`."""

    SEED = 18 << 3
    """Ed25519 secret seed. Renders with a leading `S`."""

    @classmethod
    def of(cls, tag: VersionByte | str) -> VersionByte:
        """
        Resolve a version byte from an enum member or a type tag.

        Accepts the tag names used throughout the protocol tooling
        ("accountId", "seed").

        Raises:
            ValueError: If the tag is unknown.
        """
        if isinstance(tag, VersionByte):
            return tag
        try:
            return _TAGS[tag]
        except KeyError:
            raise ValueError(f"Unknown StrKey type tag: {tag!r}") from None


_TAGS: Final[dict[str, VersionByte]] = {
    "accountId": VersionByte.ACCOUNT_ID,
    "seed": VersionByte.SEED,
}

_CHECKSUM_LENGTH: Final = 2
"""CRC16 checksum length in bytes."""


def crc16_xmodem(data: bytes) -> bytes:
    """Return the CRC16-XModem checksum of `data` as 2 little-endian bytes."""
    return binascii.crc_hqx(data, 0).to_bytes(_CHECKSUM_LENGTH, "little")


def encode_check(version: VersionByte | str, payload: bytes) -> str:
    """
    Encode `payload` with a version byte and checksum.

    Args:
        version: Payload type, as a `VersionByte` or a type tag.
        payload: Raw bytes to encode.

    Returns:
        Unpadded base32 text.
    """
    version = VersionByte.of(version)
    body = bytes([version]) + bytes(payload)
    return base64.b32encode(body + crc16_xmodem(body)).decode("ascii").rstrip("=")


def decode_check(version: VersionByte | str, encoded: str) -> bytes:
    """
    Decode and validate StrKey text, returning the raw payload.

    Args:
        version: Expected payload type, as a `VersionByte` or a type tag.
        encoded: The text to decode.

    Returns:
        The payload bytes without version byte or checksum.

    Raises:
        MalformedEncodingError: If the text is not canonical base32 or too short.
        VersionMismatchError: If the version byte is not the expected one.
        ChecksumMismatchError: If the checksum does not match.
    """
    version = VersionByte.of(version)
    if not isinstance(encoded, str) or not encoded:
        raise MalformedEncodingError("encoded value must be a non-empty string")

    padded = encoded + "=" * (-len(encoded) % 8)
    try:
        decoded = base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        raise MalformedEncodingError(f"invalid base32 text: {e}") from e

    # Reject texts whose trailing bits do not round-trip.
    if base64.b32encode(decoded).decode("ascii").rstrip("=") != encoded:
        raise MalformedEncodingError("base32 text is not in canonical form")

    if len(decoded) <= 1 + _CHECKSUM_LENGTH:
        raise MalformedEncodingError(f"decoded value is too short ({len(decoded)} bytes)")

    body, checksum = decoded[:-_CHECKSUM_LENGTH], decoded[-_CHECKSUM_LENGTH:]
    if body[0] != version:
        raise VersionMismatchError(expected=int(version), actual=body[0])

    if crc16_xmodem(body) != checksum:
        raise ChecksumMismatchError("invalid checksum")

    return body[1:]


def is_valid(version: VersionByte | str, encoded: str) -> bool:
    """Return whether `encoded` decodes cleanly as the given payload type."""
    try:
        decode_check(version, encoded)
    except DecodeError:
        return False
    return True
