"""
Legacy base58check encoding for account ids and seeds.

**DEPRECATED.** Stellar moved to StrKey (see `stellar_keys.strkey`). This
codec is kept only so that seeds exported in the old format can be migrated;
remove it once no such seeds remain in circulation.

Layout:

    base58( version_byte || payload || sha256(sha256(version_byte || payload))[:4] )

The alphabet is the one inherited from Ripple, not Bitcoin's.
"""

from __future__ import annotations

import hashlib
from enum import IntEnum
from typing import Final

from .errors import (
    ChecksumMismatchError,
    MalformedEncodingError,
    VersionMismatchError,
)

__all__ = [
    "Base58",
    "LegacyVersionByte",
    "encode_base58_check",
    "decode_base58_check",
]


class LegacyVersionByte(IntEnum):
    """Version bytes of the legacy encoding."""

    ACCOUNT_ID = 0x00
    SEED = 0x21

    @classmethod
    def of(cls, tag: LegacyVersionByte | str) -> LegacyVersionByte:
        """
        Resolve a version byte from an enum member or a type tag.

        Raises:
            ValueError: If the tag is unknown.
        """
        if isinstance(tag, LegacyVersionByte):
            return tag
        try:
            return _TAGS[tag]
        except KeyError:
            raise ValueError(f"Unknown base58 type tag: {tag!r}") from None


_TAGS: Final[dict[str, LegacyVersionByte]] = {
    "accountId": LegacyVersionByte.ACCOUNT_ID,
    "seed": LegacyVersionByte.SEED,
}

_CHECKSUM_LENGTH: Final = 4
"""Number of double-SHA256 bytes appended as a checksum."""


class Base58:
    """
    Base58 encoding/decoding with the Stellar (Ripple-derived) alphabet.

    Leading zero bytes are encoded as leading copies of the first alphabet
    character (`g`), mirroring Bitcoin's use of `1`.
    """

    ALPHABET: Final[str] = "gsphnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCr65jkm8oFqi1tuvAxyz"
    """The 58-character alphabet."""

    @classmethod
    def encode(cls, data: bytes) -> str:
        """
        Encode bytes as a base58 string.

        Args:
            data: Bytes to encode.

        Returns:
            Base58-encoded string.
        """
        leading_zeros = len(data) - len(data.lstrip(b"\x00"))

        num = int.from_bytes(data, "big")
        result: list[str] = []
        while num > 0:
            num, remainder = divmod(num, 58)
            result.append(cls.ALPHABET[remainder])

        result.extend([cls.ALPHABET[0]] * leading_zeros)
        return "".join(reversed(result))

    @classmethod
    def decode(cls, s: str) -> bytes:
        """
        Decode a base58 string to bytes.

        Args:
            s: Base58-encoded string.

        Returns:
            Decoded bytes.

        Raises:
            ValueError: If the string contains characters outside the alphabet.
        """
        leading_zeros = len(s) - len(s.lstrip(cls.ALPHABET[0]))

        num = 0
        for char in s:
            index = cls.ALPHABET.find(char)
            if index < 0:
                raise ValueError(f"Invalid base58 character: {char!r}")
            num = num * 58 + index

        result = b"" if num == 0 else num.to_bytes((num.bit_length() + 7) // 8, "big")
        return b"\x00" * leading_zeros + result


def _checksum(body: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(body).digest()).digest()[:_CHECKSUM_LENGTH]


def encode_base58_check(version: LegacyVersionByte | str, payload: bytes) -> str:
    """Encode `payload` with a legacy version byte and double-SHA256 checksum."""
    body = bytes([LegacyVersionByte.of(version)]) + bytes(payload)
    return Base58.encode(body + _checksum(body))


def decode_base58_check(version: LegacyVersionByte | str, encoded: str) -> bytes:
    """
    Decode and validate legacy base58check text, returning the raw payload.

    Raises:
        MalformedEncodingError: If the text is not base58 or too short.
        VersionMismatchError: If the version byte is not the expected one.
        ChecksumMismatchError: If the checksum does not match.
    """
    version = LegacyVersionByte.of(version)
    if not isinstance(encoded, str) or not encoded:
        raise MalformedEncodingError("encoded value must be a non-empty string")

    try:
        decoded = Base58.decode(encoded)
    except ValueError as e:
        raise MalformedEncodingError(str(e)) from e

    if len(decoded) <= 1 + _CHECKSUM_LENGTH:
        raise MalformedEncodingError(f"decoded value is too short ({len(decoded)} bytes)")

    body, checksum = decoded[:-_CHECKSUM_LENGTH], decoded[-_CHECKSUM_LENGTH:]
    if body[0] != version:
        raise VersionMismatchError(expected=int(version), actual=body[0])

    if _checksum(body) != checksum:
        raise ChecksumMismatchError("invalid checksum")

    return body[1:]
