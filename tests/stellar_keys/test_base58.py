"""Tests for the deprecated base58 codec."""

from __future__ import annotations

import pytest

from stellar_keys.base58 import (
    Base58,
    LegacyVersionByte,
    decode_base58_check,
    encode_base58_check,
)
from stellar_keys.errors import (
    ChecksumMismatchError,
    MalformedEncodingError,
    VersionMismatchError,
)
from tests.stellar_keys.helpers import LEGACY_ADDRESS, LEGACY_SEED, PUBLIC_KEY_HEX, SEED_HEX


class TestBase58:
    """Tests for the raw alphabet encoding."""

    def test_empty(self) -> None:
        """Empty input encodes to empty text."""
        assert Base58.encode(b"") == ""
        assert Base58.decode("") == b""

    def test_leading_zeros(self) -> None:
        """Leading zero bytes map to the first alphabet character."""
        assert Base58.encode(b"\x00\x00\x01") == "ggs"
        assert Base58.decode("ggs") == b"\x00\x00\x01"

    def test_invalid_character(self) -> None:
        """Characters outside the alphabet are rejected."""
        with pytest.raises(ValueError, match="Invalid base58 character"):
            Base58.decode("0OIl")

    @pytest.mark.parametrize("data", [b"\x00", b"\xff" * 8, bytes(range(40))])
    def test_round_trip(self, data: bytes) -> None:
        """Decoding inverts encoding."""
        assert Base58.decode(Base58.encode(data)) == data


class TestBase58Check:
    """Tests for the versioned, checksummed encoding."""

    def test_seed_vector(self) -> None:
        """A known seed matches its legacy text."""
        assert encode_base58_check("seed", bytes.fromhex(SEED_HEX)) == LEGACY_SEED
        assert decode_base58_check("seed", LEGACY_SEED) == bytes.fromhex(SEED_HEX)

    def test_account_id_vector(self) -> None:
        """Account ids start with the zero-digit g."""
        encoded = encode_base58_check(LegacyVersionByte.ACCOUNT_ID, bytes.fromhex(PUBLIC_KEY_HEX))
        assert encoded == LEGACY_ADDRESS
        assert encoded.startswith("g")

    def test_version_mismatch(self) -> None:
        """An account id is not a seed."""
        with pytest.raises(VersionMismatchError):
            decode_base58_check("seed", LEGACY_ADDRESS)

    def test_checksum_mismatch(self) -> None:
        """A changed character fails the checksum."""
        corrupted = LEGACY_SEED[:-1] + ("s" if LEGACY_SEED[-1] != "s" else "p")
        with pytest.raises(ChecksumMismatchError):
            decode_base58_check("seed", corrupted)

    @pytest.mark.parametrize("text", ["", "s", "0000"])
    def test_malformed(self, text: str) -> None:
        """Empty, short or foreign text is malformed."""
        with pytest.raises(MalformedEncodingError):
            decode_base58_check("seed", text)

    def test_unknown_tag(self) -> None:
        """Unknown tags are rejected."""
        with pytest.raises(ValueError, match="Unknown base58 type tag"):
            encode_base58_check("muxed", b"")
