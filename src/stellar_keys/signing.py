"""
Ed25519 signature primitive.

Thin wrapper over `cryptography`'s Ed25519 implementation exposing the
NaCl-style key layout used across the Stellar ecosystem: a 64-byte secret key
made of the 32-byte seed followed by the 32-byte public key.
"""

from __future__ import annotations

import logging
import secrets
from typing import Final

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from .errors import InvalidInputError
from .types import Bytes32, Bytes64

__all__ = [
    "SEED_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SECRET_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "derive_keypair",
    "sign",
    "verify",
    "random_bytes",
    "require_length",
]

logger = logging.getLogger(__name__)

SEED_LENGTH: Final = 32
"""Length of an Ed25519 seed."""

PUBLIC_KEY_LENGTH: Final = 32
"""Length of an Ed25519 public key."""

SECRET_KEY_LENGTH: Final = 64
"""Length of a NaCl-style secret key (seed || public key)."""

SIGNATURE_LENGTH: Final = 64
"""Length of an Ed25519 signature."""

Data = bytes | bytearray | memoryview | str
"""Anything that can be signed. Text is signed as its UTF-8 encoding."""


_BYTES_LIKE = (bytes, bytearray, memoryview)


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if not isinstance(data, _BYTES_LIKE):
        raise InvalidInputError("data", actual=type(data).__name__)
    return bytes(data)


def require_length(what: str, value: bytes, expected: int) -> bytes:
    """
    Return `value` as plain bytes after checking its type and length.

    Integers and other objects that `bytes()` would accept are refused, so a
    length can never be mistaken for key material.

    Raises:
        InvalidInputError: If `value` is not bytes-like or has the wrong length.
    """
    if not isinstance(value, _BYTES_LIKE):
        raise InvalidInputError(what, expected=expected, actual=type(value).__name__)
    value = bytes(value)
    if len(value) != expected:
        raise InvalidInputError(what, expected=expected, actual=len(value))
    return value


def _raw_public_bytes(public_key: Ed25519PublicKey) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def derive_keypair(seed: bytes) -> tuple[Bytes32, Bytes64]:
    """
    Deterministically derive an Ed25519 key pair from a seed.

    Args:
        seed: 32 bytes of secret entropy.

    Returns:
        The public key and the 64-byte secret key `seed || public_key`.

    Raises:
        InvalidInputError: If the seed is not exactly 32 bytes.
    """
    seed = require_length("seed", seed, SEED_LENGTH)
    private_key = Ed25519PrivateKey.from_private_bytes(seed)
    public_key = _raw_public_bytes(private_key.public_key())
    return Bytes32(public_key), Bytes64(seed + public_key)


def sign(data: Data, secret_key: bytes) -> Bytes64:
    """
    Sign `data` with a 64-byte secret key.

    Ed25519 signatures are deterministic: the same data and key always
    produce the same signature.

    Raises:
        InvalidInputError: If the secret key is not exactly 64 bytes, or `data`
            is neither bytes-like nor text.
    """
    secret_key = require_length("secret key", secret_key, SECRET_KEY_LENGTH)
    message = _as_bytes(data)
    private_key = Ed25519PrivateKey.from_private_bytes(secret_key[:SEED_LENGTH])
    return Bytes64(private_key.sign(message))


def verify(data: Data, signature: bytes, public_key: bytes) -> bool:
    """
    Verify an Ed25519 signature.

    Args:
        data: The signed data.
        signature: 64-byte signature.
        public_key: 32-byte public key.

    Returns:
        True if the signature is valid, False otherwise.

    Raises:
        InvalidInputError: If the signature or public key has the wrong length,
            or `data` is neither bytes-like nor text.
    """
    try:
        signature = require_length("signature", signature, SIGNATURE_LENGTH)
        public_key = require_length("public key", public_key, PUBLIC_KEY_LENGTH)
        message = _as_bytes(data)
    except InvalidInputError as e:
        logger.debug("Refusing to verify: %s", e)
        raise

    try:
        key = Ed25519PublicKey.from_public_bytes(public_key)
        key.verify(signature, message)
    except InvalidSignature:
        return False
    except ValueError as e:
        # Not a valid curve point; no signature can verify against it.
        logger.debug("Rejecting signature for unusable public key: %s", e)
        return False
    return True


def random_bytes(n: int) -> bytes:
    """Return `n` bytes from the operating system's CSPRNG."""
    return secrets.token_bytes(n)
