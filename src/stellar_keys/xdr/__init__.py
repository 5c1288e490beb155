"""Stellar XDR protocol types used by keypairs."""

from .types import (
    AccountId,
    DecoratedSignature,
    PublicKey,
    PublicKeyType,
    Signature,
    SignatureHint,
    Uint256,
)

__all__ = [
    "AccountId",
    "DecoratedSignature",
    "PublicKey",
    "PublicKeyType",
    "Signature",
    "SignatureHint",
    "Uint256",
]
