"""
Protocol types needed to describe a signer.

Mirrors the following definitions from `Stellar-types.x` and
`Stellar-transaction.x`:

    enum PublicKeyType { PUBLIC_KEY_TYPE_ED25519 = 0 };

    union PublicKey switch (PublicKeyType type) {
    case PUBLIC_KEY_TYPE_ED25519:
        uint256 ed25519;
    };

    typedef PublicKey AccountID;
    typedef opaque SignatureHint[4];
    typedef opaque Signature<64>;

    struct DecoratedSignature {
        SignatureHint hint;
        Signature signature;
    };
"""

from __future__ import annotations

from enum import IntEnum

from stellar_keys.types import Bytes4, Bytes32, VarOpaque64, XDRStruct, XDRUnion, require_arm

__all__ = [
    "PublicKeyType",
    "Uint256",
    "PublicKey",
    "AccountId",
    "SignatureHint",
    "Signature",
    "DecoratedSignature",
]


class PublicKeyType(IntEnum):
    """Discriminant of the `PublicKey` union."""

    PUBLIC_KEY_TYPE_ED25519 = 0
    """A 32-byte Ed25519 public key."""


Uint256 = Bytes32
"""`opaque uint256[32]`: raw Ed25519 key material."""


class PublicKey(XDRUnion):
    """A typed public key. Ed25519 is the only arm the protocol defines."""

    ARMS = {PublicKeyType.PUBLIC_KEY_TYPE_ED25519: Uint256}

    @classmethod
    def ed25519(cls, raw: bytes) -> PublicKey:
        """Wrap a raw 32-byte Ed25519 key."""
        return cls(data=(PublicKeyType.PUBLIC_KEY_TYPE_ED25519, Uint256(raw)))

    def raw_ed25519(self) -> Uint256:
        """Return the raw key of the Ed25519 arm."""
        return require_arm(self, PublicKeyType.PUBLIC_KEY_TYPE_ED25519)


class AccountId(PublicKey):
    """`typedef PublicKey AccountID`. Encodes identically to `PublicKey`."""


class SignatureHint(Bytes4):
    """The last four bytes of the signer's encoded `AccountID`."""


class Signature(VarOpaque64):
    """A signature of up to 64 bytes."""


class DecoratedSignature(XDRStruct):
    """A signature together with the hint identifying its signer."""

    hint: SignatureHint
    """Fingerprint of the signer's account id."""

    signature: Signature
    """The raw signature bytes."""
