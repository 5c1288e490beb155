"""
Stellar keypairs.

A keypair is either public-only (it can verify signatures and render an
address) or signing-capable (it additionally holds the secret seed and the
secret key derived from it).

Every signing-capable keypair is built by `Keypair.from_raw_seed`, so the
public key is always the one Ed25519 derives from the stored seed.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import TypeVar

from . import signing, strkey
from .base58 import decode_base58_check
from .errors import KeypairError, SigningUnavailableError
from .network import Network
from .strkey import VersionByte
from .types import BaseBytes, Bytes32, Bytes64
from .xdr import AccountId, DecoratedSignature, PublicKey, Signature, SignatureHint

__all__ = [
    "Keypair",
    "SecretMaterial",
]

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound=BaseBytes)

_HINT_LENGTH = 4
"""Number of trailing account-id bytes forming a signature hint."""


def _fixed(cls: type[_B], what: str, value: bytes) -> _B:
    """Check `value` is bytes-like of the right length and wrap it in `cls`."""
    return cls(signing.require_length(what, value, cls.LENGTH))


@dataclass(frozen=True, slots=True)
class SecretMaterial:
    """
    The secret half of a signing-capable keypair.

    The seed and the secret key always travel together.

    Attributes:
        seed: The 32-byte seed the key pair was derived from.
        secret_key: The 64-byte secret key, `seed || public_key`.
    """

    seed: Bytes32
    secret_key: Bytes64

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", _fixed(Bytes32, "seed", self.seed))
        object.__setattr__(self, "secret_key", _fixed(Bytes64, "secret key", self.secret_key))
        if self.secret_key[: signing.SEED_LENGTH] != self.seed:
            raise KeypairError("secret key was not derived from the given seed")

    def __repr__(self) -> str:
        return "SecretMaterial(<redacted>)"


@dataclass(frozen=True, slots=True)
class Keypair:
    """
    An Ed25519 identity on the Stellar network.

    Use the constructors (`random`, `from_encoded_seed`, `from_raw_seed`,
    `from_address`, `master_key`) rather than instantiating directly.

    Attributes:
        public_key: The 32-byte Ed25519 public key.
        secret: Secret material, or None for a public-only keypair.
    """

    public_key: Bytes32
    secret: SecretMaterial | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "public_key", _fixed(Bytes32, "public key", self.public_key))
        if self.secret is not None and not isinstance(self.secret, SecretMaterial):
            raise KeypairError(
                f"secret must be SecretMaterial or None, got {type(self.secret).__name__}"
            )
        if self.secret is not None and self.secret.secret_key[signing.SEED_LENGTH :] != (
            self.public_key
        ):
            raise KeypairError("public key does not match the secret key")

    # Construction

    @classmethod
    def from_encoded_seed(cls, seed: str) -> Keypair:
        """
        Create a signing keypair from a StrKey seed (`S...`).

        Raises:
            DecodeError: If the text is malformed, not a seed, or fails its checksum.
        """
        return cls.from_raw_seed(strkey.decode_check(VersionByte.SEED, seed))

    @classmethod
    def from_legacy_encoded_seed(cls, seed: str) -> Keypair:
        """
        Create a signing keypair from a base58 seed.

        Base58 encoding is **DEPRECATED**. Use this only to migrate old seeds
        to StrKey; re-export them with `seed()`.

        Raises:
            DecodeError: If the text is malformed, not a seed, or fails its checksum.
        """
        warnings.warn(
            "base58 seeds are deprecated; re-encode them with Keypair.seed()",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.warning("Decoding a deprecated base58 seed")
        return cls.from_raw_seed(decode_base58_check("seed", seed))

    @classmethod
    def from_raw_seed(cls, seed: bytes) -> Keypair:
        """
        Create a signing keypair from 32 raw seed bytes.

        Derivation is deterministic: the same seed always yields the same keys.

        Raises:
            InvalidInputError: If the seed is not exactly 32 bytes.
        """
        public_key, secret_key = signing.derive_keypair(seed)
        raw_seed = Bytes32(secret_key[: signing.SEED_LENGTH])
        return cls(
            public_key=public_key,
            secret=SecretMaterial(seed=raw_seed, secret_key=secret_key),
        )

    @classmethod
    def master_key(cls, network_id: bytes | None = None) -> Keypair:
        """
        Return the master keypair of a network.

        The master key uses the network id itself as seed, so it is the same
        for everybody and must never hold funds one wishes to keep private.

        Args:
            network_id: 32-byte network id. Defaults to the current network's.

        Raises:
            InvalidInputError: If the network id is not exactly 32 bytes.
        """
        if network_id is None:
            network_id = Network.current().network_id()
        keypair = cls.from_raw_seed(network_id)
        logger.debug("Derived network master key %s", keypair.address())
        return keypair

    @classmethod
    def from_address(cls, address: str) -> Keypair:
        """
        Create a public-only keypair from a StrKey account id (`G...`).

        Raises:
            DecodeError: If the text is malformed, not an account id, or fails its checksum.
            InvalidInputError: If the decoded key is not exactly 32 bytes.
        """
        return cls(public_key=strkey.decode_check(VersionByte.ACCOUNT_ID, address))

    @classmethod
    def random(cls) -> Keypair:
        """Create a signing keypair from a fresh random seed."""
        return cls.from_raw_seed(signing.random_bytes(signing.SEED_LENGTH))

    # Protocol objects

    def account_id(self) -> AccountId:
        """Return the public key as an XDR `AccountID`."""
        return AccountId.ed25519(self.public_key)

    def xdr_public_key(self) -> PublicKey:
        """Return the public key as an XDR `PublicKey`."""
        return PublicKey.ed25519(self.public_key)

    def signature_hint(self) -> SignatureHint:
        """Return the last four bytes of the encoded account id."""
        encoded = self.account_id().encode_bytes()
        return SignatureHint(encoded[-_HINT_LENGTH:])

    # Raw and encoded values

    def raw_public_key(self) -> Bytes32:
        """Return the 32-byte public key."""
        return self.public_key

    def raw_seed(self) -> Bytes32:
        """
        Return the 32-byte secret seed.

        Raises:
            SigningUnavailableError: If the keypair is public-only.
        """
        return self._require_secret("raw_seed").seed

    def raw_secret_key(self) -> Bytes64:
        """
        Return the 64-byte secret key.

        Raises:
            SigningUnavailableError: If the keypair is public-only.
        """
        return self._require_secret("raw_secret_key").secret_key

    def address(self) -> str:
        """Return the StrKey account id (`G...`)."""
        return strkey.encode_check(VersionByte.ACCOUNT_ID, self.public_key)

    def seed(self) -> str:
        """
        Return the StrKey secret seed (`S...`).

        Raises:
            SigningUnavailableError: If the keypair is public-only.
        """
        return strkey.encode_check(VersionByte.SEED, self._require_secret("seed").seed)

    # Signing

    def can_sign(self) -> bool:
        """Return whether this keypair holds secret material."""
        return self.secret is not None

    def sign(self, data: signing.Data) -> Bytes64:
        """
        Sign `data` with the secret key.

        Raises:
            SigningUnavailableError: If the keypair is public-only.
        """
        return signing.sign(data, self._require_secret("sign").secret_key)

    def verify(self, data: signing.Data, signature: bytes) -> bool:
        """
        Check `signature` over `data` against this keypair's public key.

        Returns False for a well-formed signature that does not match.

        Raises:
            InvalidInputError: If the signature is not 64 bytes.
        """
        return signing.verify(data, signature, self.public_key)

    def sign_decorated(self, data: signing.Data) -> DecoratedSignature:
        """
        Sign `data` and pair the signature with this keypair's hint.

        Raises:
            SigningUnavailableError: If the keypair is public-only.
        """
        signature = self.sign(data)
        return DecoratedSignature(
            hint=self.signature_hint(),
            signature=Signature(data=bytes(signature)),
        )

    def _require_secret(self, operation: str) -> SecretMaterial:
        if self.secret is None:
            raise SigningUnavailableError(
                f"cannot {operation}: keypair {self.address()} has no secret key"
            )
        return self.secret

    def __repr__(self) -> str:
        kind = "signing" if self.can_sign() else "public"
        return f"Keypair({self.address()}, {kind})"
