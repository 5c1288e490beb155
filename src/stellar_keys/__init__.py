"""Stellar keypairs: Ed25519 identities with StrKey addresses and seeds."""

from .errors import (
    ChecksumMismatchError,
    DecodeError,
    InvalidInputError,
    KeypairError,
    MalformedEncodingError,
    NetworkConfigError,
    SigningUnavailableError,
    VersionMismatchError,
)
from .keypair import Keypair, SecretMaterial
from .network import Network, NetworkConfig, Networks

__all__ = [
    "Keypair",
    "SecretMaterial",
    "Network",
    "NetworkConfig",
    "Networks",
    # Exceptions
    "KeypairError",
    "InvalidInputError",
    "DecodeError",
    "MalformedEncodingError",
    "VersionMismatchError",
    "ChecksumMismatchError",
    "SigningUnavailableError",
    "NetworkConfigError",
]
