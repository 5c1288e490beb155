"""
Network identity.

Every Stellar network is named by a passphrase. The SHA-256 hash of the
passphrase is the network id: it is mixed into every transaction hash so that
signatures cannot be replayed across networks, and it doubles as the seed of
the network's master keypair.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from pathlib import Path
from typing import Final

import yaml
from pydantic import Field, field_validator

from . import config
from .types import Bytes32, StrictBaseModel

__all__ = [
    "Network",
    "NetworkConfig",
    "Networks",
]

logger = logging.getLogger(__name__)

_current: Network | None = None
"""The process-wide selected network. Read and written under `_lock`."""

_lock = threading.Lock()


class Networks:
    """Passphrases of the well-known public networks."""

    PUBLIC: Final[str] = "Public Global Stellar Network ; September 2015"
    """The production network."""

    TESTNET: Final[str] = "Test SDF Network ; September 2015"
    """The SDF-operated test network."""


class Network(StrictBaseModel):
    """
    A network, identified by its passphrase.

    One network is selected process-wide at any time. The initial selection
    comes from `stellar_keys.config`; `use`, `use_public_network` and
    `use_test_network` switch it.
    """

    passphrase: str = Field(min_length=1)
    """Human-readable network passphrase."""

    def network_id(self) -> Bytes32:
        """Return the SHA-256 hash of the passphrase."""
        return Bytes32(hashlib.sha256(self.passphrase.encode("utf-8")).digest())

    @classmethod
    def public(cls) -> Network:
        """Return the production network."""
        return cls(passphrase=Networks.PUBLIC)

    @classmethod
    def testnet(cls) -> Network:
        """Return the test network."""
        return cls(passphrase=Networks.TESTNET)

    @classmethod
    def use(cls, network: Network) -> None:
        """Select `network` for the whole process."""
        global _current
        with _lock:
            _current = network
        logger.info("Using network %r", network.passphrase)

    @classmethod
    def use_public_network(cls) -> None:
        """Select the production network."""
        cls.use(cls.public())

    @classmethod
    def use_test_network(cls) -> None:
        """Select the test network."""
        cls.use(cls.testnet())

    @classmethod
    def current(cls) -> Network:
        """
        Return the selected network.

        On first use the selection is initialised from configuration.
        """
        global _current
        with _lock:
            if _current is None:
                _current = _configured_network()
            return _current


def _configured_network() -> Network:
    if config.STELLAR_NETWORK_PASSPHRASE is not None:
        return Network(passphrase=config.STELLAR_NETWORK_PASSPHRASE)
    if config.STELLAR_NETWORK == "public":
        return Network.public()
    return Network.testnet()


class NetworkConfig(StrictBaseModel):
    """
    Network definition loaded from a YAML file.

    The expected YAML format:

        NETWORK_NAME: standalone
        NETWORK_PASSPHRASE: "Standalone Network ; February 2017"

    Field names use UPPERCASE to match the environment-variable naming of
    stellar-core configuration files.
    """

    network_name: str | None = Field(default=None, alias="NETWORK_NAME")
    """Optional label, informational only."""

    network_passphrase: str = Field(alias="NETWORK_PASSPHRASE")
    """Passphrase from which the network id is derived."""

    @field_validator("network_passphrase")
    @classmethod
    def _reject_blank_passphrase(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("NETWORK_PASSPHRASE must not be blank")
        return v

    def to_network(self) -> Network:
        """Build the `Network` this configuration describes."""
        return Network(passphrase=self.network_passphrase)

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> NetworkConfig:
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> NetworkConfig:
        """Load configuration from a YAML string."""
        return cls.model_validate(yaml.safe_load(content))
