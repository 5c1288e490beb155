"""
Shared pytest fixtures for all keypair tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from stellar_keys import network
from stellar_keys.keypair import Keypair
from stellar_keys.network import Network
from tests.stellar_keys.helpers import ADDRESS, SEED_HEX


@pytest.fixture
def signing_keypair() -> Keypair:
    """Signing keypair for the 0x01..0x20 seed."""
    return Keypair.from_raw_seed(bytes.fromhex(SEED_HEX))


@pytest.fixture
def public_keypair() -> Keypair:
    """Public-only keypair for the same identity."""
    return Keypair.from_address(ADDRESS)


@pytest.fixture
def restore_network() -> Iterator[None]:
    """Restore the process-wide network selection after the test."""
    saved = Network.current()
    yield
    Network.use(saved)


@pytest.fixture
def unselected_network() -> Iterator[None]:
    """Clear the network selection so the next lookup reads configuration."""
    saved = Network.current()
    network._current = None
    yield
    Network.use(saved)
