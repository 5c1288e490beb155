"""
Global configuration for the keypair library.

This module contains environment-specific settings read once at import time.
"""

import os

_SUPPORTED_STELLAR_NETWORKS: list[str] = ["public", "testnet"]

STELLAR_NETWORK = os.environ.get("STELLAR_NETWORK", "testnet").lower()
"""The initially selected network ('public' or 'testnet'). Defaults to 'testnet'."""

if STELLAR_NETWORK not in _SUPPORTED_STELLAR_NETWORKS:
    raise ValueError(
        f"Invalid STELLAR_NETWORK environment variable: '{STELLAR_NETWORK}'. "
        f"Supported values: {_SUPPORTED_STELLAR_NETWORKS}"
    )

STELLAR_NETWORK_PASSPHRASE: str | None = os.environ.get("STELLAR_NETWORK_PASSPHRASE") or None
"""Explicit passphrase of a private network. Overrides STELLAR_NETWORK when set."""
