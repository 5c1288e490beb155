"""
Test vectors shared by the keypair tests.

The vectors were produced independently of this package: public keys and
signatures with OpenSSL's Ed25519, StrKey text with a standalone CRC16-XModem
and base32 encoder, base58 text with a standalone big-integer encoder.
"""

from typing import Final

SEED_HEX: Final = "0102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f20"
"""Raw seed 0x01..0x20."""

SEED: Final = "SAAQEAYEAUDAOCAJBIFQYDIOB4IBCEQTCQKRMFYYDENBWHA5DYPSBF5K"
"""StrKey encoding of SEED_HEX."""

LEGACY_SEED: Final = "sfwgZFxnCiqNW7UzeXmEWeQPFahugkrtqokNLSS7BG7pJkpA1kT"
"""Deprecated base58 encoding of SEED_HEX."""

PUBLIC_KEY_HEX: Final = "79b5562e8fe654f94078b112e8a98ba7901f853ae695bed7e0e3910bad049664"
"""Ed25519 public key derived from SEED_HEX."""

ADDRESS: Final = "GB43KVROR7TFJ6KAPCYRF2FJROTZAH4FHLTJLPWX4DRZCC5NASLGITR6"
"""StrKey encoding of PUBLIC_KEY_HEX."""

LEGACY_ADDRESS: Final = "gvb1qhYkzb2f5bBjHoxJuEdDehFZCzbPw7JwCEfavEn6hYs2UN"
"""Deprecated base58 encoding of PUBLIC_KEY_HEX."""

HELLO_SIGNATURE_HEX: Final = (
    "6970dad564d940df9017a22431bc2d52fae0b56ce07b860fbe3819fe7128653c"
    "cb4ce6c05aef0141e84b1428cc6289fd6e1d5a0941e2005f4dfe534cdbb1990e"
)
"""Signature of b"hello" under SEED_HEX."""

TESTNET_MASTER_ADDRESS: Final = "GBRPYHIL2CI3FNQ4BXLFMNDLFJUNPU2HY3ZMFSHONUCEOASW7QC7OX2H"
"""Master account of the test network."""

PUBLIC_MASTER_ADDRESS: Final = "GAAZI4TCR3TY5OJHCTJC2A4QSY6CJWJH5IAJTGKIN2ER7LBNVKOCCWN7"
"""Master account of the production network."""

TESTNET_NETWORK_ID_HEX: Final = "cee0302d59844d32bdca915c8203dd44b33fbb7edc19051ea37abedf28ecd472"
"""SHA-256 of the test network passphrase."""

PUBLIC_NETWORK_ID_HEX: Final = "7ac33997544e3175d266bd022439b22cdb16508c01163f26e5cb2a3e1045a979"
"""SHA-256 of the production network passphrase."""

ZERO_ADDRESS: Final = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"
"""StrKey account id of 32 zero bytes."""

ZERO_SEED: Final = "SAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAABSU2"
"""StrKey seed of 32 zero bytes."""

ZERO_SEED_ADDRESS: Final = "GA5WUJ54Z23KILLCUOUNAKTPBVZWKMQVO4O6EQ5GHLAERIMLLHNCSKYH"
"""Address of the keypair derived from the all-zero seed."""

ZERO_SEED_PUBLIC_KEY_HEX: Final = (
    "3b6a27bcceb6a42d62a3a8d02a6f0d73653215771de243a63ac048a18b59da29"
)
"""Public key derived from the all-zero seed."""
