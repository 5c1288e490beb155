"""Tests for fixed and variable-length opaque types."""

from __future__ import annotations

import io
from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from stellar_keys.types import (
    BaseBytes,
    BaseVarOpaque,
    Bytes4,
    Bytes32,
    Bytes64,
    VarOpaque64,
    XDRDecodeError,
    XDRLengthError,
)


class Bytes3(BaseBytes):
    """Fixed opaque data that needs one padding byte."""

    LENGTH = 3


class VarOpaque8(BaseVarOpaque):
    """Small variable opaque type for padding tests."""

    LIMIT = 8


def test_bytes_inheritance_ok() -> None:
    """Concrete types are immutable bytes of the right length."""
    assert issubclass(Bytes32, BaseBytes)
    v = Bytes32(b"\x00" * 32)
    assert isinstance(v, bytes)
    assert len(v) == 32
    assert Bytes64.LENGTH == 64


@pytest.mark.parametrize(
    "value,expected",
    [
        (b"\x00\x01\x02\x03", b"\x00\x01\x02\x03"),
        (bytearray(b"\x00\x01\x02\x03"), b"\x00\x01\x02\x03"),
        (memoryview(b"\x00\x01\x02\x03"), b"\x00\x01\x02\x03"),
        ([0, 1, 2, 3], b"\x00\x01\x02\x03"),
        ("00010203", b"\x00\x01\x02\x03"),
        ("0x00010203", b"\x00\x01\x02\x03"),
    ],
)
def test_fixed_coercion(value: Any, expected: bytes) -> None:
    assert bytes(Bytes4(value)) == expected


def test_fixed_wrong_length_raises() -> None:
    with pytest.raises(XDRLengthError, match="exactly 4 bytes, got 3"):
        Bytes4(b"\x00\x01\x02")
    with pytest.raises(ValueError):
        Bytes4("0001020304")


def test_fixed_encoding_is_raw() -> None:
    """Lengths that are multiples of four are written as-is."""
    v = Bytes4(b"\xde\xad\xbe\xef")
    assert v.encode_bytes() == b"\xde\xad\xbe\xef"
    assert Bytes4.get_byte_length() == 4
    assert Bytes4.decode_bytes(b"\xde\xad\xbe\xef") == v


def test_fixed_padding() -> None:
    """Other lengths are zero-padded to four bytes."""
    v = Bytes3(b"abc")
    assert v.encode_bytes() == b"abc\x00"
    assert Bytes3.get_byte_length() == 4
    assert Bytes3.decode_bytes(b"abc\x00") == v


def test_fixed_non_zero_padding_rejected() -> None:
    with pytest.raises(XDRDecodeError, match="non-zero padding"):
        Bytes3.decode_bytes(b"abc\x01")


def test_fixed_short_stream() -> None:
    with pytest.raises(XDRDecodeError, match="stream ended"):
        Bytes32.deserialize(io.BytesIO(b"\x00" * 31))


def test_fixed_trailing_bytes() -> None:
    with pytest.raises(XDRDecodeError, match="trailing"):
        Bytes4.decode_bytes(b"\x00" * 8)


def test_fixed_zero_and_repr() -> None:
    assert Bytes4.zero() == b"\x00" * 4
    assert repr(Bytes4(b"\x01\x02\x03\x04")) == "Bytes4(01020304)"


def test_fixed_in_pydantic_model() -> None:
    class Model(BaseModel):
        value: Bytes4

    m = Model(value=b"\x01\x02\x03\x04")
    assert isinstance(m.value, Bytes4)
    assert m.model_dump(mode="json") == {"value": "01020304"}
    with pytest.raises(ValidationError):
        Model(value=b"\x01")


def test_var_encoding() -> None:
    """Variable opaque data is length-prefixed and padded."""
    v = VarOpaque8(data=b"\x01\x02\x03\x04\x05")
    assert v.encode_bytes() == b"\x00\x00\x00\x05\x01\x02\x03\x04\x05\x00\x00\x00"
    assert VarOpaque8.decode_bytes(v.encode_bytes()) == v
    assert len(v) == 5
    assert bytes(v) == b"\x01\x02\x03\x04\x05"


def test_var_empty() -> None:
    v = VarOpaque64()
    assert v.encode_bytes() == b"\x00\x00\x00\x00"
    assert VarOpaque64.decode_bytes(b"\x00\x00\x00\x00") == v


def test_var_limit() -> None:
    VarOpaque64(data=b"\x00" * 64)
    with pytest.raises(ValidationError):
        VarOpaque64(data=b"\x00" * 65)


def test_var_declared_length_over_limit() -> None:
    with pytest.raises(XDRDecodeError, match="exceeds limit"):
        VarOpaque8.decode_bytes(b"\x00\x00\x00\x09" + b"\x00" * 12)


def test_var_truncated() -> None:
    with pytest.raises(XDRDecodeError, match="stream ended"):
        VarOpaque8.decode_bytes(b"\x00\x00\x00\x04\x01\x02")


def test_var_is_variable_size() -> None:
    assert not VarOpaque64.is_fixed_size()
    with pytest.raises(TypeError):
        VarOpaque64.get_byte_length()


def test_var_equality_and_hash() -> None:
    a = VarOpaque8(data=b"ab")
    b = VarOpaque8(data=b"ab")
    assert a == b
    assert hash(a) == hash(b)
    assert a != VarOpaque64(data=b"ab")
    assert repr(a) == "VarOpaque8(6162)"
