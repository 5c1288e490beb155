"""Tests for XDR integers, structs and unions."""

from __future__ import annotations

from enum import IntEnum

import pytest
from pydantic import ValidationError

from stellar_keys.types import (
    Bytes4,
    Int32,
    Uint32,
    VarOpaque64,
    XDRDecodeError,
    XDRStruct,
    XDRUnion,
    XDRValueError,
    require_arm,
)


class Color(IntEnum):
    RED = 0
    GREEN = 1
    NONE = -1


class ColorValue(XDRUnion):
    """Union with a fixed arm, a variable arm and a void arm."""

    ARMS = {Color.RED: Uint32, Color.GREEN: VarOpaque64, Color.NONE: None}


class FixedPair(XDRStruct):
    """Two fixed-size fields."""

    tag: Bytes4
    count: Uint32


class Mixed(XDRStruct):
    """A struct with a variable-size field."""

    count: Int32
    payload: VarOpaque64


class TestIntegers:
    """Tests for Int32 and Uint32."""

    def test_big_endian(self) -> None:
        assert Uint32(1).encode_bytes() == b"\x00\x00\x00\x01"
        assert Int32(-1).encode_bytes() == b"\xff\xff\xff\xff"
        assert Int32.decode_bytes(b"\xff\xff\xff\xfe") == -2

    @pytest.mark.parametrize(
        "cls,value",
        [(Uint32, -1), (Uint32, 2**32), (Int32, 2**31), (Int32, -(2**31) - 1)],
    )
    def test_out_of_range(self, cls: type[Uint32] | type[Int32], value: int) -> None:
        with pytest.raises(OverflowError):
            cls(value)

    def test_bounds(self) -> None:
        assert Uint32.bounds() == (0, 2**32 - 1)
        assert Int32.bounds() == (-(2**31), 2**31 - 1)
        assert Int32.get_byte_length() == 4

    def test_repr(self) -> None:
        assert repr(Int32(-5)) == "Int32(-5)"


class TestStruct:
    """Tests for XDRStruct."""

    def test_fixed_size(self) -> None:
        assert FixedPair.is_fixed_size()
        assert FixedPair.get_byte_length() == 8

    def test_variable_size(self) -> None:
        assert not Mixed.is_fixed_size()
        with pytest.raises(TypeError):
            Mixed.get_byte_length()

    def test_encoding_is_field_order(self) -> None:
        value = FixedPair(tag=Bytes4(b"abcd"), count=Uint32(7))
        assert value.encode_bytes() == b"abcd\x00\x00\x00\x07"
        assert FixedPair.decode_bytes(value.encode_bytes()) == value

    def test_variable_round_trip(self) -> None:
        value = Mixed(count=Int32(-3), payload=VarOpaque64(data=b"xyz"))
        encoded = value.encode_bytes()

        assert encoded == b"\xff\xff\xff\xfd" + b"\x00\x00\x00\x03xyz\x00"
        assert Mixed.decode_bytes(encoded) == value

    def test_frozen(self) -> None:
        value = FixedPair(tag=Bytes4(b"abcd"), count=Uint32(7))
        with pytest.raises(ValidationError):
            value.count = Uint32(8)  # type: ignore[misc]

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FixedPair(tag=Bytes4(b"abcd"), count=Uint32(7), other=1)  # type: ignore[call-arg]


class TestUnion:
    """Tests for XDRUnion."""

    def test_fixed_arm(self) -> None:
        value = ColorValue(data=(Color.RED, Uint32(9)))

        assert value.discriminant == 0
        assert value.arm_type is Uint32
        assert value.encode_bytes() == b"\x00\x00\x00\x00\x00\x00\x00\x09"
        assert ColorValue.decode_bytes(value.encode_bytes()) == value

    def test_coercion(self) -> None:
        """Plain values are coerced to the arm type."""
        value = ColorValue(data=(Color.RED, 9))
        assert isinstance(value.value, Uint32)

    def test_void_arm(self) -> None:
        value = ColorValue(data=(Color.NONE, None))

        assert value.encode_bytes() == b"\xff\xff\xff\xff"
        assert ColorValue.decode_bytes(b"\xff\xff\xff\xff") == value

    def test_void_arm_rejects_value(self) -> None:
        with pytest.raises(TypeError):
            ColorValue(data=(Color.NONE, Uint32(1)))

    def test_unknown_discriminant(self) -> None:
        with pytest.raises(ValidationError):
            ColorValue(data=(5, None))

    def test_unknown_discriminant_on_decode(self) -> None:
        with pytest.raises(XDRDecodeError, match="unknown discriminant 5"):
            ColorValue.decode_bytes(b"\x00\x00\x00\x05")

    def test_size(self) -> None:
        assert not ColorValue.is_fixed_size()

    def test_require_arm(self) -> None:
        value = ColorValue(data=(Color.GREEN, VarOpaque64(data=b"hi")))

        assert require_arm(value, Color.GREEN) == VarOpaque64(data=b"hi")
        with pytest.raises(XDRValueError, match="holds arm 1"):
            require_arm(value, Color.RED)

    def test_repr(self) -> None:
        assert repr(ColorValue(data=(Color.RED, 1))) == (
            "ColorValue(discriminant=0, value=Uint32(1))"
        )
