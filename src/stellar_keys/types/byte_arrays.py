"""
Opaque byte types.

XDR knows two kinds of opaque data:

- Fixed-length opaque `opaque name[N]`: exactly N bytes, zero-padded to a
  multiple of four on the wire.
- Variable-length opaque `opaque name<L>`: a 4-byte big-endian length prefix,
  at most L bytes of data, then zero padding to a multiple of four.
"""

from __future__ import annotations

from typing import IO, Any, ClassVar, Iterable, SupportsIndex

from pydantic import Field, field_validator
from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .constants import LENGTH_PREFIX_BYTE_LENGTH, padding_for
from .exceptions import XDRDecodeError, XDRLengthError, XDRTypeError
from .xdr_base import XDRModel, XDRType, read_exact


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    return bytes(value)


def _check_padding(stream: IO[bytes], length: int, type_name: str) -> None:
    """Consume the alignment padding after `length` data bytes, which must be zero."""
    pad = padding_for(length)
    if pad and read_exact(stream, pad, type_name) != b"\x00" * pad:
        raise XDRDecodeError(type_name, "non-zero padding bytes")


class BaseBytes(bytes, XDRType):
    """
    A base class for fixed-length opaque types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.

    Instances are immutable byte objects with strict length checking.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new Bytes instance.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            XDRLengthError: If the resulting byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise XDRTypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise XDRLengthError(cls.__name__, expected=cls.LENGTH, actual=len(b))
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a new instance filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def is_fixed_size(cls) -> bool:
        """Fixed opaque data has its length known at the type level."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the encoded length of this type, padding included."""
        return cls.LENGTH + padding_for(cls.LENGTH)

    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the raw bytes and their alignment padding to `stream`.

        Returns:
            Number of bytes written.
        """
        pad = padding_for(self.LENGTH)
        stream.write(bytes(self) + b"\x00" * pad)
        return self.LENGTH + pad

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """Read exactly `LENGTH` bytes plus padding from `stream` and build an instance."""
        data = read_exact(stream, cls.LENGTH, cls.__name__)
        _check_padding(stream, cls.LENGTH, cls.__name__)
        return cls(data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Otherwise, validate the input has exactly LENGTH bytes and instantiate.
        3. For serialization (e.g., to JSON), convert to hex string.
        """
        from_bytes_validator = core_schema.no_info_plain_validator_function(cls)

        python_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                from_bytes_validator,
            ]
        )

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                python_schema,
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)


class Bytes4(BaseBytes):
    """Fixed-size opaque data of exactly 4 bytes."""

    LENGTH = 4


class Bytes32(BaseBytes):
    """Fixed-size opaque data of exactly 32 bytes."""

    LENGTH = 32


class Bytes64(BaseBytes):
    """Fixed-size opaque data of exactly 64 bytes."""

    LENGTH = 64


class BaseVarOpaque(XDRModel):
    """
    Base class for variable-length opaque data `opaque<LIMIT>`.

    Subclasses set:
      - `LIMIT`: maximum number of bytes the instance may contain.
    """

    LIMIT: ClassVar[int]
    """Maximum number of bytes the instance may contain."""

    data: bytes = Field(default=b"")
    """The raw bytes stored in this value."""

    @field_validator("data", mode="before")
    @classmethod
    def _validate_var_opaque_data(cls, v: Any) -> bytes:
        """Validate and convert input to bytes with limit checking."""
        if not hasattr(cls, "LIMIT"):
            raise XDRTypeError(f"{cls.__name__} must define LIMIT")

        b = _coerce_to_bytes(v)
        if len(b) > cls.LIMIT:
            raise XDRLengthError(cls.__name__, expected=cls.LIMIT, actual=len(b), is_limit=True)
        return b

    @classmethod
    def is_fixed_size(cls) -> bool:
        """Variable opaque data has a length that depends on the value."""
        return False

    @classmethod
    def get_byte_length(cls) -> int:
        """Variable opaque data has no fixed byte length."""
        raise TypeError(f"{cls.__name__} is variable-size and has no fixed byte length")

    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the length prefix, the raw bytes and their padding to `stream`.

        Returns:
            Number of bytes written.
        """
        length = len(self.data)
        pad = padding_for(length)
        stream.write(length.to_bytes(LENGTH_PREFIX_BYTE_LENGTH, "big"))
        stream.write(self.data + b"\x00" * pad)
        return LENGTH_PREFIX_BYTE_LENGTH + length + pad

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Read a length-prefixed opaque value from `stream`.

        Raises:
            XDRDecodeError: If the declared length exceeds `LIMIT` or the stream ends early.
        """
        prefix = read_exact(stream, LENGTH_PREFIX_BYTE_LENGTH, cls.__name__)
        length = int.from_bytes(prefix, "big")
        if length > cls.LIMIT:
            raise XDRDecodeError(cls.__name__, f"length {length} exceeds limit {cls.LIMIT}")
        data = read_exact(stream, length, cls.__name__)
        _check_padding(stream, length, cls.__name__)
        return cls(data=data)

    def __bytes__(self) -> bytes:
        """Return the opaque value as a bytes object."""
        return self.data

    def __len__(self) -> int:
        """Return the number of data bytes, excluding prefix and padding."""
        return len(self.data)

    def __repr__(self) -> str:
        """Return a string representation of the opaque value."""
        tname = type(self).__name__
        return f"{tname}({self.data.hex()})"

    def __eq__(self, other: object) -> bool:
        """Return whether the two opaque values are equal."""
        return isinstance(other, type(self)) and self.data == other.data

    def __hash__(self) -> int:
        """Return the hash of the opaque value."""
        return hash((type(self), self.data))

    def hex(self) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return self.data.hex()


class VarOpaque64(BaseVarOpaque):
    """Variable-length opaque data with a limit of 64 bytes."""

    LIMIT = 64
