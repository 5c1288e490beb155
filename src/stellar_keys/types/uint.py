"""XDR integer types: 32-bit signed and unsigned, big-endian on the wire."""

from __future__ import annotations

from typing import IO, Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .xdr_base import XDRType, read_exact


class BaseInteger(int, XDRType):
    """A base class for fixed-width XDR integers that inherits from `int`."""

    BITS: ClassVar[int] = 32
    """The number of bits in the integer."""

    SIGNED: ClassVar[bool]
    """Whether the integer is two's-complement signed (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new integer instance.

        Raises:
            OverflowError: If `value` does not fit in `BITS` bits.
        """
        int_value = int(value)
        low, high = cls.bounds()
        if not low <= int_value <= high:
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def bounds(cls) -> tuple[int, int]:
        """Return the inclusive (min, max) range of representable values."""
        if cls.SIGNED:
            return -(2 ** (cls.BITS - 1)), 2 ** (cls.BITS - 1) - 1
        return 0, 2**cls.BITS - 1

    @classmethod
    def is_fixed_size(cls) -> bool:
        """Integers always occupy `BITS // 8` bytes."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the byte length of this integer type."""
        return cls.BITS // 8

    def serialize(self, stream: IO[bytes]) -> int:
        """Write the big-endian representation of the integer to `stream`."""
        stream.write(int(self).to_bytes(self.get_byte_length(), "big", signed=self.SIGNED))
        return self.get_byte_length()

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """Read a big-endian integer from `stream`."""
        data = read_exact(stream, cls.get_byte_length(), cls.__name__)
        return cls(int.from_bytes(data, "big", signed=cls.SIGNED))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseInteger:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        low, high = cls.bounds()
        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=low, le=high),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    def __repr__(self) -> str:
        """Return a string representation of the integer."""
        return f"{type(self).__name__}({int(self)})"


class Int32(BaseInteger):
    """A 32-bit two's-complement signed integer."""

    SIGNED = True


class Uint32(BaseInteger):
    """A 32-bit unsigned integer."""

    SIGNED = False
