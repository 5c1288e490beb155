"""
XDR Struct Type: ordered heterogeneous collections with named fields.

Structs are encoded as the concatenation of their fields in declaration order.
There are no offsets or length prefixes at the struct level; every field is
self-delimiting.
"""

from __future__ import annotations

from typing import IO, Type, cast

from typing_extensions import Self

from .xdr_base import XDRModel, XDRType


class XDRStruct(XDRModel):
    """
    XDR struct: a strict, ordered collection of named fields.

    Example:
        >>> class DecoratedSignature(XDRStruct):
        ...     hint: SignatureHint
        ...     signature: Signature
    """

    @classmethod
    def _field_types(cls) -> list[tuple[str, Type[XDRType]]]:
        """Return (name, type) pairs in declaration order."""
        return [
            (name, cast(Type[XDRType], info.annotation)) for name, info in cls.model_fields.items()
        ]

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A struct is fixed-size only when all its fields are fixed-size."""
        return all(field_type.is_fixed_size() for _, field_type in cls._field_types())

    @classmethod
    def get_byte_length(cls) -> int:
        """
        Calculate the exact byte length for fixed-size structs.

        Raises:
            TypeError: If called on a variable-size struct.
        """
        if not cls.is_fixed_size():
            raise TypeError(f"{cls.__name__} is variable-size")
        return sum(field_type.get_byte_length() for _, field_type in cls._field_types())

    def serialize(self, stream: IO[bytes]) -> int:
        """Serialize every field in declaration order."""
        return sum(
            cast(XDRType, getattr(self, name)).serialize(stream) for name, _ in self._field_types()
        )

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """Read every field in declaration order and build the struct."""
        values = {name: field_type.deserialize(stream) for name, field_type in cls._field_types()}
        return cls(**values)
