"""Base classes and interfaces for all XDR types."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO

from typing_extensions import Self

from .base import StrictBaseModel
from .exceptions import XDRDecodeError


class XDRType(ABC):
    """
    Abstract base class for all XDR types.

    This is the minimal interface that all XDR types must implement.
    Use XDRModel for Pydantic-based XDR types.
    """

    @classmethod
    @abstractmethod
    def is_fixed_size(cls) -> bool:
        """
        Check if the type has a fixed size in bytes.

        Returns:
            bool: True if the size is fixed, False otherwise.
        """
        ...

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """
        Get the encoded byte length of the type if it is fixed-size.

        Raises:
            TypeError: If the type is not fixed-size.

        Returns:
            int: The number of bytes, padding included.
        """
        ...

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """
        Serializes the object and writes it to a binary stream.

        Args:
            stream (IO[bytes]): The stream to write the serialized data to.

        Returns:
            int: The number of bytes written.
        """
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Deserializes an object from a binary stream.

        XDR is self-delimiting, so the reader consumes exactly the bytes
        belonging to this value and leaves the stream positioned after them.

        Args:
            stream (IO[bytes]): The stream to read from.

        Returns:
            Self: An instance of the class.
        """
        ...

    def encode_bytes(self) -> bytes:
        """
        Serializes the XDR object to a byte string.

        Returns:
            bytes: The serialized byte string.
        """
        with io.BytesIO() as stream:
            self.serialize(stream)
            return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Deserializes a byte string into an XDR object.

        Raises:
            XDRDecodeError: If bytes remain after the value has been read.
        """
        with io.BytesIO(data) as stream:
            value = cls.deserialize(stream)
            trailing = len(data) - stream.tell()
        if trailing:
            raise XDRDecodeError(cls.__name__, f"{trailing} trailing bytes")
        return value


def read_exact(stream: IO[bytes], size: int, type_name: str) -> bytes:
    """Read exactly `size` bytes or fail with a decode error naming `type_name`."""
    data = stream.read(size)
    if len(data) != size:
        raise XDRDecodeError(type_name, f"stream ended, needed {size} bytes, got {len(data)}")
    return data


class XDRModel(StrictBaseModel, XDRType):
    """
    Base class for XDR types that use Pydantic validation.

    This combines StrictBaseModel (Pydantic validation + immutability) with XDR
    serialization. Use this for structs and unions.
    """

    def __repr__(self) -> str:
        """String representation showing the class name and fields."""
        field_strs = [f"{name}={getattr(self, name)!r}" for name in type(self).model_fields]
        return f"{self.__class__.__name__}({' '.join(field_strs)})"
