"""XDR discriminated union type."""

from __future__ import annotations

from typing import IO, Any, ClassVar, Mapping, Tuple, Type, cast

from pydantic import Field, field_validator
from typing_extensions import Self

from .exceptions import XDRDecodeError, XDRTypeError, XDRValueError
from .uint import Int32
from .xdr_base import XDRModel, XDRType


class XDRUnion(XDRModel):
    """
    Base class for XDR unions.

    A union is encoded as a signed 32-bit discriminant followed by the encoding
    of the arm it selects. Arms declared as `None` are `void` and carry no bytes.

    ## Creating Union Types

    ```python
    class PublicKey(XDRUnion):
        ARMS = {PublicKeyType.PUBLIC_KEY_TYPE_ED25519: Uint256}
    ```

    ## Instance Creation

    ```python
    key = PublicKey(data=(PublicKeyType.PUBLIC_KEY_TYPE_ED25519, raw_key))
    assert key.discriminant == 0
    assert key.value == raw_key
    ```
    """

    ARMS: ClassVar[Mapping[int, Type[XDRType] | None]]
    """Map from discriminant value to arm type (`None` for void arms)."""

    data: Tuple[int, Any] = Field()
    """The union data stored as (discriminant, value) tuple."""

    @field_validator("data", mode="before")
    @classmethod
    def _validate_union_data(cls, v: Any) -> Tuple[int, Any]:
        """Validate and convert union data to a (discriminant, value) tuple."""
        if not hasattr(cls, "ARMS") or not cls.ARMS:
            raise XDRTypeError(f"{cls.__name__} must define a non-empty ARMS mapping")

        if not isinstance(v, tuple) or len(v) != 2:
            raise ValueError(f"{cls.__name__} data must be a (discriminant, value) tuple")

        discriminant, value = v
        if not isinstance(discriminant, int):
            raise ValueError(f"Discriminant must be int, got {type(discriminant)}")
        discriminant = int(discriminant)
        if discriminant not in cls.ARMS:
            raise ValueError(f"Invalid discriminant {discriminant} for {cls.__name__}")

        arm_type = cls.ARMS[discriminant]
        if arm_type is None:
            if value is not None:
                raise TypeError("Selected arm is void, therefore value must be None")
            return (discriminant, None)

        if isinstance(value, arm_type):
            return (discriminant, value)

        try:
            return (discriminant, cast(Any, arm_type)(value))
        except Exception as e:
            raise TypeError(f"Cannot coerce {type(value).__name__} to {arm_type.__name__}: {e}") from e

    @property
    def discriminant(self) -> int:
        """The discriminant selecting the active arm."""
        return self.data[0]

    @property
    def value(self) -> Any:
        """The value of the active arm."""
        return self.data[1]

    @property
    def arm_type(self) -> Type[XDRType] | None:
        """The type class of the active arm."""
        return self.ARMS[self.discriminant]

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A union is fixed-size only if every arm encodes to the same length."""
        lengths = set()
        for arm in cls.ARMS.values():
            if arm is not None and not arm.is_fixed_size():
                return False
            lengths.add(0 if arm is None else arm.get_byte_length())
        return len(lengths) == 1

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the encoded length of a fixed-size union, discriminant included."""
        if not cls.is_fixed_size():
            raise TypeError(f"{cls.__name__} is variable-size")
        arm = next(iter(cls.ARMS.values()))
        return Int32.get_byte_length() + (0 if arm is None else arm.get_byte_length())

    def serialize(self, stream: IO[bytes]) -> int:
        """Serialize the discriminant followed by the active arm."""
        written = Int32(self.discriminant).serialize(stream)
        if self.arm_type is not None:
            written += cast(XDRType, self.value).serialize(stream)
        return written

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """Deserialize a union from a byte stream."""
        discriminant = int(Int32.deserialize(stream))
        if discriminant not in cls.ARMS:
            raise XDRDecodeError(cls.__name__, f"unknown discriminant {discriminant}")

        arm_type = cls.ARMS[discriminant]
        if arm_type is None:
            return cls(data=(discriminant, None))
        return cls(data=(discriminant, arm_type.deserialize(stream)))

    def __repr__(self) -> str:
        """Return a readable string representation of this union."""
        return f"{type(self).__name__}(discriminant={self.discriminant}, value={self.value!r})"


def require_arm(union: XDRUnion, discriminant: int) -> Any:
    """
    Return the value of `union` if `discriminant` is the active arm.

    Raises:
        XDRValueError: If another arm is active.
    """
    if union.discriminant != discriminant:
        raise XDRValueError(
            f"{type(union).__name__} holds arm {union.discriminant}, expected {discriminant}"
        )
    return union.value
