"""Exception hierarchy for the XDR type system."""

from __future__ import annotations


class XDRError(Exception):
    """
    Base exception for all XDR-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class XDRTypeError(XDRError, TypeError):
    """Raised when an XDR type class is incorrectly defined or a value has the wrong type."""


class XDRValueError(XDRError, ValueError):
    """
    Raised when a value is invalid for an XDR operation, even if the type is correct.
    """


class XDRLengthError(XDRValueError):
    """
    Raised when opaque data has an incorrect length.

    Attributes:
        type_name: The XDR type with the length constraint.
        expected: The expected length (exact for fixed opaque, max for variable).
        actual: The actual length received.
        is_limit: True if expected is a maximum limit, False if exact.
    """

    def __init__(
        self,
        type_name: str,
        *,
        expected: int,
        actual: int,
        is_limit: bool = False,
    ) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        self.is_limit = is_limit

        if is_limit:
            msg = f"{type_name} cannot exceed {expected} bytes, got {actual}"
        else:
            msg = f"{type_name} requires exactly {expected} bytes, got {actual}"

        super().__init__(msg)


class XDRDecodeError(XDRError, ValueError):
    """
    Raised when decoding XDR bytes to a value fails.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Failed to decode {type_name}: {detail}")
