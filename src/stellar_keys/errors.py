"""Exception hierarchy for keypair construction, decoding and signing."""

from __future__ import annotations


class KeypairError(Exception):
    """
    Base exception for every failure surfaced by this package.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidInputError(KeypairError, ValueError):
    """
    Raised when raw bytes have the wrong length, or are not bytes at all.

    Attributes:
        what: Name of the offending input (e.g. "seed", "signature").
        expected: The required length in bytes, or None when any length is allowed.
        actual: The length that was supplied, or the type name of a non-bytes value.
    """

    def __init__(self, what: str, *, expected: int | None = None, actual: int | str) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual

        if isinstance(actual, str):
            msg = f"{what} must be bytes, got {actual}"
        else:
            msg = f"{what} must be exactly {expected} bytes, got {actual}"

        super().__init__(msg)


class DecodeError(KeypairError, ValueError):
    """Raised when encoded text fails validation in the codec layer."""


class MalformedEncodingError(DecodeError):
    """The text is not a well-formed encoding at all."""


class VersionMismatchError(DecodeError):
    """
    The version byte does not match the requested payload type.

    Attributes:
        expected: The version byte the caller asked for.
        actual: The version byte found in the text.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid version byte: expected {expected:#04x}, got {actual:#04x}")


class ChecksumMismatchError(DecodeError):
    """The integrity checksum embedded in the text does not match its payload."""


class SigningUnavailableError(KeypairError):
    """Raised when a secret-dependent operation is requested from a public-only keypair."""


class NetworkConfigError(KeypairError):
    """
    Raised when a network configuration file cannot be loaded.

    Attributes:
        path: The file that was being read.
        reason: Why loading failed.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot load network config {path}: {reason}")
