"""Reusable XDR type definitions for the Stellar protocol."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, BaseVarOpaque, Bytes4, Bytes32, Bytes64, VarOpaque64
from .exceptions import (
    XDRDecodeError,
    XDRError,
    XDRLengthError,
    XDRTypeError,
    XDRValueError,
)
from .struct import XDRStruct
from .uint import Int32, Uint32
from .union import XDRUnion, require_arm
from .xdr_base import XDRModel, XDRType

__all__ = [
    # Core types
    "Int32",
    "Uint32",
    "BaseBytes",
    "BaseVarOpaque",
    "Bytes4",
    "Bytes32",
    "Bytes64",
    "VarOpaque64",
    "StrictBaseModel",
    "XDRType",
    "XDRModel",
    "XDRStruct",
    "XDRUnion",
    "require_arm",
    # Exceptions
    "XDRError",
    "XDRTypeError",
    "XDRValueError",
    "XDRLengthError",
    "XDRDecodeError",
]
