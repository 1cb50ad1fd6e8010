"""
wideint - fixed-width 256-bit unsigned integers

A 32-byte little-endian value type with a hex codec, in-place shifts,
wraparound arithmetic and bounds-checked narrowing.
"""

__version__ = "0.1.0"

from wideint.errors import (
    ByteIndexError,
    ConstructionError,
    NarrowingOverflowError,
    Uint256Error,
)
from wideint.uint256 import BITS, HEX_DIGITS, MASK, NATIVE_WIDTHS, WIDTH, Uint256, check_hex
from wideint.util import error

__all__ = [
    # Uint256
    "Uint256",
    "check_hex",
    "BITS",
    "HEX_DIGITS",
    "MASK",
    "NATIVE_WIDTHS",
    "WIDTH",
    # Errors
    "ByteIndexError",
    "ConstructionError",
    "NarrowingOverflowError",
    "Uint256Error",
    # Util
    "error",
]
