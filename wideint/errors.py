"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Error types raised by Uint256

Every failure surfaces as a subclass of Uint256Error; each one also derives
from the matching builtin so callers can catch ValueError, IndexError or
OverflowError as usual.
"""


class Uint256Error(Exception):
    """Base class for all Uint256 failures"""

    pass


class ConstructionError(Uint256Error, ValueError):
    """Input cannot be turned into a 256-bit value (bad hex, too wide, wrong type)"""

    pass


class ByteIndexError(Uint256Error, IndexError):
    """Raw limb index outside [0, 32)"""

    pass


class NarrowingOverflowError(Uint256Error, OverflowError):
    """Narrowing conversion would discard nonzero high bytes"""

    pass
