"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

256-bit unsigned integer implementation

The value is held as 32 byte limbs, least significant first. Shifts are the
only public operations that change a value in place; everything else returns
a new Uint256.
"""

import struct
from typing import Union

from wideint.errors import ByteIndexError, ConstructionError, NarrowingOverflowError
from wideint.util import error

WIDTH = 32  # 32 * 8 bits = 256 bits
BITS = WIDTH * 8
HEX_DIGITS = WIDTH * 2
MASK = (1 << BITS) - 1

# Native widths accepted by from_uN / to_uN, with their struct formats
NATIVE_WIDTHS = {
    8: "<B",
    16: "<H",
    32: "<I",
    64: "<Q",
}

_HEX_CHARS = frozenset("0123456789abcdefABCDEF")


def _parse_hex(hex_str: str) -> bytes:
    """Validate hex text and return its bytes, most significant first"""
    if not isinstance(hex_str, str):
        raise ConstructionError(f"from_hex() : expected str, got {type(hex_str).__name__}")

    if hex_str.startswith("0x") or hex_str.startswith("0X"):
        hex_str = hex_str[2:]

    if not hex_str:
        raise ConstructionError("from_hex() : empty hex string")

    # Make the leading nibble explicit
    if len(hex_str) % 2:
        hex_str = "0" + hex_str

    for ch in hex_str:
        if ch not in _HEX_CHARS:
            raise ConstructionError(f"from_hex() : invalid hex digit {ch!r}")

    if len(hex_str) > HEX_DIGITS:
        raise ConstructionError(
            f"from_hex() : {len(hex_str) // 2} bytes is wider than {WIDTH} bytes"
        )

    return bytes.fromhex(hex_str)


def check_hex(hex_str: str) -> bool:
    """
    Check whether hex text would parse as a Uint256

    Failures are reported through error() rather than raised.

    Returns:
        True if from_hex() would accept hex_str
    """
    try:
        _parse_hex(hex_str)
    except ConstructionError as e:
        return error("check_hex()", e)
    return True


class Uint256:
    """256-bit unsigned integer"""

    __slots__ = ("pn",)

    def __init__(self, value: Union[int, str, bytes, bytearray, memoryview, "Uint256"] = 0):
        self.pn = bytearray(WIDTH)
        if isinstance(value, Uint256):
            self.pn[:] = value.pn
        elif isinstance(value, str):
            self._load_hex(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._load_slice(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            self._load_int(value)
        else:
            raise ConstructionError(f"Uint256() : unsupported type {type(value).__name__}")

    # Construction

    def _load_int(self, value: int):
        if value < 0 or value > MASK:
            raise ConstructionError(f"from_int() : {value} is outside [0, 2**{BITS})")
        self.pn[:] = value.to_bytes(WIDTH, "little")

    def _load_slice(self, data):
        data = bytes(data)
        if len(data) > WIDTH:
            raise ConstructionError(f"from_slice() : {len(data)} bytes is wider than {WIDTH} bytes")
        self.pn[: len(data)] = data

    def _load_hex(self, hex_str: str):
        # Text is big-endian; storage is little-endian
        self._load_slice(_parse_hex(hex_str)[::-1])

    @classmethod
    def zero(cls) -> "Uint256":
        return cls()

    @classmethod
    def one(cls) -> "Uint256":
        result = cls()
        result.pn[0] = 1
        return result

    @classmethod
    def from_int(cls, value: int) -> "Uint256":
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConstructionError(f"from_int() : expected int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def _from_native(cls, value: int, bits: int) -> "Uint256":
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConstructionError(f"from_u{bits}() : expected int, got {type(value).__name__}")
        if value < 0 or value >> bits:
            raise ConstructionError(f"from_u{bits}() : {value} does not fit in {bits} bits")
        result = cls()
        packed = struct.pack(NATIVE_WIDTHS[bits], value)
        result.pn[: len(packed)] = packed
        return result

    @classmethod
    def from_u8(cls, value: int) -> "Uint256":
        return cls._from_native(value, 8)

    @classmethod
    def from_u16(cls, value: int) -> "Uint256":
        return cls._from_native(value, 16)

    @classmethod
    def from_u32(cls, value: int) -> "Uint256":
        return cls._from_native(value, 32)

    @classmethod
    def from_u64(cls, value: int) -> "Uint256":
        return cls._from_native(value, 64)

    @classmethod
    def from_slice(cls, data: Union[bytes, bytearray, memoryview]) -> "Uint256":
        """
        Build from little-endian bytes

        Up to 32 bytes are copied into the low limbs; the high limbs stay zero.

        Raises:
            ConstructionError: data is longer than 32 bytes
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise ConstructionError(f"from_slice() : expected bytes, got {type(data).__name__}")
        return cls(data)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Uint256":
        """
        Build from big-endian hex text

        Accepts an optional 0x/0X prefix, either case of digit, and an odd
        number of digits (treated as having a leading zero).

        Raises:
            ConstructionError: empty text, a non-hex character, or more
                than 64 digits after padding
        """
        return cls(_parse_hex(hex_str)[::-1])

    def copy(self) -> "Uint256":
        return Uint256(self)

    __copy__ = copy

    # Hex codec

    def get_hex(self) -> str:
        """Get hex string representation (64 digits, no prefix)"""
        # Reverse for display (big-endian)
        return bytes(reversed(self.pn)).hex()

    def to_text(self) -> str:
        """Canonical text: 0x followed by 64 lowercase hex digits"""
        return "0x" + self.get_hex()

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"Uint256('{self.to_text()}')"

    def __format__(self, format_spec):
        if not format_spec:
            return self.to_text()
        return format(int(self), format_spec)

    # Shift engine

    @staticmethod
    def _check_shift(places: int):
        if not isinstance(places, int):
            raise TypeError(f"shift count must be int, not {type(places).__name__}")
        if places < 0:
            raise ValueError("negative shift count")

    def shift_left(self, places: int) -> None:
        """Shift left in place; bits above bit 255 are lost"""
        self._check_shift(places)
        byte_shift, bit_shift = divmod(places, 8)
        pn = self.pn

        if byte_shift >= WIDTH:
            pn[:] = bytes(WIDTH)
            return

        if byte_shift > 0:
            for i in range(WIDTH - 1, byte_shift - 1, -1):
                pn[i] = pn[i - byte_shift]
            for i in range(byte_shift):
                pn[i] = 0

        if bit_shift > 0:
            for i in range(WIDTH - 1, 0, -1):
                pn[i] = ((pn[i] << bit_shift) | (pn[i - 1] >> (8 - bit_shift))) & 0xFF
            pn[0] = (pn[0] << bit_shift) & 0xFF

    def shift_right(self, places: int) -> None:
        """Shift right in place; bits below bit 0 are lost"""
        self._check_shift(places)
        byte_shift, bit_shift = divmod(places, 8)
        pn = self.pn

        if byte_shift >= WIDTH:
            pn[:] = bytes(WIDTH)
            return

        if byte_shift > 0:
            for i in range(WIDTH - byte_shift):
                pn[i] = pn[i + byte_shift]
            for i in range(WIDTH - byte_shift, WIDTH):
                pn[i] = 0

        if bit_shift > 0:
            for i in range(WIDTH - 1):
                pn[i] = ((pn[i] >> bit_shift) | (pn[i + 1] << (8 - bit_shift))) & 0xFF
            pn[WIDTH - 1] >>= bit_shift

    def __lshift__(self, places):
        if not isinstance(places, int):
            return NotImplemented
        result = self.copy()
        result.shift_left(places)
        return result

    def __rshift__(self, places):
        if not isinstance(places, int):
            return NotImplemented
        result = self.copy()
        result.shift_right(places)
        return result

    def __ilshift__(self, places):
        self.shift_left(places)
        return self

    def __irshift__(self, places):
        self.shift_right(places)
        return self

    # Arithmetic

    def add(self, other: "Uint256") -> "Uint256":
        """Ripple-carry addition modulo 2**256"""
        result = Uint256()
        carry = 0
        for i in range(WIDTH):
            n = carry + self.pn[i] + other.pn[i]
            result.pn[i] = n & 0xFF
            carry = n >> 8
        return result

    def mul(self, other: "Uint256") -> "Uint256":
        """Schoolbook multiplication modulo 2**256"""
        result = Uint256()
        for i in range(WIDTH):
            a = self.pn[i]
            if a == 0:
                continue
            carry = 0
            # Partial products at limb 32 and above wrap away
            for j in range(WIDTH - i):
                n = result.pn[i + j] + a * other.pn[j] + carry
                result.pn[i + j] = n & 0xFF
                carry = n >> 8
        return result

    def __add__(self, other):
        if not isinstance(other, Uint256):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Lets sum() start from 0
        if isinstance(other, int) and other == 0:
            return self.copy()
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, Uint256):
            return NotImplemented
        return self.mul(other)

    # Narrowing and accessors

    def _to_native(self, bits: int) -> int:
        n = bits // 8
        if any(self.pn[n:]):
            raise NarrowingOverflowError(f"to_u{bits}() : {self.to_text()} does not fit in {bits} bits")
        return struct.unpack(NATIVE_WIDTHS[bits], bytes(self.pn[:n]))[0]

    def to_u8(self) -> int:
        return self._to_native(8)

    def to_u16(self) -> int:
        return self._to_native(16)

    def to_u32(self) -> int:
        return self._to_native(32)

    def to_u64(self) -> int:
        return self._to_native(64)

    def __int__(self):
        return int.from_bytes(self.pn, "little")

    def get_byte(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < WIDTH:
            raise ByteIndexError(f"get_byte() : index {index!r} out of range [0, {WIDTH})")
        return self.pn[index]

    def as_bytes(self) -> memoryview:
        """Read-only view of the limbs, least significant first"""
        return memoryview(self.pn).toreadonly()

    def to_bytes(self) -> bytes:
        """Convert to 32-byte little-endian bytes"""
        return bytes(self.pn)

    def is_zero(self) -> bool:
        return not any(self.pn)

    def __bool__(self):
        return not self.is_zero()

    def __eq__(self, other):
        if isinstance(other, Uint256):
            return self.pn == other.pn
        if isinstance(other, int):
            return 0 <= other <= MASK and int(self) == other
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # Equal ints must hash alike
        return hash(int(self))
