"""Fixed-width binary, hexadecimal and octal digit strings."""

from __future__ import annotations

import operator

_BINARY = frozenset("01")


def _check_bits(bits: str) -> None:
    if not isinstance(bits, str):
        raise TypeError(f"bit string expected, got {type(bits).__name__}")
    if not set(bits) <= _BINARY:
        raise ValueError(f"not a bit string: {bits!r}")


def binary_digits(value: int, width: int) -> str:
    """Return ``value`` as exactly ``width`` two's-complement bits.

    Negative values are written in two's complement; values wider than
    ``width`` keep only their low ``width`` bits.
    """
    value = operator.index(value)
    width = operator.index(width)
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    return format(value & ((1 << width) - 1), f"0{width}b")


def hex_digits(bits: str, upper: bool) -> str:
    """Convert a bit string whose length is a multiple of four to hex digits.

    Every group of four bits yields one digit, leading zeros included.
    """
    _check_bits(bits)
    if len(bits) % 4:
        raise ValueError(f"bit string length {len(bits)} is not a multiple of 4")
    if not bits:
        return ""
    digits = format(int(bits, 2), f"0{len(bits) // 4}x")
    return digits.upper() if upper else digits


def octal_digits(bits: str) -> str:
    """Convert a bit string to octal digits, grouping three bits from the right.

    The leftmost digit takes whatever bits remain, so 16 bits give six
    digits, 32 bits give eleven and 64 bits give twenty-two.
    """
    _check_bits(bits)
    if not bits:
        return ""
    count = -(-len(bits) // 3)
    return format(int(bits, 2), f"0{count}o")