"""Binary, octal, hexadecimal and pointer conversions."""

from __future__ import annotations

import operator
from collections.abc import Callable

from miniprintf.bits import binary_digits, hex_digits, octal_digits

_WIDTHS = (16, 32, 64)


def _check_width(width: int) -> int:
    width = operator.index(width)
    if width not in _WIDTHS:
        raise ValueError(f"width must be one of {_WIDTHS}, got {width}")
    return width


def _render(value: int, width: int, digits: Callable[[str], str]) -> str:
    """Render the low ``width`` bits of ``value`` without leading zeros."""
    text = digits(binary_digits(value, width)).lstrip("0")
    return text or "0"


def format_binary(value: int) -> str:
    """Format a 32-bit integer in binary (%b); negatives in two's complement."""
    return _render(value, 32, lambda bits: bits)


def format_octal(value: int, width: int) -> str:
    """Format the low ``width`` bits of ``value`` in octal (%o, %lo, %ho)."""
    return _render(value, _check_width(width), octal_digits)


def format_hex(value: int, width: int, upper: bool) -> str:
    """Format the low ``width`` bits of ``value`` in hexadecimal (%x, %X and sized forms)."""
    width = _check_width(width)
    return _render(value, width, lambda bits: hex_digits(bits, upper))


def format_alternate_octal(value: int) -> str:
    """Format a 32-bit octal with a leading ``0`` unless it is zero (%#o)."""
    text = format_octal(value, 32)
    return text if text == "0" else "0" + text


def format_alternate_hex(value: int, upper: bool) -> str:
    """Format a 32-bit hexadecimal with ``0x``/``0X`` unless it is zero (%#x, %#X)."""
    text = format_hex(value, 32, upper)
    if text == "0":
        return text
    return ("0X" if upper else "0x") + text


def format_pointer(value: int | None) -> str:
    """Format an address as ``0x`` and lowercase hex, or ``(nil)`` for null (%p)."""
    if value is None or operator.index(value) == 0:
        return "(nil)"
    return "0x" + format_hex(value, 64, False)