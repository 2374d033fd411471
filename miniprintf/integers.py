"""Decimal conversions for int, long and short, signed and unsigned."""

from __future__ import annotations

import operator


def _signed(value: int, bits: int) -> int:
    value = operator.index(value) & ((1 << bits) - 1)
    return value - (1 << bits) if value >> (bits - 1) else value


def _unsigned(value: int, bits: int) -> int:
    return operator.index(value) & ((1 << bits) - 1)


def format_int(value: int) -> str:
    """Format ``value`` as a signed 32-bit decimal (%d, %i)."""
    return str(_signed(value, 32))


def format_long(value: int) -> str:
    """Format ``value`` as a signed 64-bit decimal (%ld, %li)."""
    return str(_signed(value, 64))


def format_short(value: int) -> str:
    """Format ``value`` as a signed 16-bit decimal (%hd, %hi)."""
    return str(_signed(value, 16))


def format_signed_plus(value: int) -> str:
    """Format a signed 32-bit decimal that always carries a sign (%+d)."""
    number = _signed(value, 32)
    return str(number) if number < 0 else f"+{number}"


def format_signed_space(value: int) -> str:
    """Format a signed 32-bit decimal with a space where ``+`` would be (% d)."""
    number = _signed(value, 32)
    return str(number) if number < 0 else f" {number}"


def format_unsigned(value: int) -> str:
    """Format ``value`` as an unsigned 32-bit decimal (%u)."""
    return str(_unsigned(value, 32))


def format_long_unsigned(value: int) -> str:
    """Format ``value`` as an unsigned 64-bit decimal (%lu)."""
    return str(_unsigned(value, 64))


def format_short_unsigned(value: int) -> str:
    """Format ``value`` as an unsigned 16-bit decimal (%hu)."""
    return str(_unsigned(value, 16))