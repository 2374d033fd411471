"""Character and string conversions: %c, %s, %r, %R, %S and %%."""

from __future__ import annotations

import operator

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_ROTATED = "NOPQRSTUVWXYZABCDEFGHIJKLMnopqrstuvwxyzabcdefghijklm"
_ROT13 = str.maketrans(_ALPHABET, _ROTATED)


def format_char(value: str | int) -> str:
    """Return one character; integers are taken as a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"single character expected, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def format_string(value: str | None) -> str:
    """Return the string itself, or ``(null)`` for ``None``."""
    return "(null)" if value is None else value


def format_reversed(value: str | None) -> str:
    """Return the string reversed, or ``(llun)`` for ``None``."""
    return "(llun)" if value is None else value[::-1]


def format_rot13(value: str | None) -> str:
    """Return the string with ASCII letters rotated by 13, or ``(avyy)``."""
    return "(avyy)" if value is None else value.translate(_ROT13)


def format_escaped(value: str | bytes) -> str:
    r"""Return the text with non-printable bytes written as ``\xHH``.

    Strings are encoded as UTF-8 first; bytes below 32 or from 127 up are
    escaped with two uppercase hexadecimal digits.
    """
    if isinstance(value, str):
        data = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise TypeError(f"string or bytes expected, got {type(value).__name__}")
    return "".join(
        chr(byte) if 32 <= byte < 127 else f"\\x{byte:02X}" for byte in data
    )


def format_percent() -> str:
    """Return a literal percent sign."""
    return "%"