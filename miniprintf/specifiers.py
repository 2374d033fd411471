"""The table of conversion specifiers and how to find one in a format."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from miniprintf.integers import (
    format_int,
    format_long,
    format_long_unsigned,
    format_short,
    format_short_unsigned,
    format_signed_plus,
    format_signed_space,
    format_unsigned,
)
from miniprintf.radix import (
    format_alternate_hex,
    format_alternate_octal,
    format_binary,
    format_hex,
    format_octal,
    format_pointer,
)
from miniprintf.text import (
    format_char,
    format_escaped,
    format_percent,
    format_reversed,
    format_rot13,
    format_string,
)


@dataclass(frozen=True)
class Specifier:
    """A conversion: the characters after ``%`` and the function that renders it."""

    text: str
    convert: Callable[..., str]
    takes_argument: bool = True

    def render(self, argument: Any = None) -> str:
        """Render one argument, or nothing for conversions that take none."""
        if self.takes_argument:
            return self.convert(argument)
        return self.convert()


def _spec(text: str, convert: Callable[..., str]) -> Specifier:
    return Specifier(text, convert)


def _literal(text: str) -> Specifier:
    return Specifier(text, format_percent, takes_argument=False)


_OCT32 = partial(format_octal, width=32)
_OCT64 = partial(format_octal, width=64)
_OCT16 = partial(format_octal, width=16)
_HEX32 = partial(format_hex, width=32, upper=False)
_UPX32 = partial(format_hex, width=32, upper=True)
_HEX64 = partial(format_hex, width=64, upper=False)
_UPX64 = partial(format_hex, width=64, upper=True)
_HEX16 = partial(format_hex, width=16, upper=False)
_UPX16 = partial(format_hex, width=16, upper=True)
_ALT_HEX = partial(format_alternate_hex, upper=False)
_ALT_UPX = partial(format_alternate_hex, upper=True)

# Order matters: the first entry that matches wins.
_TABLE: tuple[Specifier, ...] = (
    _spec("c", format_char),
    _spec("s", format_string),
    _spec("i", format_int),
    _spec("d", format_int),
    _spec("b", format_binary),
    _spec("u", format_unsigned),
    _spec("o", _OCT32),
    _spec("x", _HEX32),
    _spec("X", _UPX32),
    _spec("S", format_escaped),
    _spec("p", format_pointer),
    _spec("li", format_long),
    _spec("ld", format_long),
    _spec("lu", format_long_unsigned),
    _spec("lo", _OCT64),
    _spec("lx", _HEX64),
    _spec("lX", _UPX64),
    _spec("hi", format_short),
    _spec("hd", format_short),
    _spec("hu", format_short_unsigned),
    _spec("ho", _OCT16),
    _spec("hx", _HEX16),
    _spec("hX", _UPX16),
    _spec("#o", format_alternate_octal),
    _spec("#x", _ALT_HEX),
    _spec("#X", _ALT_UPX),
    _spec("#i", format_int),
    _spec("#d", format_int),
    _spec("#u", format_unsigned),
    _spec("+i", format_signed_plus),
    _spec("+d", format_signed_plus),
    _spec("+u", format_unsigned),
    _spec("+o", _OCT32),
    _spec("+x", _HEX32),
    _spec("+X", _UPX32),
    _spec(" i", format_signed_space),
    _spec(" d", format_signed_space),
    _spec(" u", format_unsigned),
    _spec(" o", _OCT32),
    _spec(" x", _HEX32),
    _spec(" X", _UPX32),
    _spec("R", format_rot13),
    _spec("r", format_reversed),
    _literal("%"),
    _literal("l"),
    _literal("h"),
    _spec(" +i", format_signed_plus),
    _spec(" +d", format_signed_plus),
    _spec("+ i", format_signed_plus),
    _spec("+ d", format_signed_plus),
    _literal(" %"),
)


def find_specifier(fmt: str, index: int) -> Specifier | None:
    """Return the first specifier that starts at ``fmt[index]``, or ``None``."""
    if not isinstance(fmt, str):
        raise TypeError(f"format string expected, got {type(fmt).__name__}")
    index = operator.index(index)
    if index < 0:
        raise ValueError(f"index must not be negative, got {index}")
    return next((spec for spec in _TABLE if fmt.startswith(spec.text, index)), None)