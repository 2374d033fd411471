"""Expansion of format strings and writing the result to a stream."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from miniprintf.specifiers import find_specifier


class FormatError(ValueError):
    """Raised when a format string cannot be expanded.

    ``partial`` holds the text that is still written out before the error.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    if not isinstance(fmt, str):
        raise TypeError(f"format string expected, got {type(fmt).__name__}")
    remaining = iter(args)
    produced: list[str] = []
    index = 0
    end = len(fmt)
    while index < end:
        char = fmt[index]
        if char != "%":
            produced.append(char)
            yield char
            index += 1
            continue
        if index + 1 == end:
            raise FormatError("format ends with a lone '%'", "".join(produced))
        spec = find_specifier(fmt, index + 1)
        if spec is None:
            if fmt[index + 1] == " " and index + 2 == end:
                raise FormatError("format ends with an incomplete '% '")
            produced.append("%")
            yield "%"
            index += 1
            continue
        if spec.takes_argument:
            try:
                argument = next(remaining)
            except StopIteration:
                raise FormatError(f"missing argument for '%{spec.text}'") from None
            text = spec.render(argument)
        else:
            text = spec.render()
        produced.append(text)
        yield text
        index += 1 + len(spec.text)


def sprintf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Expand ``fmt``, write it to ``stream`` (stdout by default) and return its length."""
    out = sys.stdout if stream is None else stream
    try:
        text = sprintf(fmt, *args)
    except FormatError as error:
        if error.partial:
            out.write(error.partial)
            out.flush()
        raise
    out.write(text)
    out.flush()
    return len(text)