"""Command that prints a demonstration of the supported conversions."""

from __future__ import annotations

import argparse
import sys

from miniprintf.formatter import printf

_SENTENCE = "Let's try to printf a simple sentence.\n"
_INT_MAX = 2**31 - 1
_ADDRESS = 0x7FFE637541F0


def main(argv: list[str] | None = None) -> int:
    """Print one line for each kind of conversion and return 0."""
    parser = argparse.ArgumentParser(
        prog="miniprintf",
        description="Print a demonstration of the supported conversions.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    length = printf(_SENTENCE, stream=out)
    unsigned = _INT_MAX + 1024
    printf("Length:[%d, %i]\n", length, length, stream=out)
    printf("Negative:[%d]\n", -762534, stream=out)
    printf("Unsigned:[%u]\n", unsigned, stream=out)
    printf("Unsigned octal:[%o]\n", unsigned, stream=out)
    printf("Unsigned hexadecimal:[%x, %X]\n", unsigned, unsigned, stream=out)
    printf("Character:[%c]\n", "H", stream=out)
    printf("String:[%s]\n", "I am a string !", stream=out)
    printf("Address:[%p]\n", _ADDRESS, stream=out)
    length = printf("Percent:[%%]\n", stream=out)
    printf("Len:[%d]\n", length, stream=out)
    printf("Unknown:[%r]\n", None, stream=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())