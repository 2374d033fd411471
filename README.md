# miniprintf

A small `printf`-style formatter. It takes a format string and positional
arguments and renders them much as a C `printf` would. Integers wrap to the
width the conversion asks for (16, 32 or 64 bits). There are also a few
conversions that C's `printf` does not have: binary, reversed strings, ROT13
and escaped strings.

Field widths, precision and the `-` and `0` flags are not supported. Only the
specifiers listed below are recognised.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from miniprintf.formatter import sprintf, printf, FormatError

sprintf("Length:[%d, %i]", 39, 39)        # 'Length:[39, 39]'
sprintf("Negative:[%d]", -762534)          # 'Negative:[-762534]'
sprintf("Unsigned hexadecimal:[%x, %X]", 2147484671, 2147484671)
                                           # 'Unsigned hexadecimal:[800003ff, 800003FF]'
sprintf("Percent:[%%]")                    # 'Percent:[%]'

printf("Character:[%c]\n", "H")            # writes to standard output, returns 13
```

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args,
stream=None)` writes the same text to `stream` (standard output when it is
`None`), flushes it and returns the number of characters written.

### Errors

`FormatError` (a subclass of `ValueError`) is raised when:

* the format ends with a lone `%`;
* the format ends with `% ` (a percent sign and a space);
* a conversion needs an argument and none is left.

For a lone trailing `%`, the exception's `partial` attribute holds the text
produced before it, and `printf` writes that text to the stream before raising.
A format that is not a `str` raises `TypeError`.

A `%` followed by something that is not a known conversion is copied to the
output as it is, and formatting goes on with the next character: `"%z"` gives
`"%z"`. Extra arguments are ignored.

## Conversions

| Specifier | Output |
|-----------|--------|
| `%c` | a single character; an `int` is taken as a byte value |
| `%s` | a string; `None` gives `(null)` |
| `%d`, `%i` | a signed 32-bit integer |
| `%u` | an unsigned 32-bit integer |
| `%o` | the low 32 bits in octal |
| `%x`, `%X` | the low 32 bits in lower- or upper-case hexadecimal |
| `%b` | the low 32 bits in binary (negatives in two's complement) |
| `%p` | an address as `0x` and lower-case hex; `None` or `0` gives `(nil)` |
| `%S` | a string (encoded as UTF-8) or bytes, with bytes below 32 or from 127 up written as `\xHH` |
| `%r` | a string reversed; `None` gives `(llun)` |
| `%R` | a string with ASCII letters rotated by 13; `None` gives `(avyy)` |
| `%%` | a literal `%` |

Length modifiers: `l` (64 bits) and `h` (16 bits) work with `d`, `i`, `u`,
`o`, `x` and `X`. A bare `%l` or `%h` not followed by one of these prints `%`
and takes no argument; so does `% %`.

Flags:

* `#o` prefixes a non-zero octal with `0`; `#x` and `#X` prefix a non-zero
  hexadecimal with `0x` or `0X`. `#d`, `#i` and `#u` are the same as without
  the flag.
* `+d`, `+i` always show a sign. With `u`, `o`, `x`, `X` the flag is ignored.
* ` d`, ` i` put a space before a non-negative number. With `u`, `o`, `x`, `X`
  the flag is ignored.
* ` +d`, `+ d` (and the `i` forms) behave like `+d`.

## Building blocks

The conversions are also available one by one:

* `miniprintf.text`: `format_char`, `format_string`, `format_reversed`,
  `format_rot13`, `format_escaped`, `format_percent`.
* `miniprintf.integers`: `format_int`, `format_long`, `format_short`,
  `format_signed_plus`, `format_signed_space`, `format_unsigned`,
  `format_long_unsigned`, `format_short_unsigned`.
* `miniprintf.radix`: `format_binary`, `format_octal(value, width)`,
  `format_hex(value, width, upper)` with `width` one of 16, 32 or 64,
  `format_alternate_octal`, `format_alternate_hex(value, upper)`,
  `format_pointer`.
* `miniprintf.bits`: `binary_digits(value, width)`, `hex_digits(bits, upper)`,
  `octal_digits(bits)` for fixed-width digit strings.
* `miniprintf.specifiers`: `find_specifier(fmt, index)` returns the
  `Specifier` that starts at `fmt[index]`, or `None`.

## Demonstration

The package installs a command that prints a set of sample lines, one for each
of the main conversions:

```
miniprintf-demo
```