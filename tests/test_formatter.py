import io

import pytest

from miniprintf.formatter import FormatError, printf, sprintf
from miniprintf.integers import format_long, format_short
from miniprintf.radix import format_binary, format_pointer
from miniprintf.text import format_rot13

UI = 2**31 - 1 + 1024


def test_plain_text_unchanged():
    text = "Let's try to printf a simple sentence.\n"
    assert sprintf(text) == text


def test_empty_format():
    assert sprintf("") == ""


def test_negative_decimal():
    assert sprintf("Negative:[%d]\n", -762534) == "Negative:[-762534]\n"


def test_length_with_d_and_i():
    assert sprintf("Length:[%d, %i]\n", 39, 39) == "Length:[39, 39]\n"


def test_unsigned_forms_match_standard_formatting():
    assert sprintf("[%u]", UI) == f"[{UI}]"
    assert sprintf("[%o]", UI) == f"[{UI:o}]"
    assert sprintf("[%x, %X]", UI, UI) == f"[{UI:x}, {UI:X}]"


def test_character_and_string():
    assert sprintf("Character:[%c]\n", "H") == "Character:[H]\n"
    assert sprintf("String:[%s]\n", "I am a string !") == "String:[I am a string !]\n"


def test_address():
    assert sprintf("Address:[%p]\n", 0x7FFE637541F0) == "Address:[0x7ffe637541f0]\n"


def test_percent_literal():
    assert sprintf("Percent:[%%]\n") == "Percent:[%]\n"


def test_unknown_conversion_kept_verbatim():
    assert sprintf("a%qb") == "a%qb"


def test_sized_conversions_delegate():
    assert sprintf("%ld|%hd", 2**40, 70000) == f"{format_long(2**40)}|{format_short(70000)}"


def test_other_conversions_delegate():
    assert sprintf("%b %R %p", 5, "Hello", None) == " ".join(
        [format_binary(5), format_rot13("Hello"), format_pointer(None)]
    )


def test_reverse_conversion():
    assert sprintf("%r", "abc") == "cba"


def test_modifier_without_conversion_emits_percent():
    text = sprintf("%lz")
    assert text.startswith("%")
    assert text.endswith("z")
    assert "l" not in text


def test_extra_arguments_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


def test_lone_percent_is_error():
    with pytest.raises(FormatError):
        sprintf("%")


def test_trailing_percent_keeps_partial():
    with pytest.raises(FormatError) as info:
        sprintf("abc%")
    assert info.value.partial == "abc"


def test_trailing_percent_space_has_no_partial():
    with pytest.raises(FormatError) as info:
        sprintf("abc% ")
    assert info.value.partial == ""


def test_missing_argument():
    with pytest.raises(FormatError):
        sprintf("%d")


def test_non_string_format():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("Percent:[%%]\n", stream=stream)
    assert stream.getvalue() == "Percent:[%]\n"
    assert count == len(stream.getvalue())


def test_printf_flushes_partial_on_error():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc%", stream=stream)
    assert stream.getvalue() == "abc"


def test_printf_writes_nothing_for_trailing_percent_space():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc% ", stream=stream)
    assert stream.getvalue() == ""


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", "hi")
    assert capsys.readouterr().out == "hi!"
    assert count == 3