import codecs

import pytest

from miniprintf.text import (
    format_char,
    format_escaped,
    format_percent,
    format_reversed,
    format_rot13,
    format_string,
)

SAMPLES = ["I am a string !", "", "Hello, World", "abcXYZ 123 !?"]


def test_char_from_string():
    assert format_char("H") == "H"


def test_char_from_int():
    assert format_char(ord("H")) == "H"


def test_char_truncates_to_byte():
    assert format_char(256 + ord("A")) == "A"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_string_passes_through():
    assert format_string("I am a string !") == "I am a string !"


def test_string_none():
    assert format_string(None) == "(null)"


@pytest.mark.parametrize("text", SAMPLES)
def test_reversed_is_involution(text):
    assert format_reversed(format_reversed(text)) == text
    assert len(format_reversed(text)) == len(text)


def test_reversed_value():
    assert format_reversed("abc") == "cba"


def test_reversed_none():
    assert format_reversed(None) == "(llun)"


@pytest.mark.parametrize("text", SAMPLES)
def test_rot13_matches_codec(text):
    assert format_rot13(text) == codecs.encode(text, "rot13")
    assert format_rot13(format_rot13(text)) == text


def test_rot13_table():
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    rotated = "NOPQRSTUVWXYZABCDEFGHIJKLMnopqrstuvwxyzabcdefghijklm"
    assert format_rot13(alphabet) == rotated


def test_rot13_none():
    assert format_rot13(None) == "(avyy)"


def test_escaped_printable_unchanged():
    assert format_escaped("I am a string !") == "I am a string !"


@pytest.mark.parametrize("code", list(range(32)) + [127, 128, 255])
def test_escaped_control_bytes(code):
    assert format_escaped(bytes([code])) == "\\x" + format(code, "02X")


def test_escaped_newline():
    assert format_escaped("a\nb") == "a\\x0Ab"


def test_escaped_utf8_string():
    text = "\u00e9"
    expected = "".join("\\x" + format(b, "02X") for b in text.encode("utf-8"))
    assert format_escaped(text) == expected


def test_escaped_rejects_none():
    with pytest.raises(TypeError):
        format_escaped(None)


def test_percent():
    assert format_percent() == "%"