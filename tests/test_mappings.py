import re
import unicodedata

import pytest

from bitfn.text.mappings import ASCII_EQUIVALENTS, lookup

RE_VALUE = re.compile(r"^[A-Za-z0-9_()]+$")


def test_values_are_ascii_safe_and_balanced():
    for key, value in ASCII_EQUIVALENTS.items():
        assert RE_VALUE.match(value), (key, value)
        assert value.count("(") == value.count(")"), (key, value)
        assert 1 <= len(value) <= 4, (key, value)


def test_keys_are_single_characters_unchanged_by_nfd():
    # Keys that decompose under NFD could never be looked up by the transcoder.
    for key in ASCII_EQUIVALENTS:
        assert len(key) == 1
        assert not key.isascii()
        assert unicodedata.normalize("NFD", key) == key, f"U+{ord(key):04X}"


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("µ", "u"),
        ("Ð", "D"),
        ("ð", "d"),
        ("Ø", "O"),
        ("ø", "o"),
        ("Þ", "P"),
        ("þ", "p"),
        ("æ", "ae"),
        ("Æ", "AE"),
        ("œ", "oe"),
        ("Œ", "OE"),
        ("ẞ", "SS"),
        ("ß", "ss"),
        ("ｚ", "z"),
        ("Ⓐ", "(A)"),
        ("⒜", "(a)"),
        ("⑳", "(20)"),
        ("₇", "7"),
    ],
)
def test_lookup_known_characters(ch, expected):
    assert lookup(ch) == expected


def test_lookup_unknown_character_returns_none():
    assert lookup("a") is None
    assert lookup("Ω") is None


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ASCII_EQUIVALENTS["x"] = "y"
