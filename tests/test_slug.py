import itertools
import re
import uuid

import pytest

from bitfn import UnhandledCharacterError, to_slug


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        ("_", "_"),
        ("a", "a"),
        ("ab", "ab"),
        ("a\u0001b", "ab"),
        ("A", "A"),
        ("AbC", "AbC"),
        ("a b", "a-b"),
        ("a\u00a0b", "a-b"),
        ("a  b", "a-b"),
        (" a  b ", "a-b"),
        ("a-b", "a-b"),
        ("a—b", "a-b"),
        ("a\u2015b", "a-b"),
        ("a--b", "a-b"),
        ("-a--b-", "a-b"),
        ("\na\t \nb\t", "a-b"),
        ("a'\"!@#$%^&*:;b", "ab"),
        ("a(b)c[d]e{f}g/h\\i|j", "a-b-c-d-e-f-g-h-i-j"),
        ("0123456789", "0123456789"),
        ("(1+2)i=3i", "1-2-i-3i"),
        ("abcdé", "abcde"),
        ("à la mode", "a-la-mode"),
        ("AEIÖU", "AEIOU"),
        ("ae æ", "ae-ae"),
        ("AE Æ", "AE-AE"),
        ("oe œ", "oe-oe"),
        ("OE Œ", "OE-OE"),
        ("ss ß", "ss-ss"),
        ("SS ẞ", "SS-SS"),
    ],
)
def test_slug_default_options(raw, expected):
    assert to_slug(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("A", "a"),
        ("AbC", "abc"),
        ("A B", "a-b"),
        ("A_B", "a_b"),
        ("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"),
        ("AEIÖU", "aeiou"),
        ("AE Æ", "ae-ae"),
        ("OE Œ", "oe-oe"),
        ("SS ẞ", "ss-ss"),
    ],
)
def test_slug_lowercase(raw, expected):
    assert to_slug(raw, lowercase=True) == expected


def test_slug_transliterates_special_letters():
    assert to_slug("Łódź") == "Lodz"
    assert to_slug("Þórr Ðani") == "Porr-Dani"
    assert to_slug("ＡＢＣ１２３") == "ABC123"
    assert to_slug("x² + y₁") == "x2-y1"
    assert to_slug("ﬁsh µs", lowercase=True) == "fish-us"


def test_slug_enclosed_alphanumerics():
    assert to_slug("Ⓐ b") == "A-b"
    assert to_slug("Ⓐ b", parenthetical=True) == "(A)-b"
    assert to_slug("step ⑫", parenthetical=True) == "step-(12)"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a[b]c", "a(b)c"),
        ("a{b}c", "a(b)c"),
        ("a(b)c", "a(b)c"),
        ("(a(b)c)", "(a(b)c)"),
        (" (a(b)c) ", "(a(b)c)"),
        (" a ( ( b ) c ) d ", "a-((b)-c)-d"),
    ],
)
def test_parenthetical_breaks(raw, expected):
    assert to_slug(raw, parenthetical=True) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("a(b", "a(b)"), ("a[(b", "a((b))"), ("a{[(b", "a(((b)))")],
)
def test_parenthetical_closes_unmatched_open(raw, expected):
    assert to_slug(raw, parenthetical=True) == expected


@pytest.mark.parametrize("raw", ["a)b", "a])b", "a}])b"])
def test_parenthetical_ignores_unmatched_close(raw):
    assert to_slug(raw, parenthetical=True) == "a-b"


def test_strict_raises_on_control_character():
    with pytest.raises(UnhandledCharacterError) as exc_info:
        to_slug("a\u0001b", strict=True)

    err = exc_info.value
    assert isinstance(err, ValueError)
    assert err.category == "Cc"
    assert err.position == 1
    assert err.code == "0001"
    assert str(err) == "Unhandled character in category Cc: '' (0x0001)."


def test_strict_reports_surrogate_pair_for_astral_characters():
    with pytest.raises(UnhandledCharacterError) as exc_info:
        to_slug("smile \U0001f600", strict=True)

    assert exc_info.value.category == "So"
    assert exc_info.value.code == "D83DDE00"
    assert "'\U0001f600'" in str(exc_info.value)


def test_strict_rejects_brackets_unless_parenthetical():
    with pytest.raises(UnhandledCharacterError):
        to_slug("a(b)", strict=True)
    assert to_slug("a(b)", parenthetical=True, strict=True) == "a(b)"


def test_strict_rejects_combining_marks():
    assert to_slug("abcdé") == "abcde"
    with pytest.raises(UnhandledCharacterError) as exc_info:
        to_slug("abcdé", strict=True)

    assert exc_info.value.category == "Mn"
    assert exc_info.value.position == 5
    assert exc_info.value.code == "0301"


def test_strict_accepts_table_characters():
    assert to_slug("Cr\u00e6me \u00df", strict=True) == "Craeme-ss"


def test_non_strict_never_raises_on_latin1():
    for cp in range(1, 256):
        to_slug(chr(cp))


def test_none_input_raises_type_error():
    with pytest.raises(TypeError):
        to_slug(None)


def test_guid_is_preserved():
    guid = str(uuid.uuid4())
    assert to_slug(guid) == guid


def test_literal_input_is_preserved():
    assert to_slug("abc123_x") == "abc123_x"


SAMPLES = [
    "Hello, World!",
    " --leading and trailing-- ",
    "Crème brûlée (à la [française])",
    "a)(b][c",
    "((()))",
    "Ⓐ⒝ ⑴ ＿x＿",
    "tab\tsep\u2028line\u2029para",
    "e = mc² ± δ",
    "\u0001\u0002 ctrl \x7f",
    "",
]


@pytest.mark.parametrize(
    "lowercase, parenthetical", list(itertools.product([False, True], repeat=2))
)
def test_output_alphabet_and_dash_placement(lowercase, parenthetical):
    allowed = re.compile(
        r"^[A-Za-z0-9_()\-]*$" if parenthetical else r"^[A-Za-z0-9_\-]*$"
    )
    for raw in SAMPLES:
        out = to_slug(raw, lowercase=lowercase, parenthetical=parenthetical)
        assert allowed.match(out), (raw, out)
        assert not out.startswith("-")
        assert not out.endswith("-")
        assert "--" not in out
        if lowercase:
            assert out == out.lower()


def test_parenthetical_output_is_balanced():
    for raw in SAMPLES:
        out = to_slug(raw, parenthetical=True)
        depth = 0
        for ch in out:
            depth += {"(": 1, ")": -1}.get(ch, 0)
            assert depth >= 0, out
        assert depth == 0, out


def test_slug_is_idempotent():
    for raw in SAMPLES:
        once = to_slug(raw)
        assert to_slug(once) == once
