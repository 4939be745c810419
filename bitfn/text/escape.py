# bitfn/text/escape.py
"""
Unescaping of C#-style string literals.

``unescape`` follows regular literal rules (``\\n``, ``\\x41``, ``\\u00e9``,
``\\U0001F600`` ...), ``unescape_verbatim`` follows verbatim literal rules
where the only escape is a doubled quotation mark.
"""
from __future__ import annotations

import re
from typing import List

from .errors import EscapeSequenceError

__all__ = ["unescape", "unescape_verbatim"]

# The empty alternative makes a lone or invalid backslash match with length 1.
RE_ESCAPE = re.compile(
    r"\\(['\"\\0abfnrtv]|x[a-fA-F0-9]{1,4}|u[a-fA-F0-9]{4}|U[a-fA-F0-9]{8}|)"
)

SIMPLE_ESCAPES = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}


def unescape(s: str) -> str:
    """
    Resolve escape sequences in ``s``.

    :param s: Escaped text.
    :returns: Unescaped text.
    :raises TypeError: If ``s`` is ``None``.
    :raises EscapeSequenceError: On a backslash not starting a valid sequence.
    """
    if s is None:
        raise TypeError("text must not be None")
    if "\\" not in s:
        return s

    out: List[str] = []
    position = 0
    for m in RE_ESCAPE.finditer(s):
        seq = m.group(1)
        if not seq:
            raise EscapeSequenceError(m.start())
        out.append(s[position : m.start()])
        kind = seq[0]
        if kind in ("x", "u", "U"):
            cp = int(seq[1:], 16)
            if cp > 0x10FFFF:
                raise EscapeSequenceError(m.start())
            out.append(chr(cp))
        else:
            out.append(SIMPLE_ESCAPES[kind])
        position = m.end()
    out.append(s[position:])
    return "".join(out)


def unescape_verbatim(s: str) -> str:
    """
    Collapse doubled quotation marks, as in a verbatim ``@"..."`` literal.

    :param s: Escaped text.
    :returns: Unescaped text.
    :raises TypeError: If ``s`` is ``None``.
    :raises EscapeSequenceError: On a quotation mark that is not doubled.
    """
    if s is None:
        raise TypeError("text must not be None")

    out: List[str] = []
    position = 0
    match = s.find('"')
    while match != -1:
        if match == len(s) - 1 or s[match + 1] != '"':
            raise EscapeSequenceError(match)
        out.append(s[position:match])
        out.append('"')
        position = match + 2
        match = s.find('"', position)
    out.append(s[position:])
    return "".join(out)
