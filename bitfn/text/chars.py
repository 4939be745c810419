# bitfn/text/chars.py
from __future__ import annotations

from typing import Tuple

__all__ = ["to_hex", "utf16_code_units"]


def utf16_code_units(ch: str) -> Tuple[int, ...]:
    """
    Split a single character into its UTF-16 code units.

    Astral characters yield a surrogate pair; everything else, including a
    lone surrogate, yields a single unit.
    """
    if not isinstance(ch, str) or len(ch) != 1:
        raise TypeError(f"expected a single character, got {ch!r}")
    cp = ord(ch)
    if cp <= 0xFFFF:
        return (cp,)
    cp -= 0x10000
    return (0xD800 + (cp >> 10), 0xDC00 + (cp & 0x3FF))


def to_hex(ch: str) -> str:
    """
    Uppercase, zero-padded hex of a character, four digits per UTF-16 code unit.

    ``to_hex("A") == "0041"``; ``to_hex("\\U0001F600") == "D83DDE00"``.
    """
    return "".join(f"{unit:04X}" for unit in utf16_code_units(ch))
