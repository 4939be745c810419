from .chars import to_hex, utf16_code_units
from .errors import EscapeSequenceError, TextError, UnhandledCharacterError
from .escape import unescape, unescape_verbatim
from .mappings import ASCII_EQUIVALENTS, lookup
from .transcode import remove_diacritics, to_ascii, to_slug

__all__ = [
    "ASCII_EQUIVALENTS",
    "EscapeSequenceError",
    "TextError",
    "UnhandledCharacterError",
    "lookup",
    "remove_diacritics",
    "to_ascii",
    "to_hex",
    "to_slug",
    "unescape",
    "unescape_verbatim",
    "utf16_code_units",
]
