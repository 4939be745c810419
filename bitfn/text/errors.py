# bitfn/text/errors.py
from __future__ import annotations

__all__ = ["TextError", "UnhandledCharacterError", "EscapeSequenceError"]


class TextError(ValueError):
    """Base class for text transformation failures."""


class UnhandledCharacterError(TextError):
    """
    Raised by strict slug conversion when a character has no slug handling.

    :param char: The offending character.
    :param category: Its Unicode general category (``"Cc"``, ``"So"``, ...).
    :param position: Index of the character in the NFD-normalized input.
    :param code: Hex form of its UTF-16 code unit(s).
    """

    def __init__(self, char: str, category: str, position: int, code: str):
        self.char = char
        self.category = category
        self.position = position
        self.code = code
        # Control characters are not printable in the message.
        shown = "" if category == "Cc" else char
        super().__init__(
            f"Unhandled character in category {category}: '{shown}' (0x{code})."
        )


class EscapeSequenceError(TextError):
    """Raised when an escaped string contains an invalid escape sequence."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid escape sequence found at character {index}.")
