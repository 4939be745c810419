# bitfn/text/transcode.py
from __future__ import annotations

import argparse
import logging
import string
import sys
import unicodedata
from dataclasses import dataclass, field
from typing import List, Literal

from .chars import to_hex
from .errors import UnhandledCharacterError
from .mappings import lookup

__all__ = [
    "remove_diacritics",
    "to_ascii",
    "to_slug",
    "main",
]

logger = logging.getLogger(__name__)

Mode = Literal["slug", "ascii", "strip"]

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

# Emitted unchanged (or lowercased)
SLUG_CHARS = frozenset(string.ascii_letters + string.digits + "_")

# Break without a category lookup. The whitespace controls mirror what .NET
# treats as whitespace; str.isspace() would also break on \x1c-\x1f.
BREAK_CHARS = frozenset("\t\n\v\f\r\x85-–—/\\")

# Space, line and paragraph separators
SEPARATOR_CATEGORIES = frozenset(("Zs", "Zl", "Zp"))

# Categories that only ever separate words
WORDBREAK_CATEGORIES = frozenset(("Pd", "Pc"))

NONSPACING_MARK = "Mn"


def _require_text(s: str | None) -> str:
    if s is None:
        raise TypeError("text must not be None")
    return s


# ---------------------------------------------------------------------------
# Diacritics & ASCII folding
# ---------------------------------------------------------------------------


def remove_diacritics(s: str) -> str:
    """
    Remove non-spacing marks, such as the accent in ``résumé``.

    :param s: Input text.
    :returns: Text decomposed, stripped of ``Mn`` characters and recomposed.
    :raises TypeError: If ``s`` is ``None``.
    """
    s = _require_text(s)
    d = unicodedata.normalize("NFD", s)
    kept = (ch for ch in d if unicodedata.category(ch) != NONSPACING_MARK)
    return unicodedata.normalize("NFC", "".join(kept))


def to_ascii(s: str) -> str:
    """
    Strip diacritics and replace known special letters with ASCII equivalents.

    Unlike :func:`to_slug`, whitespace, punctuation and unknown characters
    are left alone: ``"tête-à-tête"`` becomes ``"tete-a-tete"`` and
    ``"æther"`` becomes ``"aether"``.

    :param s: Input text.
    :returns: Folded text.
    :raises TypeError: If ``s`` is ``None``.
    """
    s = _require_text(s)
    d = unicodedata.normalize("NFD", s)
    out: List[str] = []
    for ch in d:
        if ch in SLUG_CHARS:
            out.append(ch)
            continue
        if unicodedata.category(ch) == NONSPACING_MARK:
            continue
        replacement = lookup(ch)
        out.append(ch if replacement is None else replacement)
    return unicodedata.normalize("NFC", "".join(out))


# ---------------------------------------------------------------------------
# Slugs
# ---------------------------------------------------------------------------


@dataclass
class _SlugState:
    """
    Working state of a single :func:`to_slug` call.

    ``wordbreak`` marks a pending dash, ``skipbreak`` suppresses it for the
    next emission and ``paren_count`` tracks unclosed parentheses.
    """

    out: List[str] = field(default_factory=list)
    wordbreak: bool = False
    skipbreak: bool = False
    paren_count: int = 0

    def emit(self, piece: str, *, skipnext: bool = False) -> None:
        # Only separate two emitted pieces; never lead with a dash.
        if self.wordbreak and not self.skipbreak and self.out:
            self.out.append("-")
        self.out.append(piece)
        self.wordbreak = False
        self.skipbreak = skipnext


def to_slug(
    s: str,
    lowercase: bool = False,
    parenthetical: bool = False,
    strict: bool = False,
) -> str:
    """
    Convert text to a url-safe slug of ASCII alphanumerics, ``_`` and ``-``.

    Whitespace and punctuation are dropped or collapsed into single dashes,
    diacritics are removed and special letters are replaced through
    :data:`~bitfn.text.mappings.ASCII_EQUIVALENTS`. The mapping is visual
    rather than linguistic (thorn becomes ``p``, mu becomes ``u``).

    :param s: Input text.
    :param lowercase: Lowercase every emitted letter.
    :param parenthetical: Turn open/close punctuation into matched
        parentheses. Unclosed groups are closed at the end, unmatched
        closers act as word breaks.
    :param strict: Raise on characters with no slug handling instead of
        silently dropping them.
    :returns: The slug.
    :raises TypeError: If ``s`` is ``None``.
    :raises UnhandledCharacterError: In strict mode, on the first unhandled
        character.
    """
    s = _require_text(s)
    if not s:
        return ""

    d = unicodedata.normalize("NFD", s)
    state = _SlugState()

    for pos, ch in enumerate(d):
        if ch in SLUG_CHARS:
            state.emit(ch.lower() if lowercase else ch)
            continue
        if ch in BREAK_CHARS:
            state.wordbreak = True
            continue

        category = unicodedata.category(ch)
        if category in SEPARATOR_CATEGORIES:
            state.wordbreak = True
            continue

        replacement = lookup(ch)
        if replacement is not None:
            if not parenthetical:
                # Enclosed alphanumerics carry their own parentheses.
                replacement = replacement.replace("(", "").replace(")", "")
            state.emit(replacement.lower() if lowercase else replacement)
            continue

        if category in WORDBREAK_CATEGORIES:
            state.wordbreak = True
            continue
        if category == "Ps" and parenthetical:
            state.paren_count += 1
            state.emit("(", skipnext=True)
            continue
        if category == "Pe" and parenthetical and state.paren_count > 0:
            state.paren_count -= 1
            state.skipbreak = True
            state.emit(")")
            continue
        if category in ("Ps", "Pe", "Sm"):
            state.wordbreak = True

        if strict:
            raise UnhandledCharacterError(ch, category, pos, to_hex(ch))

    if parenthetical and state.paren_count > 0:
        state.out.append(")" * state.paren_count)

    return unicodedata.normalize("NFC", "".join(state.out))


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitfn-slug",
        description="Transform stdin line by line into slugs or ASCII text.",
    )
    parser.add_argument(
        "--mode",
        choices=("slug", "ascii", "strip"),
        default="slug",
        help="slug: to_slug, ascii: to_ascii, strip: remove_diacritics",
    )
    parser.add_argument("--lower", action="store_true", help="lowercase slugs")
    parser.add_argument(
        "--parens", action="store_true", help="keep brackets as parentheses"
    )
    parser.add_argument(
        "--strict", action="store_true", help="fail on unhandled characters"
    )
    return parser


def _transform_line(line: str, mode: Mode, args: argparse.Namespace) -> str:
    if mode == "ascii":
        return to_ascii(line)
    if mode == "strip":
        return remove_diacritics(line)
    return to_slug(
        line, lowercase=args.lower, parenthetical=args.parens, strict=args.strict
    )


def main(argv: List[str] | None = None) -> int:
    """
    CLI entrypoint.

    Usage::

        bitfn-slug --lower < titles.txt > slugs.txt

    :param argv: Optional argv, defaults to ``sys.argv[1:]``.
    :returns: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    for lineno, line in enumerate(sys.stdin, start=1):
        text = line.rstrip("\r\n")
        try:
            result = _transform_line(text, args.mode, args)
        except UnhandledCharacterError as exc:
            logger.error("line %d: %s", lineno, exc)
            return 1
        sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
