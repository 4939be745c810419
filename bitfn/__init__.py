"""
bitfn: small helpers over strings, mappings and iterables.

The text helpers turn arbitrary text into url-safe slugs::

    >>> from bitfn import to_slug
    >>> to_slug("À la mode", lowercase=True)
    'a-la-mode'
"""
from . import dicts, iterables, text
from .dicts import *  # noqa: F401,F403
from .iterables import *  # noqa: F401,F403
from .text import *  # noqa: F401,F403

__version__ = "0.1.0"

__all__ = sorted(text.__all__ + dicts.__all__ + iterables.__all__)
