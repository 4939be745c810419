# bitfn/dicts.py
"""
Add-or-get and counting helpers for mutable mappings.

Keys must not be ``None``; every helper raises :class:`ValueError` for one.
"""
from __future__ import annotations

from typing import (
    Any,
    Callable,
    Hashable,
    Iterable,
    List,
    MutableMapping,
    Set,
    Tuple,
    TypeVar,
)

__all__ = [
    "add_to",
    "add_to_set",
    "get_or_add",
    "increment",
    "increment_all",
    "increment_all_by",
    "update_or_add",
]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING: Any = object()


def _check(mapping: Any, key: Any) -> None:
    if mapping is None:
        raise TypeError("mapping must not be None")
    if key is None:
        raise ValueError("None keys not allowed.")


def add_to(mapping: MutableMapping[K, List[V]], key: K, value: V) -> None:
    """
    Append ``value`` to the list stored under ``key``, creating it if missing.
    """
    _check(mapping, key)
    bucket = mapping.get(key)
    if bucket is None:
        mapping[key] = [value]
    else:
        bucket.append(value)


def add_to_set(mapping: MutableMapping[K, Set[V]], key: K, value: V) -> bool:
    """
    Add ``value`` to the set stored under ``key``, creating it if missing.

    :returns: ``True`` if the value was not already present.
    """
    _check(mapping, key)
    bucket = mapping.get(key)
    if bucket is None:
        mapping[key] = {value}
        return True
    if value in bucket:
        return False
    bucket.add(value)
    return True


def get_or_add(
    mapping: MutableMapping[K, V],
    key: K,
    value: V = None,
    *,
    factory: Callable[[], V] | None = None,
) -> V:
    """
    Return the value under ``key``; insert ``value`` (or ``factory()``) first
    if the key is absent. The factory is only called on a miss.
    """
    _check(mapping, key)
    existing = mapping.get(key, _MISSING)
    if existing is not _MISSING:
        return existing
    new = factory() if factory is not None else value
    mapping[key] = new
    return new


def increment(mapping: MutableMapping[K, int], key: K, step: int = 1) -> int:
    """Add ``step`` to the counter under ``key`` (starting at 0) and return it."""
    _check(mapping, key)
    result = mapping.get(key, 0) + step
    mapping[key] = result
    return result


def increment_all(
    mapping: MutableMapping[K, int], keys: Iterable[K], step: int = 1
) -> None:
    """Add ``step`` to the counter of every key, once per occurrence."""
    if keys is None:
        raise TypeError("keys must not be None")
    for key in keys:
        increment(mapping, key, step)


def increment_all_by(
    mapping: MutableMapping[K, int], pairs: Iterable[Tuple[K, int]]
) -> None:
    """Increment every key of ``(key, step)`` pairs by its own step."""
    if pairs is None:
        raise TypeError("pairs must not be None")
    for key, step in pairs:
        increment(mapping, key, step)


def update_or_add(
    mapping: MutableMapping[K, V],
    key: K,
    transform: Callable[[V], V],
    value: V = None,
    *,
    factory: Callable[[], V] | None = None,
) -> V:
    """
    Replace the value under ``key`` with ``transform(value)``, or insert
    ``value`` (or ``factory()``) untransformed when the key is absent.

    :returns: The value now stored under ``key``.
    """
    _check(mapping, key)
    if transform is None:
        raise TypeError("transform must not be None")
    existing = mapping.get(key, _MISSING)
    if existing is _MISSING:
        result = factory() if factory is not None else value
    else:
        result = transform(existing)
    mapping[key] = result
    return result
