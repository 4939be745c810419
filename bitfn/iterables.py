# bitfn/iterables.py
from __future__ import annotations

import random
from collections import Counter
from itertools import chain
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from . import rand

__all__ = [
    "count_by",
    "count_by_many",
    "flatten",
    "order",
    "order_descending",
    "shuffle",
    "throw_if_any",
    "to_dict",
]

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

# (low, high) -> int in [low, high)
RandomIntBetween = Callable[[int, int], int]
ExceptionSpec = Union[BaseException, Type[BaseException], Callable[[Any], BaseException]]


def _require(value: Any, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


def flatten(iterables: Iterable[Iterable[T]]) -> Iterator[T]:
    """Concatenate an iterable of iterables, lazily."""
    _require(iterables, "iterables")
    return chain.from_iterable(iterables)


def count_by(iterable: Iterable[T], selector: Callable[[T], K]) -> Dict[K, int]:
    """
    Count items per selected key.

    :raises ValueError: If ``selector`` returns ``None`` for any item.
    """
    _require(iterable, "iterable")
    _require(selector, "selector")
    counts: Counter = Counter()
    for item in iterable:
        key = selector(item)
        if key is None:
            raise ValueError("selector cannot return a None key.")
        counts[key] += 1
    return dict(counts)


def count_by_many(
    iterable: Iterable[T], selector: Callable[[T], Iterable[K]]
) -> Dict[K, int]:
    """
    Count every key produced by ``selector`` across all items.

    :raises ValueError: If ``selector`` returns ``None`` instead of an iterable.
    """
    _require(iterable, "iterable")
    _require(selector, "selector")
    counts: Counter = Counter()
    for item in iterable:
        keys = selector(item)
        if keys is None:
            raise ValueError("selector cannot return a None iterable.")
        counts.update(keys)
    return dict(counts)


def order(iterable: Iterable[T], key: Callable[[T], Any] | None = None) -> List[T]:
    """Sort ascending into a new list; equal items keep their input order."""
    _require(iterable, "iterable")
    return sorted(iterable, key=key)


def order_descending(
    iterable: Iterable[T], key: Callable[[T], Any] | None = None
) -> List[T]:
    """Sort descending; equal items keep their input order."""
    _require(iterable, "iterable")
    return sorted(iterable, key=key, reverse=True)


def shuffle(
    iterable: Iterable[T],
    rng: RandomIntBetween | random.Random | None = None,
) -> Iterator[T]:
    """
    Lazily yield the items in random order (Fisher-Yates).

    The input is buffered on the first ``next()``. ``rng`` is either a
    ``(low, high)`` callable with ``high`` exclusive or a
    :class:`random.Random`; it defaults to the thread-local source.
    """
    _require(iterable, "iterable")
    if rng is None:
        pick = rand.random_int_between
    elif isinstance(rng, random.Random):
        pick = rng.randrange
    else:
        pick = rng
    return _shuffle_iter(iterable, pick)


def _shuffle_iter(iterable: Iterable[T], pick: RandomIntBetween) -> Iterator[T]:
    buffer = list(iterable)
    for i in range(len(buffer)):
        j = pick(i, len(buffer))
        yield buffer[j]
        buffer[j] = buffer[i]


def throw_if_any(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    exception: ExceptionSpec | None = None,
) -> Iterator[T]:
    """
    Yield items unchanged, raising at the first item matching ``predicate``.

    ``exception`` may be an instance, an exception class, or a factory called
    with the offending item. Defaults to :class:`ValueError`.
    """
    _require(iterable, "iterable")
    _require(predicate, "predicate")
    return _throw_if_any_iter(iterable, predicate, exception)


def _build_exception(exception: ExceptionSpec | None, item: Any) -> BaseException:
    if exception is None:
        return ValueError(f"Unexpected item: {item!r}")
    if isinstance(exception, BaseException):
        return exception
    if isinstance(exception, type) and issubclass(exception, BaseException):
        return exception()
    return exception(item)


def _throw_if_any_iter(
    iterable: Iterable[T],
    predicate: Callable[[T], bool],
    exception: ExceptionSpec | None,
) -> Iterator[T]:
    for item in iterable:
        if predicate(item):
            raise _build_exception(exception, item)
        yield item


def to_dict(pairs: Iterable[Tuple[K, T]]) -> Dict[K, T]:
    """
    Build a dict from ``(key, value)`` pairs.

    :raises ValueError: On a duplicate key.
    """
    _require(pairs, "pairs")
    result: Dict[K, T] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"Duplicate key: {key!r}")
        result[key] = value
    return result
