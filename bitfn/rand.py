# bitfn/rand.py
"""
Thread-local random source.

Each thread lazily gets its own :class:`random.Random`, seeded from the
clock and the thread id, so callers never share generator state.
"""
from __future__ import annotations

import random
import threading
import time

__all__ = [
    "local",
    "random_bytes",
    "random_double",
    "random_int",
    "random_int_between",
    "random_int_under",
]

# Upper bound of random_int(), like a signed 32-bit Next()
INT_MAX = 2**31 - 1

_state = threading.local()


def local() -> random.Random:
    """Return the calling thread's generator, creating it on first use."""
    rng = getattr(_state, "rng", None)
    if rng is None:
        seed = (time.monotonic_ns() * 31 + threading.get_ident()) & 0xFFFFFFFF
        rng = _state.rng = random.Random(seed)
    return rng


def random_int() -> int:
    """Non-negative integer below ``INT_MAX``."""
    return local().randrange(INT_MAX)


def random_int_under(max_value: int) -> int:
    """Non-negative integer below ``max_value``; ``0`` when ``max_value`` is 0."""
    if max_value < 0:
        raise ValueError("max_value must be >= 0")
    if max_value == 0:
        return 0
    return local().randrange(max_value)


def random_int_between(min_value: int, max_value: int) -> int:
    """Integer in ``[min_value, max_value)``; ``min_value`` when both are equal."""
    if max_value < min_value:
        raise ValueError("max_value must be >= min_value")
    if max_value == min_value:
        return min_value
    return local().randrange(min_value, max_value)


def random_double() -> float:
    """Float in ``[0.0, 1.0)``."""
    return local().random()


def random_bytes(buffer: bytearray) -> None:
    """Fill ``buffer`` in place with random bytes."""
    if buffer is None:
        raise TypeError("buffer must not be None")
    buffer[:] = local().randbytes(len(buffer))
