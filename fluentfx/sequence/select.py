"""Selection helpers

Thin wrappers over join, random choice and time-window filtering."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime, timedelta

from .._types import Selector

def string_join(items: Iterable[object], separator: str) -> str:
    """Join str() of every element with separator."""
    return separator.join(str(item) for item in items)

def pick_random[T](items: Iterable[T], *, rng: random.Random | None = None) -> T:
    """Pick one element uniformly. Empty input raises IndexError."""
    population = list(items)
    if rng is None:
        return random.choice(population)
    return rng.choice(population)

def older_than_by[T](
    items: Iterable[T],
    selector: Selector[T, datetime],
    span: timedelta,
    *,
    now: Callable[[], datetime] = datetime.now,
) -> Iterator[T]:
    """Lazily keep elements whose age (now - selector(x)) exceeds span."""
    return (item for item in items if now() - selector(item) > span)

def newer_than_by[T](
    items: Iterable[T],
    selector: Selector[T, datetime],
    span: timedelta,
    *,
    now: Callable[[], datetime] = datetime.now,
) -> Iterator[T]:
    """Lazily keep elements whose age (now - selector(x)) is below span."""
    return (item for item in items if now() - selector(item) < span)

__all__ = ("newer_than_by", "older_than_by", "pick_random", "string_join")
