"""Sequence effect combinators

Per-element side effects over an ordered sequence. Results are lazy
generators: the action runs only as the output is consumed, at most once
per element, in input order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._helpers import invoke
from .._types import Action

def modify[T](items: Iterable[T], action: Action[T]) -> Iterator[T]:
    """
    Run action on every element and yield the element unchanged.

    The action is expected to mutate state reachable from the element,
    not to replace it. Failures always propagate.

    Example:
        users = list(modify(users, lambda u: setattr(u, "active", True)))
    """
    for item in items:
        action(item)
        yield item

def for_each[T](
    items: Iterable[T],
    action: Action[T],
    *,
    suppress: bool = False,
) -> Iterator[T]:
    """
    Tap every element with action, yield the element unchanged.

    suppress=False: the first failure propagates, no further elements
    are processed.
    suppress=True: failures are discarded and iteration continues with
    the original element.

    WARNING: suppressed failures are dropped silently (no log, no record).
    If you need to see them, do not use suppress=True.
    """
    for item in items:
        invoke(action, item, suppress=suppress)
        yield item

__all__ = ("for_each", "modify")
