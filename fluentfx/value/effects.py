"""Value effect combinators

Taps and mutations on a single value. Every combinator here returns the
value it was given, never the action's result."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from .._helpers import invoke, invoke_async
from .._types import Action, AsyncAction

def do_with[T](value: T, action: Action[T], *, suppress: bool = False) -> T:
    """
    Run side effect on value, return value unchanged.

    suppress=True discards failures silently, same policy as for_each().
    """
    invoke(action, value, suppress=suppress)
    return value

async def do_async[T](
    value: T,
    action: AsyncAction[T],
    *,
    suppress: bool = False,
) -> T:
    """Await side effect on value, return value unchanged."""
    await invoke_async(action, value, suppress=suppress)
    return value

def mutate[T](value: T, action: Action[T]) -> T:
    """Run in-place mutation on value, return the same object. Failures propagate."""
    action(value)
    return value

async def mutate_async[T](value: T, action: Callable[[T], Awaitable[T]]) -> T:
    """
    Await async mutation on value, return the original value.

    NOTE: the awaited result of action is discarded, even when it is a
    different object. Callers relying on the returned object must mutate
    in place.
    """
    await action(value)
    return value

__all__ = ("do_async", "do_with", "mutate", "mutate_async")
