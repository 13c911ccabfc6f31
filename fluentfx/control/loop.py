"""Loop combinators

Run an action a fixed number of times with the shared suppression policy."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from .._helpers import check_non_negative, invoke
from .._types import Action

def loop(count: int, action: Action[int], *, suppress: bool = False) -> None:
    """Call action(i) for i in range(count)."""
    check_non_negative("loop(): count", count)

    for index in range(count):
        invoke(action, index, suppress=suppress)

async def loop_delayed(
    count: int,
    delay_selector: Callable[[int], float],
    action: Action[int],
    *,
    suppress: bool = False,
) -> None:
    """
    Call action(i) for i in range(count), sleeping after every call.

    The delay for iteration i is delay_selector(i) seconds. It is taken
    whether the call succeeded or failed, so an unsuppressed failure
    propagates only after its delay.
    """
    check_non_negative("loop_delayed(): count", count)

    for index in range(count):
        try:
            invoke(action, index, suppress=suppress)
        finally:
            seconds = delay_selector(index)
            if seconds > 0.0:
                await asyncio.sleep(seconds)

__all__ = ("loop", "loop_delayed")
