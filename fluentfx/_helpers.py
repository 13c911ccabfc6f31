"""Internal helpers for fluentfx.

Common functions used across multiple combinator modules.
These are not part of the public API."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

def invoke[T](action: Callable[[T], object], value: T, *, suppress: bool) -> None:
    """
    Run action on value under the suppression policy.

    suppress=False: any Exception propagates unchanged.
    suppress=True: any Exception is discarded. Nothing is logged.

    NOTE: BaseException (KeyboardInterrupt, CancelledError) всегда пробрасывается.
    """
    try:
        action(value)
    except Exception:
        if not suppress:
            raise

async def invoke_async[T](
    action: Callable[[T], Awaitable[object]],
    value: T,
    *,
    suppress: bool,
) -> None:
    """Async twin of invoke(): failures raised while creating or awaiting."""
    try:
        await action(value)
    except Exception:
        if not suppress:
            raise

def check_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")

__all__ = (
    "invoke",
    "invoke_async",
    "check_non_negative",
)
