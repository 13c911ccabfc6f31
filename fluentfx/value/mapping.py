"""Mapping combinators

Transform a single value, optionally recovering when the mapper raises.
The two recovery forms have distinct names: map_or() takes a fallback
value, map_or_else() takes a (value, error) -> result function."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Mapper

def map_value[T, R](value: T, mapper: Mapper[T, R]) -> R:
    """Apply mapper to value. Failures propagate."""
    return mapper(value)

def map_or[T, R](value: T, mapper: Mapper[T, R], *, default: R) -> R:
    """
    Apply mapper to value, return default if the mapper raises.

    Example:
        map_or("42", int, default=0)    # 42
        map_or("abc", int, default=0)   # 0
    """
    try:
        return mapper(value)
    except Exception:
        return default

def map_or_else[T, R](
    value: T,
    mapper: Mapper[T, R],
    *,
    on_error: Callable[[T, Exception], R],
) -> R:
    """
    Apply mapper to value, recover with on_error(value, exc) if it raises.

    Only the mapper is guarded: a failure inside on_error propagates.
    """
    try:
        return mapper(value)
    except Exception as exc:
        return on_error(value, exc)

def try_map[T, R](value: T, mapper: Mapper[T, R]) -> Result[R, Exception]:
    """
    Apply mapper to value and capture the outcome as a Result.

    Bridge between exception-based mappers and Result-based code.
    """
    try:
        return Ok(mapper(value))
    except Exception as exc:
        return Error(exc)

def try_map_async[T, R](
    value: T,
    mapper: Callable[[T], Awaitable[R]],
) -> LazyCoroResult[R, Exception]:
    """
    Lazy async version of try_map().

    Nothing runs until the returned LazyCoroResult is awaited.
    """
    async def run() -> Result[R, Exception]:
        try:
            return Ok(await mapper(value))
        except Exception as exc:
            return Error(exc)

    return LazyCoroResult(run)

__all__ = (
    "map_or",
    "map_or_else",
    "map_value",
    "try_map",
    "try_map_async",
)
