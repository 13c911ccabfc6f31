"""
Fluent builders for chaining combinators.

Architecture:
- Fluent[T]    - wraps a single value, methods delegate to fluentfx.value
- FluentSeq[T] - wraps an iterable, methods delegate to fluentfx.sequence

Every method returns a new builder (or the terminal value), the builders
themselves are immutable.

Example:
    from fluentfx import chain, chain_seq

    name = chain(raw).map_or(json.loads, default={}).map(lambda d: d.get("name")).value

    total = (
        chain_seq(orders)
        .for_each(audit, suppress=True)
        .pipeline_with(lambda o: o.total, lambda last: round(last, 2))
    )
"""

from __future__ import annotations

import random
from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

from kungfu import Result

from ._types import Action, AsyncAction, Mapper, Selector, Stage, TokenStage
from .sequence import (
    for_each,
    modify,
    newer_than_by,
    older_than_by,
    pick_random,
    pipeline_with,
    pipeline_with_token,
    string_join,
)
from .value import do_async, do_with, map_or, map_or_else, map_value, mutate, mutate_async, try_map


# ============================================================================
# Single value
# ============================================================================


@dataclass(frozen=True, slots=True)
class Fluent[T]:
    """
    Fluent builder over a single value.
    """

    value: T

    def map[R](self, mapper: Mapper[T, R]) -> Fluent[R]:
        return Fluent(map_value(self.value, mapper))

    def map_or[R](self, mapper: Mapper[T, R], *, default: R) -> Fluent[R]:
        return Fluent(map_or(self.value, mapper, default=default))

    def map_or_else[R](
        self,
        mapper: Mapper[T, R],
        *,
        on_error: Callable[[T, Exception], R],
    ) -> Fluent[R]:
        return Fluent(map_or_else(self.value, mapper, on_error=on_error))

    def try_map[R](self, mapper: Mapper[T, R]) -> Result[R, Exception]:
        return try_map(self.value, mapper)

    def do(self, action: Action[T], *, suppress: bool = False) -> Fluent[T]:
        return Fluent(do_with(self.value, action, suppress=suppress))

    def mutate(self, action: Action[T]) -> Fluent[T]:
        return Fluent(mutate(self.value, action))

    async def do_async(self, action: AsyncAction[T], *, suppress: bool = False) -> Fluent[T]:
        return Fluent(await do_async(self.value, action, suppress=suppress))

    async def mutate_async(self, action: Callable[[T], Awaitable[T]]) -> Fluent[T]:
        return Fluent(await mutate_async(self.value, action))


# ============================================================================
# Sequence
# ============================================================================


@dataclass(frozen=True, slots=True)
class FluentSeq[T]:
    """
    Fluent builder over an iterable.

    Intermediate steps stay lazy; pipeline_with, string_join, pick_random
    and to_list consume the underlying iterable.
    """

    items: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def modify(self, action: Action[T]) -> FluentSeq[T]:
        return FluentSeq(modify(self.items, action))

    def for_each(self, action: Action[T], *, suppress: bool = False) -> FluentSeq[T]:
        return FluentSeq(for_each(self.items, action, suppress=suppress))

    def older_than_by(
        self,
        selector: Selector[T, datetime],
        span: timedelta,
        *,
        now: Callable[[], datetime] = datetime.now,
    ) -> FluentSeq[T]:
        return FluentSeq(older_than_by(self.items, selector, span, now=now))

    def newer_than_by(
        self,
        selector: Selector[T, datetime],
        span: timedelta,
        *,
        now: Callable[[], datetime] = datetime.now,
    ) -> FluentSeq[T]:
        return FluentSeq(newer_than_by(self.items, selector, span, now=now))

    def pipeline_with[I, O](
        self,
        stage: Stage[T, I],
        last_stage: Callable[[I], O] | None = None,
        *,
        initial: I | None = None,
    ) -> I | O | None:
        return pipeline_with(self.items, stage, last_stage, initial=initial)

    def pipeline_with_token[K, I, O](
        self,
        token: K,
        stage: TokenStage[K, T, I],
        last_stage: Callable[[K, I], O] | None = None,
        *,
        initial: I | None = None,
    ) -> I | O | None:
        return pipeline_with_token(self.items, token, stage, last_stage, initial=initial)

    def string_join(self, separator: str) -> str:
        return string_join(self.items, separator)

    def pick_random(self, *, rng: random.Random | None = None) -> T:
        return pick_random(self.items, rng=rng)

    def to_list(self) -> list[T]:
        return list(self.items)


def chain[T](value: T) -> Fluent[T]:
    """Start a fluent chain over a single value."""
    return Fluent(value)


def chain_seq[T](items: Iterable[T]) -> FluentSeq[T]:
    """Start a fluent chain over an iterable."""
    return FluentSeq(items)


__all__ = ("Fluent", "FluentSeq", "chain", "chain_seq")
