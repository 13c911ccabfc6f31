"""
Pipeline combinators
====================

Fold a sequence through a stage function into a single running value.

Unlike fold(), nothing is combined: every stage result replaces the
previous one, so the accumulator ends up holding the result of the last
stage call. On an empty sequence it keeps its zero value (``initial``),
and the terminal stage still runs with that zero value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._types import Stage, TokenStage

# ============================================================================
# Plain stages
# ============================================================================


def pipeline_with[T, I, O](
    items: Iterable[T],
    stage: Stage[T, I],
    last_stage: Callable[[I], O] | None = None,
    *,
    initial: I | None = None,
) -> I | O | None:
    """
    Run stage over items in order, then feed the last result to last_stage.

    Returns last_stage(acc) when last_stage is given, acc otherwise.

    Example:
        pipeline_with([1, 2, 3], lambda x: x * 10)             # 30
        pipeline_with([], lambda x: x * 10, lambda acc: acc)   # None
        pipeline_with([], str, len, initial="")                # 0
    """
    acc = initial
    for item in items:
        acc = stage(item)

    if last_stage is None:
        return acc
    return last_stage(acc)  # type: ignore[arg-type]


# ============================================================================
# Stages with context token
# ============================================================================


def pipeline_with_token[K, T, I, O](
    items: Iterable[T],
    token: K,
    stage: TokenStage[K, T, I],
    last_stage: Callable[[K, I], O] | None = None,
    *,
    initial: I | None = None,
) -> I | O | None:
    """
    Same as pipeline_with(), but token is passed unchanged as the first
    argument to every stage call and to last_stage.
    """
    acc = initial
    for item in items:
        acc = stage(token, item)

    if last_stage is None:
        return acc
    return last_stage(token, acc)  # type: ignore[arg-type]


__all__ = ("pipeline_with", "pipeline_with_token")
