"""
Core type definitions for fluentfx.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Action = side effect on a value, result ignored
type Action[T] = Callable[[T], object]

# AsyncAction = awaitable side effect on a value, result ignored
type AsyncAction[T] = Callable[[T], Awaitable[object]]

# Mapper = function that transforms a value
type Mapper[T, R] = Callable[[T], R]

# Selector = function that extracts a key from a value
type Selector[T, K] = Callable[[T], K]

# Stage = per-element step of a pipeline fold
type Stage[T, R] = Callable[[T], R]

# TokenStage = pipeline step that also receives a caller context token
type TokenStage[K, T, R] = Callable[[K, T], R]

__all__ = (
    "Action",
    "AsyncAction",
    "Mapper",
    "Selector",
    "Stage",
    "TokenStage",
)
