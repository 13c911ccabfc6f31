"""
Fluent combinators for sequences, single values and async handles.

Architecture:
- sequence.* - lazy per-element effects and the pipeline fold
- value.*    - mapping with recovery, taps and mutations on one value
- control.*  - counted loops with the same suppression policy
- tasks.*    - blocking wait and cancellation signals over asyncio
- fluent     - Fluent / FluentSeq builders for method chaining

Failure policy: failures from caller functions propagate unchanged unless
a combinator offers suppress=True (taps and loops only), which discards
them silently.
"""

import logging

# Core types
from ._types import Action, AsyncAction, Mapper, Selector, Stage, TokenStage

# Sequence
from . import sequence
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

# Value
from . import value
from .value import (
    as_type,
    cast_to,
    do_async,
    do_with,
    map_or,
    map_or_else,
    map_value,
    mutate,
    mutate_async,
    try_map,
    try_map_async,
)

# Control
from .control import loop, loop_delayed

# Tasks
from . import tasks
from .tasks import CancellationSignal, cancel_after, run_sync, when_cancelled

# Fluent builders
from .fluent import Fluent, FluentSeq, chain, chain_seq

# Errors
from ._errors import InvalidCastError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Action",
    "AsyncAction",
    "Mapper",
    "Selector",
    "Stage",
    "TokenStage",
    # Namespaces
    "sequence",
    "value",
    "tasks",
    # Sequence
    "for_each",
    "modify",
    "newer_than_by",
    "older_than_by",
    "pick_random",
    "pipeline_with",
    "pipeline_with_token",
    "string_join",
    # Value
    "as_type",
    "cast_to",
    "do_async",
    "do_with",
    "map_or",
    "map_or_else",
    "map_value",
    "mutate",
    "mutate_async",
    "try_map",
    "try_map_async",
    # Control
    "loop",
    "loop_delayed",
    # Tasks
    "CancellationSignal",
    "cancel_after",
    "run_sync",
    "when_cancelled",
    # Fluent
    "Fluent",
    "FluentSeq",
    "chain",
    "chain_seq",
    # Errors
    "InvalidCastError",
)
