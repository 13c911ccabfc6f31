from .cast import as_type, cast_to
from .effects import do_async, do_with, mutate, mutate_async
from .mapping import map_or, map_or_else, map_value, try_map, try_map_async

__all__ = (
    # Mapping
    "map_or",
    "map_or_else",
    "map_value",
    "try_map",
    "try_map_async",
    # Effects
    "do_async",
    "do_with",
    "mutate",
    "mutate_async",
    # Cast
    "as_type",
    "cast_to",
)
