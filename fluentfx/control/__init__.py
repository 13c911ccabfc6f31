from .loop import loop, loop_delayed

__all__ = (
    "loop",
    "loop_delayed",
)
