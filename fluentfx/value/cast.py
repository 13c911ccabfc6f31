"""Runtime type narrowing."""

from __future__ import annotations

from .._errors import InvalidCastError

def cast_to[R](value: object, cls: type[R]) -> R:
    """Return value as cls, raise InvalidCastError if it is not an instance."""
    if not isinstance(value, cls):
        raise InvalidCastError(value, cls)
    return value

def as_type[R](value: object, cls: type[R]) -> R | None:
    """Return value as cls, or None if it is not an instance."""
    if isinstance(value, cls):
        return value
    return None

__all__ = ("as_type", "cast_to")
