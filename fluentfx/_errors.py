from __future__ import annotations

class InvalidCastError(TypeError):
    """cast_to() got a value that is not an instance of the target type."""

    value: object
    target: type

    def __init__(self, value: object, target: type) -> None:
        self.value = value
        self.target = target
        super().__init__(
            f"Cannot cast {type(value).__name__} to {target.__name__}"
        )

__all__ = ("InvalidCastError",)
