from __future__ import annotations

class UnwrapError(Exception):
    """Value forced out of an Absent optional."""

    def __init__(self, message: str = "Value not available") -> None:
        super().__init__(message)

class EmptySequenceError(Exception):
    """Seedless fold over a sequence with no elements."""

    operation: str

    def __init__(self, operation: str = "reduce") -> None:
        self.operation = operation
        super().__init__(f"Attempt to {operation} an empty sequence without an initial value")

class UnrecognizedSourceError(TypeError):
    """seq.of(..., strict=True) got something it cannot iterate."""

    source_type: type

    def __init__(self, source_type: type) -> None:
        self.source_type = source_type
        super().__init__(f"Cannot build a sequence from {source_type.__qualname__!r}")

__all__ = ("EmptySequenceError", "UnrecognizedSourceError", "UnwrapError")
