from __future__ import annotations


class InvalidName(ValueError):
    """Raised when a filename stem is expected to be purely numeric but is not."""


class CollisionDetected(RuntimeError):
    """Raised when an allocated target name is already present in the directory."""

    def __init__(self, name: str, number: int) -> None:
        super().__init__(f"Target name already exists: {name}")
        self.name = name
        self.number = number


class IOFailure(RuntimeError):
    """Raised when listing, renaming or writing fails. Always fatal."""
