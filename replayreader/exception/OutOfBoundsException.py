"""Raised when a buffer position is moved outside the readable range."""

from __future__ import annotations

from .CodecException import CodecException


class OutOfBoundsException(CodecException, IndexError):
    def __init__(self, position: int, capacity: int) -> None:
        super().__init__(f"Position {position} outside buffer bounds [0, {capacity}]")
        self.position = position
        self.capacity = capacity


__all__ = ["OutOfBoundsException"]
