"""Raised when a frame declares a length above the configured maximum."""

from __future__ import annotations

from .CodecException import CodecException


class FrameTooLargeException(CodecException):
    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Frame length {length} exceeds limit of {limit} bytes")
        self.length = length
        self.limit = limit


__all__ = ["FrameTooLargeException"]
