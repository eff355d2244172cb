"""Raised when fewer bytes are available than a read requires."""

from __future__ import annotations

from typing import Optional

from .CodecException import CodecException


class ShortReadException(CodecException, EOFError):
    """Not enough bytes were available to complete a read.

    ``bytesRead`` is the number of bytes the failed operation consumed
    before giving up, so callers composing larger structures can keep
    track of their offset.
    """

    def __init__(self, expected: int, available: int, bytesRead: int = 0, message: Optional[str] = None) -> None:
        super().__init__(message or f"Short read: needed {expected} bytes, only {available} available")
        self.expected = expected
        self.available = available
        self.bytesRead = bytesRead


__all__ = ["ShortReadException"]
