"""Raised when the replay stream ends in the middle of a frame."""

from __future__ import annotations

from .ShortReadException import ShortReadException


class TruncatedFrameException(ShortReadException):
    """The stream ended inside a frame header or payload.

    ``field`` names the part of the frame being read when the stream ran
    dry: ``"timestamp"``, ``"length"`` or ``"payload"``.
    """

    def __init__(self, field: str, expected: int, available: int) -> None:
        super().__init__(
            expected,
            available,
            available,
            f"Truncated frame: stream ended in {field} after {available} of {expected} bytes",
        )
        self.field = field


__all__ = ["TruncatedFrameException"]
