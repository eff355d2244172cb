"""Base class for all errors raised while decoding a replay."""

from __future__ import annotations


class CodecException(Exception):
    """Raised when bytes cannot be decoded into the requested value.

    ``bytesRead`` counts the bytes the failed operation consumed before
    giving up.
    """

    def __init__(self, *args: object, bytesRead: int = 0) -> None:
        super().__init__(*args)
        self.bytesRead = bytesRead


__all__ = ["CodecException"]
