"""Raised when a VarInt or VarLong runs past its maximum byte count."""

from __future__ import annotations

from .CodecException import CodecException


class VarIntTooBigException(CodecException):
    """The continuation bit was still set on the last allowed byte.

    ``maxBytes`` is 5 for a VarInt and 10 for a VarLong. ``bytesRead`` is
    the number of bytes consumed, which always equals ``maxBytes``.
    """

    def __init__(self, maxBytes: int, bytesRead: int) -> None:
        super().__init__(f"VarInt too big: continuation bit set after {bytesRead} bytes (max {maxBytes})")
        self.maxBytes = maxBytes
        self.bytesRead = bytesRead


__all__ = ["VarIntTooBigException"]
