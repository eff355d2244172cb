"""Blocking reads from a sequential binary stream."""

from __future__ import annotations

from typing import BinaryIO


CHUNK_SIZE = 1 << 16


def readUpTo(stream: BinaryIO, size: int) -> bytes:
    """Read ``size`` bytes from ``stream``, fewer only if it reaches EOF.

    A single ``read`` call on a pipe or socket may return less than asked
    for, so this keeps reading until the request is satisfied or the
    stream reports end of file. Reads are capped at ``CHUNK_SIZE`` so a
    bogus length only costs as much memory as the stream actually holds.
    I/O errors propagate unchanged.
    """
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(min(size - len(chunks), CHUNK_SIZE))
        if not chunk:
            break
        chunks += chunk
    return bytes(chunks)


__all__ = ["readUpTo", "CHUNK_SIZE"]
