"""A read-only, seekable byte buffer modelled on Netty's ``ByteBuf``.

Each replay frame is fully materialised before any field is decoded, so
the buffer is a plain ``bytes`` object plus a reader index. All
multi-byte reads are big-endian. A fixed-width read that would run past
the end raises :class:`ShortReadException` and leaves the reader index
where it was.
"""

from __future__ import annotations

import io
import struct
from typing import Union

from ..exception.OutOfBoundsException import OutOfBoundsException
from ..exception.ShortReadException import ShortReadException


_BYTE = struct.Struct(">b")
_SHORT = struct.Struct(">h")
_USHORT = struct.Struct(">H")
_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")
_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")


class ByteBuf:
    """Cursor over an immutable byte sequence."""

    def __init__(self, data: Union[bytes, bytearray, memoryview] = b"") -> None:
        self._data = bytes(data)
        self._readerIndex = 0

    # -- position ---------------------------------------------------------

    def tell(self) -> int:
        return self._readerIndex

    def readableBytes(self) -> int:
        return len(self._data) - self._readerIndex

    def isReadable(self, size: int = 1) -> bool:
        return self.readableBytes() >= size

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move the reader index and return its new absolute value.

        ``whence`` follows :meth:`io.IOBase.seek`: ``SEEK_SET`` counts from
        the start, ``SEEK_CUR`` from the current index and ``SEEK_END``
        from the end of the buffer.

        :raises OutOfBoundsException: if the target lies outside
            ``[0, len(buffer)]``
        :raises ValueError: for an unknown ``whence``
        """
        if whence == io.SEEK_SET:
            target = offset
        elif whence == io.SEEK_CUR:
            target = self._readerIndex + offset
        elif whence == io.SEEK_END:
            target = len(self._data) + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")
        if target < 0 or target > len(self._data):
            raise OutOfBoundsException(target, len(self._data))
        self._readerIndex = target
        return target

    # -- raw bytes --------------------------------------------------------

    def _take(self, size: int) -> bytes:
        if not self.isReadable(size):
            raise ShortReadException(size, self.readableBytes())
        start = self._readerIndex
        self._readerIndex += size
        return self._data[start:self._readerIndex]

    def readBytes(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or raise without consuming anything."""
        return self._take(size)

    def readAvailable(self, size: int) -> bytes:
        """Read up to ``size`` bytes, fewer if the buffer runs out first."""
        start = self._readerIndex
        self._readerIndex = min(len(self._data), start + size)
        return self._data[start:self._readerIndex]

    def toBytes(self) -> bytes:
        """Return the whole backing buffer regardless of the reader index."""
        return self._data

    # -- fixed-width reads ------------------------------------------------

    def readUnsignedByte(self) -> int:
        return self._take(1)[0]

    def readByte(self) -> int:
        return _BYTE.unpack(self._take(1))[0]

    def readBoolean(self) -> bool:
        return self._take(1)[0] != 0

    def readShort(self) -> int:
        return _SHORT.unpack(self._take(2))[0]

    def readUnsignedShort(self) -> int:
        return _USHORT.unpack(self._take(2))[0]

    def readInt(self) -> int:
        return _INT.unpack(self._take(4))[0]

    def readLong(self) -> int:
        return _LONG.unpack(self._take(8))[0]

    def readFloat(self) -> float:
        return _FLOAT.unpack(self._take(4))[0]

    def readDouble(self) -> float:
        return _DOUBLE.unpack(self._take(8))[0]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ByteBuf(readerIndex={self._readerIndex}, capacity={len(self._data)})"


__all__ = ["ByteBuf"]
