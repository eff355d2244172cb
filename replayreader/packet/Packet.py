"""A single frame of a replay and the cursor used to read its payload.

``Packet`` pairs the frame header (``timestamp`` and ``length``) with a
:class:`ByteBuf` over the payload. Every ``read*`` method consumes bytes
from the current position onwards; :meth:`Packet.seek` is the only way to
move backwards. Reads past the end of the payload raise
:class:`ShortReadException` from the buffer.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Tuple

from ..util.ByteBuf import ByteBuf
from ..util.PacketReader import PacketReader
from ..util.VarIntUtil import decodeVarInt, decodeVarLong


@dataclass
class Packet:
    """One replay frame.

    Attributes
    ----------
    timestamp: int
        Milliseconds elapsed since the start of the replay.
    length: int
        Size of the payload in bytes.
    data: ByteBuf
        The payload, positioned at offset 0 when the packet is produced.
    """

    timestamp: int
    length: int
    data: ByteBuf
    encoding: str = field(default="utf-8", repr=False)
    errors: str = field(default="replace", repr=False)

    # Fixed-width reads. Len: 1, 2, 4 or 8 bytes.

    def readUnsignedByte(self) -> int:
        return self.data.readUnsignedByte()

    def readByte(self) -> int:
        return self.data.readByte()

    def readShort(self) -> int:
        return self.data.readShort()

    def readUnsignedShort(self) -> int:
        return self.data.readUnsignedShort()

    def readInt(self) -> int:
        return self.data.readInt()

    def readLong(self) -> int:
        return self.data.readLong()

    def readFloat(self) -> float:
        return self.data.readFloat()

    def readDouble(self) -> float:
        return self.data.readDouble()

    def readBoolean(self) -> bool:
        return self.data.readBoolean()

    # Variable-length reads return ``(value, bytesRead)``.

    def readVarInt(self) -> Tuple[int, int]:
        return decodeVarInt(self.data)

    def readVarLong(self) -> Tuple[int, int]:
        return decodeVarLong(self.data)

    def readByteArray(self, size: int) -> Tuple[bytes, int]:
        return PacketReader.readByteArray(self.data, size)

    def readString(self) -> Tuple[str, int]:
        return PacketReader.readString(self.data, self.encoding, self.errors)

    # Positioning

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Same as :meth:`io.IOBase.seek`, bounded to ``[0, length]``."""
        return self.data.seek(offset, whence)

    def tell(self) -> int:
        return self.data.tell()

    def readableBytes(self) -> int:
        return self.data.readableBytes()

    def isReadable(self, size: int = 1) -> bool:
        return self.data.isReadable(size)


__all__ = ["Packet"]
