"""Low-level buffer and stream helpers."""

from .ByteBuf import ByteBuf  # noqa: F401
from .PacketReader import PacketReader  # noqa: F401
from .StreamUtil import readUpTo  # noqa: F401
from .VarIntUtil import decodeVarInt, decodeVarLong  # noqa: F401

__all__ = [
    "ByteBuf",
    "PacketReader",
    "readUpTo",
    "decodeVarInt",
    "decodeVarLong",
]
