"""Composite reads built on top of :class:`ByteBuf` and VarInt decoding.

Both helpers return the number of bytes they consumed next to the value,
so callers walking a nested structure can keep their offsets without
re-deriving the width of a length prefix.
"""

from __future__ import annotations

from typing import Tuple

from .ByteBuf import ByteBuf
from .VarIntUtil import decodeVarInt
from ..exception.CodecException import CodecException
from ..exception.ShortReadException import ShortReadException


class PacketReader:
    """Static helpers for length-delimited values."""

    @staticmethod
    def readByteArray(buf: ByteBuf, size: int) -> Tuple[bytes, int]:
        """Read exactly ``size`` bytes.

        If the buffer holds fewer, the remaining bytes are consumed and a
        :class:`ShortReadException` carrying that count is raised.

        :param buf: the source buffer
        :param size: number of bytes to read
        :return: ``(data, size)``
        :raises CodecException: if ``size`` is negative
        """
        if size < 0:
            raise CodecException(f"Negative byte array length: {size}")
        data = buf.readAvailable(size)
        if len(data) < size:
            raise ShortReadException(size, len(data), bytesRead=len(data))
        return data, size

    @staticmethod
    def readString(buf: ByteBuf, encoding: str = "utf-8", errors: str = "replace") -> Tuple[str, int]:
        """Read a VarInt byte length followed by that many bytes of text.

        :param buf: the source buffer
        :param encoding: codec used to turn the bytes into text
        :param errors: codec error handler, no validation happens beyond it
        :return: ``(text, prefixBytes + payloadBytes)``
        :raises ShortReadException: if the prefix or payload is cut short;
            ``bytesRead`` covers both parts
        :raises VarIntTooBigException: if the length prefix is malformed
        :raises CodecException: if the length prefix is negative; ``bytesRead``
            covers the prefix
        """
        length, prefixBytes = decodeVarInt(buf)
        if length < 0:
            raise CodecException(f"Negative string length: {length}", bytesRead=prefixBytes)
        try:
            data, dataBytes = PacketReader.readByteArray(buf, length)
        except ShortReadException as e:
            e.bytesRead += prefixBytes
            raise
        return data.decode(encoding, errors), prefixBytes + dataBytes


__all__ = ["PacketReader"]
