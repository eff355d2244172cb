"""VarInt and VarLong decoding.

Both formats store seven data bits per byte, least significant group
first, with the high bit of each byte flagging that another byte
follows. A VarInt may span at most 5 bytes and a VarLong at most 10.
The accumulated bits are truncated to 32 or 64 bits respectively and
interpreted as two's complement, so ``ff ff ff ff 0f`` is ``-1`` and not
``4294967295`` as a plain unsigned accumulation into a wider integer
would give. Values in ``[0, 2**31)`` decode the same either way.
"""

from __future__ import annotations

from typing import Tuple

from .ByteBuf import ByteBuf
from ..exception.ShortReadException import ShortReadException
from ..exception.VarIntTooBigException import VarIntTooBigException


VARINT_MAX_BYTES = 5
VARLONG_MAX_BYTES = 10


def _toSigned(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _decodeVarNumber(buf: ByteBuf, maxBytes: int, bits: int) -> Tuple[int, int]:
    result = 0
    for index in range(maxBytes):
        if not buf.isReadable():
            raise ShortReadException(1, 0, bytesRead=index)
        current = buf.readUnsignedByte()
        result |= (current & 0x7F) << (7 * index)
        if not current & 0x80:
            return _toSigned(result, bits), index + 1
    # the last allowed byte still had its continuation bit set
    raise VarIntTooBigException(maxBytes, maxBytes)


def decodeVarInt(buf: ByteBuf) -> Tuple[int, int]:
    """Decode a VarInt from ``buf``.

    :param buf: buffer positioned at the first byte of the VarInt
    :return: ``(value, bytesRead)``
    :raises VarIntTooBigException: if more than 5 bytes carry the
        continuation bit
    :raises ShortReadException: if the buffer ends first; ``bytesRead``
        on the exception counts the bytes already consumed
    """
    return _decodeVarNumber(buf, VARINT_MAX_BYTES, 32)


def decodeVarLong(buf: ByteBuf) -> Tuple[int, int]:
    """Decode a VarLong from ``buf``. Same contract as :func:`decodeVarInt`, up to 10 bytes."""
    return _decodeVarNumber(buf, VARLONG_MAX_BYTES, 64)


__all__ = ["decodeVarInt", "decodeVarLong", "VARINT_MAX_BYTES", "VARLONG_MAX_BYTES"]
