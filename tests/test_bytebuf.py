"""
ByteBuf Tests
=============
"""

import io

import pytest

from replayreader.exception import ShortReadException
from replayreader.util import ByteBuf, readUpTo


def test_read_bytes_is_all_or_nothing():
    buf = ByteBuf(bytearray(b"abcdef"))

    assert buf.readBytes(4) == b"abcd"
    with pytest.raises(ShortReadException):
        buf.readBytes(3)
    assert buf.tell() == 4
    assert buf.readableBytes() == 2


def test_read_available_stops_at_end():
    buf = ByteBuf(b"abc")

    assert buf.readAvailable(2) == b"ab"
    assert buf.readAvailable(5) == b"c"
    assert buf.readAvailable(1) == b""


def test_to_bytes_ignores_position():
    buf = ByteBuf(memoryview(b"xyz"))
    buf.readUnsignedByte()

    assert buf.toBytes() == b"xyz"
    assert len(buf) == 3
    assert repr(buf) == "ByteBuf(readerIndex=1, capacity=3)"


def test_read_up_to_stops_at_eof():
    assert readUpTo(io.BytesIO(b"abc"), 2) == b"ab"
    assert readUpTo(io.BytesIO(b"abc"), 10) == b"abc"
    assert readUpTo(io.BytesIO(b""), 4) == b""
