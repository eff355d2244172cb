"""
Test Configuration
==================

Pytest fixtures for building replay bytes and packets by hand.
"""

import struct

import pytest

from replayreader.packet import Packet
from replayreader.util import ByteBuf


def _encode_varint(value, bits=64):
    value &= (1 << bits) - 1
    out = bytearray()
    while True:
        group = value & 0x7F
        value >>= 7
        if value:
            out.append(group | 0x80)
        else:
            out.append(group)
            return bytes(out)


@pytest.fixture
def varint():
    """Encode an integer with 7-bit groups and continuation bits."""
    return _encode_varint


@pytest.fixture
def frame():
    """Build the bytes of one frame: timestamp, length, payload."""

    def build(timestamp, payload):
        return struct.pack(">II", timestamp, len(payload)) + payload

    return build


@pytest.fixture
def replay(frame):
    """Build a whole replay from ``(timestamp, payload)`` pairs."""

    def build(frames):
        return b"".join(frame(timestamp, payload) for timestamp, payload in frames)

    return build


@pytest.fixture
def make_packet():
    """Wrap raw payload bytes in a Packet positioned at offset 0."""

    def build(payload, timestamp=0):
        return Packet(timestamp, len(payload), ByteBuf(payload))

    return build
