"""Reader for recorded network-session replays.

Typical use::

    from replayreader import open_replay

    with open_replay("session.replay") as replay:
        for packet in replay:
            packetId, _ = packet.readVarInt()
            ...
"""

from __future__ import annotations

import os
from typing import Optional, Union

from .codec.decoder import FrameDecoder, FrameResult
from .config import ReaderSettings, load_settings
from .exception import (
    CodecException,
    FrameTooLargeException,
    OutOfBoundsException,
    ShortReadException,
    TruncatedFrameException,
    VarIntTooBigException,
)
from .packet import Packet
from .util import ByteBuf

__version__ = "0.1.0"


def open_replay(path: Union[str, os.PathLike], settings: Optional[ReaderSettings] = None) -> FrameDecoder:
    """Open a replay file for reading."""
    return FrameDecoder.open(path, settings)


__all__ = [
    "ByteBuf",
    "CodecException",
    "FrameDecoder",
    "FrameResult",
    "FrameTooLargeException",
    "OutOfBoundsException",
    "Packet",
    "ReaderSettings",
    "ShortReadException",
    "TruncatedFrameException",
    "VarIntTooBigException",
    "load_settings",
    "open_replay",
]
