"""Frame decoder for replay files.

A replay is a plain sequence of frames with no file header::

    [timestamp: uint32 BE][length: uint32 BE][payload: length bytes]

``FrameDecoder`` reads one frame per :meth:`FrameDecoder.next` call from
a blocking binary stream and hands it out as a :class:`Packet` whose
payload is fully materialised in memory. Running out of data exactly on
a frame boundary is the normal end of a recording; running out anywhere
else, or any I/O error from the stream, ends the replay with an error.
Either way the decoder is finished afterwards and never tries to
resynchronise.
"""

from __future__ import annotations

import logging
import os
import struct
from typing import BinaryIO, Iterator, Optional, Union

from ...config import ReaderSettings
from ...exception.CodecException import CodecException
from ...exception.FrameTooLargeException import FrameTooLargeException
from ...exception.TruncatedFrameException import TruncatedFrameException
from ...packet.Packet import Packet
from ...util.ByteBuf import ByteBuf
from ...util.StreamUtil import readUpTo
from .FrameResult import FrameResult


logger = logging.getLogger(__name__)


_UINT = struct.Struct(">I")


class FrameDecoder:
    """Reads frames sequentially from a replay stream.

    Not thread safe: the stream position and the stored error are shared
    mutable state.
    """

    def __init__(self, stream: BinaryIO, settings: Optional[ReaderSettings] = None) -> None:
        self.stream = stream
        self.settings = settings or ReaderSettings()
        self.framesRead = 0
        self._error: Optional[BaseException] = None
        # Set once the replay has ended, cleanly or not
        self._terminal: Optional[FrameResult] = None

    @classmethod
    def open(cls, path: Union[str, os.PathLike], settings: Optional[ReaderSettings] = None) -> "FrameDecoder":
        """Open the replay file at ``path``. Close it with :meth:`close`."""
        return cls(open(path, "rb"), settings)

    @property
    def error(self) -> Optional[BaseException]:
        """The error that ended the replay on the latest ``next`` call, if any."""
        return self._error

    def getError(self) -> Optional[BaseException]:
        return self._error

    @property
    def finished(self) -> bool:
        return self._terminal is not None

    def next(self) -> FrameResult:
        """Read the next frame.

        :return: ``FrameResult.Success`` with the packet,
            ``FrameResult.End`` if the stream ended between frames, or
            ``FrameResult.Error`` with the cause otherwise. Once ``End`` or
            ``Error`` has been returned, every later call returns the same
            result without reading from the stream.
        """
        if self._terminal is not None:
            return self._terminal

        self._error = None
        try:
            packet = self._readFrame()
        except (OSError, ValueError, CodecException) as e:
            # ValueError: read on a closed stream
            self._error = e
            self._terminal = FrameResult.Error(e)
            logger.warning("[FrameDecoder] Replay ended with error after %d frames: %s", self.framesRead, e)
            return self._terminal

        if packet is None:
            self._terminal = FrameResult.End()
            logger.debug("[FrameDecoder] End of replay after %d frames", self.framesRead)
            return self._terminal

        self.framesRead += 1
        logger.debug("[FrameDecoder] Frame #%d time=%d len=%d", self.framesRead, packet.timestamp, packet.length)
        return FrameResult.Success(packet)

    def _readFrame(self) -> Optional[Packet]:
        raw = readUpTo(self.stream, _UINT.size)
        if not raw:
            return None
        if len(raw) < _UINT.size:
            raise TruncatedFrameException("timestamp", _UINT.size, len(raw))
        (timestamp,) = _UINT.unpack(raw)

        raw = readUpTo(self.stream, _UINT.size)
        if len(raw) < _UINT.size:
            raise TruncatedFrameException("length", _UINT.size, len(raw))
        (length,) = _UINT.unpack(raw)

        limit = self.settings.max_frame_length
        if limit is not None and length > limit:
            raise FrameTooLargeException(length, limit)

        payload = readUpTo(self.stream, length)
        if len(payload) < length:
            raise TruncatedFrameException("payload", length, len(payload))

        return Packet(
            timestamp,
            length,
            ByteBuf(payload),
            encoding=self.settings.string_encoding,
            errors=self.settings.string_errors,
        )

    def __iter__(self) -> Iterator[Packet]:
        """Yield packets until the replay ends.

        :raises CodecException: if the replay was truncated or malformed
        :raises OSError: if reading from the stream failed
        :raises ValueError: if the stream was closed underneath the decoder
        """
        while True:
            result = self.next()
            if not result.hasMore:
                if result.error is not None:
                    raise result.error
                return
            yield result.packet

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "FrameDecoder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["FrameDecoder"]
