"""Outcome of a single :meth:`FrameDecoder.next` call.

A replay can stop for two very different reasons: the recording ended
cleanly between two frames, or something broke in the middle of one.
``FrameResult`` keeps those apart. Use one of the variants attached to
this class:

``FrameResult.Success``
    a frame was decoded; ``packet`` holds it and ``hasMore`` is true.
``FrameResult.End``
    the stream ended exactly on a frame boundary; not an error.
``FrameResult.Error``
    the stream failed or was truncated; ``error`` holds the cause.
"""

from __future__ import annotations

from typing import Optional

from ...packet.Packet import Packet


class FrameResult:
    """Base type for frame read results. Carries no data itself."""

    hasMore: bool = False
    packet: Optional[Packet] = None
    error: Optional[BaseException] = None

    def __bool__(self) -> bool:
        return self.hasMore


class _FrameResultSuccess(FrameResult):
    """A frame was read."""

    hasMore = True

    def __init__(self, packet: Packet) -> None:
        self.packet = packet

    def __repr__(self) -> str:
        return f"FrameResult.Success({self.packet!r})"


class _FrameResultEnd(FrameResult):
    """The stream ended cleanly between frames."""

    def __repr__(self) -> str:
        return "FrameResult.End()"


class _FrameResultError(FrameResult):
    """The stream failed or ended inside a frame."""

    def __init__(self, error: BaseException) -> None:
        self.error = error

    def __repr__(self) -> str:
        return f"FrameResult.Error({self.error!r})"


# Bind variants to the outer class
FrameResult.Success = _FrameResultSuccess  # type: ignore[attr-defined]
FrameResult.End = _FrameResultEnd  # type: ignore[attr-defined]
FrameResult.Error = _FrameResultError  # type: ignore[attr-defined]


__all__ = ["FrameResult"]
