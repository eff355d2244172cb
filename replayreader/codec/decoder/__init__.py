"""Decoding of the replay container.

``FrameDecoder`` slices a replay stream into timestamped frames and
reports how the stream ended through ``FrameResult``.
"""

from .FrameDecoder import FrameDecoder  # noqa: F401
from .FrameResult import FrameResult  # noqa: F401

__all__ = [
    "FrameDecoder",
    "FrameResult",
]
