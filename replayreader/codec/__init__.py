from .decoder import FrameDecoder, FrameResult  # noqa: F401

__all__ = ["FrameDecoder", "FrameResult"]
