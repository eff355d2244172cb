"""Exceptions raised by the replay decoder.

``CodecException`` is the common base. Short reads are also ``EOFError``
and bad seeks are also ``IndexError`` so that generic handlers still
catch them.
"""

from .CodecException import CodecException  # noqa: F401
from .ShortReadException import ShortReadException  # noqa: F401
from .TruncatedFrameException import TruncatedFrameException  # noqa: F401
from .FrameTooLargeException import FrameTooLargeException  # noqa: F401
from .VarIntTooBigException import VarIntTooBigException  # noqa: F401
from .OutOfBoundsException import OutOfBoundsException  # noqa: F401

__all__ = [
    "CodecException",
    "ShortReadException",
    "TruncatedFrameException",
    "FrameTooLargeException",
    "VarIntTooBigException",
    "OutOfBoundsException",
]
