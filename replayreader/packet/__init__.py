"""Packet types produced by the frame decoder."""

from .Packet import Packet  # noqa: F401

__all__ = ["Packet"]
