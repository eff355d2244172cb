"""
Replay dump tool.

Usage:
    python -m replayreader --help
    python -m replayreader dump session.replay
    python -m replayreader dump session.replay --limit 20 --hex
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .codec.decoder import FrameDecoder
from .config import ReaderSettings, load_settings


logger = logging.getLogger("replayreader")


HEX_PREVIEW_BYTES = 32
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _dump(args: argparse.Namespace, settings: ReaderSettings) -> int:
    try:
        decoder = FrameDecoder.open(args.path, settings)
    except OSError as e:
        logger.error("[Dump] Cannot open %s: %s", args.path, e)
        return 1

    with decoder:
        while args.limit is None or decoder.framesRead < args.limit:
            result = decoder.next()
            if not result.hasMore:
                break
            packet = result.packet
            line = f"{decoder.framesRead:>6} t={packet.timestamp:>10} len={packet.length:>8}"
            if args.hex:
                preview = packet.data.toBytes()[:HEX_PREVIEW_BYTES].hex(" ")
                if packet.length > HEX_PREVIEW_BYTES:
                    preview += " ..."
                line += f"  {preview}"
            print(line)

    if decoder.error is not None:
        logger.error("[Dump] %s: %s", args.path, decoder.error)
        return 1
    logger.info("[Dump] %d frames read from %s", decoder.framesRead, args.path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="replayreader",
        description="Inspect recorded network-session replays",
    )
    parser.add_argument("--version", action="version", version=f"replayreader {__version__}")
    parser.add_argument("--log-level", help="Override REPLAY_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    dump_parser = subparsers.add_parser("dump", help="List the frames of a replay file")
    dump_parser.add_argument("path", help="Replay file to read")
    dump_parser.add_argument("--limit", type=int, help="Stop after this many frames")
    dump_parser.add_argument("--hex", action="store_true", help="Show the first payload bytes in hex")
    dump_parser.add_argument("--max-frame-length", type=int, help="Reject frames with a longer payload")

    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if getattr(args, "max_frame_length", None) is not None:
        overrides["max_frame_length"] = args.max_frame_length
    try:
        settings = load_settings(**overrides)
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("[Dump] Invalid settings: %s", e)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
    )

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "dump":
        return _dump(args, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
