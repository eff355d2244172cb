"""
Reader configuration.

Configuration sources (in order of precedence):
    1. Keyword overrides passed to ``load_settings``
    2. Environment variables
    3. Default values

Environment variable mapping:
    REPLAY_MAX_FRAME_LENGTH -> max_frame_length
    REPLAY_STRING_ENCODING  -> string_encoding
    REPLAY_STRING_ERRORS    -> string_errors
    REPLAY_LOG_LEVEL        -> log_level
"""

from __future__ import annotations

import codecs
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


ENV_MAPPING = {
    "REPLAY_MAX_FRAME_LENGTH": "max_frame_length",
    "REPLAY_STRING_ENCODING": "string_encoding",
    "REPLAY_STRING_ERRORS": "string_errors",
    "REPLAY_LOG_LEVEL": "log_level",
}


class ReaderSettings(BaseModel):
    """Options shared by the frame decoder and the packets it produces."""

    max_frame_length: Optional[int] = Field(
        default=None,
        ge=0,
        description="Reject frames declaring a longer payload (None = unlimited)",
    )
    string_encoding: str = Field(
        default="utf-8",
        description="Codec used by Packet.readString",
    )
    string_errors: str = Field(
        default="replace",
        description="Codec error handler used by Packet.readString",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level used by the command line",
    )

    @field_validator("string_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return value


def load_settings(**overrides: Any) -> ReaderSettings:
    """Build settings from defaults, the environment and ``overrides``."""
    values: Dict[str, Any] = {}
    for env_name, field_name in ENV_MAPPING.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        values[field_name] = raw
        logger.debug("[Config] %s=%s from environment", field_name, raw)
    values.update(overrides)
    return ReaderSettings.model_validate(values)


__all__ = ["ReaderSettings", "load_settings", "ENV_MAPPING"]
