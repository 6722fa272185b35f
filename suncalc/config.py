"""Environment driven settings for the HTTP service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

__all__ = ["Settings", "load_settings"]

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS = ("*",)


@dataclass(frozen=True)
class Settings:
    log_level: int
    cors_origins: Tuple[str, ...]


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level: {value}")
    return level


def _parse_origins(value: str) -> Tuple[str, ...]:
    origins = tuple(item.strip() for item in value.split(",") if item.strip())
    return origins or DEFAULT_CORS_ORIGINS


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from *environ* (defaults to :data:`os.environ`).

    ``SUNCALC_LOG_LEVEL`` selects the logging level and
    ``SUNCALC_CORS_ORIGINS`` is a comma separated list of allowed origins.
    """

    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_log_level(env.get("SUNCALC_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        cors_origins=_parse_origins(env.get("SUNCALC_CORS_ORIGINS", "")),
    )
