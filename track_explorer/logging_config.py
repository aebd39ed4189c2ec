from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Dash's dev server logs every request at INFO
NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.getenv("TRACK_EXPLORER_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[Union[int, str]] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the explorer

    Modes:
    - JSON (default): one object per line, `extra=` payloads become keys
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var TRACK_EXPLORER_LOG_FORMAT
        3) default = "json"

    The level comes from `level`, then TRACK_EXPLORER_LOG_LEVEL, then INFO.
    """
    format_mode = (force_format or os.getenv("TRACK_EXPLORER_LOG_FORMAT", "json")).lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler.setFormatter(
            jsonlogger.JsonFormatter(LOG_FORMAT, rename_fields={"levelname": "level"})
        )

    # Replace existing handlers so reloads don't duplicate output
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
