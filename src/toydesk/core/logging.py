"""Application logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(log_level: str = "INFO", app_log_path: Path | None = None) -> None:
    """Configure application logging to stderr and, optionally, a log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if app_log_path:
        app_log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(app_log_path)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=_LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
