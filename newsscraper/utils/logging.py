"""Root logger setup shared by the CLI and the HTTP service.

Console records go to stderr so the CLI can keep stdout for its JSON
payload. Every setting falls back to a ``LOG_*`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Literal

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_OUTPUT = os.environ.get("LOG_OUTPUT", "stdout").lower()
LOG_FILE_PATH = os.environ.get("LOG_FILE_PATH", "logs/newsscraper.log")
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text").lower()

LogOutput = Literal["stdout", "file", "both"]
LogFormat = Literal["text", "json"]

_FORMATS = {
    "text": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    "json": (
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
        '"message": "%(message)s"}'
    ),
}
_MAX_LOG_BYTES = 5 * 1024 * 1024
_LOG_BACKUPS = 3


def _env(name: str, fallback: str) -> str:
    # read at call time so a .env loaded by the entrypoint still applies
    return os.environ.get(name) or fallback


def _handlers_for(output: str, file_path: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if output in ("stdout", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))
    if output in ("file", "both"):
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS))
    return handlers


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
) -> None:
    """Replace the root logger's handlers.

    ``output`` is "stdout" (written to stderr), "file" or "both";
    ``log_format`` is "text" or "json". Unknown formats fall back to text.
    """
    level = level if level is not None else _env("LOG_LEVEL", LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()
    output = (output or _env("LOG_OUTPUT", LOG_OUTPUT)).lower()
    log_format = (log_format or _env("LOG_FORMAT", LOG_FORMAT)).lower()
    file_path = file_path or _env("LOG_FILE_PATH", LOG_FILE_PATH)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    formatter = logging.Formatter(_FORMATS.get(log_format, _FORMATS["text"]))
    for handler in _handlers_for(output, file_path):
        handler.setFormatter(formatter)
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
