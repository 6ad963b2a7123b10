"""Logging configuration utilities.

Provides a single function to initialize the root logger with a consistent
format. Library modules only call :func:`get_logger`; handlers are installed
by the command line entry point (or by the embedding application).
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Literal

LOG_LEVEL = os.environ.get("NHK_NEWS_LOG_LEVEL", "WARNING").upper()
LOG_OUTPUT = os.environ.get("NHK_NEWS_LOG_OUTPUT", "stderr").lower()
LOG_FILE_PATH = os.environ.get("NHK_NEWS_LOG_FILE", "logs/nhk-news.log")
LOG_FORMAT = os.environ.get("NHK_NEWS_LOG_FORMAT", "text").lower()

LogOutput = Literal["stderr", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", '
    '"file": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
) -> None:
    """Configure application logging.

    Parameters
    ----------
    level:
        Logging level as a string (e.g., "INFO") or numeric value.
    output:
        Logging output destination: "stderr", "file", or "both". Standard
        output is left alone so that article listings can be piped.
    file_path:
        Path to the log file if output is "file" or "both".
    log_format:
        Logging format: "text" or "json".
    """
    # Resolve at call-time so variables loaded from .env in main() are respected
    if level is None:
        level = os.environ.get("NHK_NEWS_LOG_LEVEL", LOG_LEVEL).upper()
    if log_format is None:
        log_format = (os.environ.get("NHK_NEWS_LOG_FORMAT") or LOG_FORMAT).lower()
    if output is None:
        output = (os.environ.get("NHK_NEWS_LOG_OUTPUT") or LOG_OUTPUT).lower()
    if file_path is None:
        file_path = os.environ.get("NHK_NEWS_LOG_FILE") or LOG_FILE_PATH

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(_TEXT_FORMAT if log_format == "text" else _JSON_FORMAT)

    if output in ("stderr", "both"):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(file_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
