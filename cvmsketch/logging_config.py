"""Logging setup for cvmsketch.

The library logs through the standard `logging` module under the
``cvmsketch`` logger and is silent by default (NullHandler). Applications
opt in with the helpers below:

    import cvmsketch

    cvmsketch.enable_console_logging(level="DEBUG")   # stderr
    cvmsketch.enable_file_logging("cvm.log")           # rotating file
    cvmsketch.enable_json_logging()                   # JSON lines on stderr
    cvmsketch.configure_from_env()                    # from CVM_* variables

Compactions are reported at DEBUG by ``cvmsketch.sketching.cvm``; accuracy
studies report at INFO by ``cvmsketch.analysis.accuracy``.

Environment variables:
    CVM_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CVM_LOG_FILE: Path to log file (enables rotating file logging)
    CVM_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "cvmsketch"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log shippers.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "DEBUG",
         "logger": "cvmsketch.sketching.cvm", "message": "Compaction: round 3 -> 4, ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    """Map a level name or number to a logging constant (INFO if unknown)."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Detach and close every handler on the package logger except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _attach(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log cvmsketch records to stderr.

    Args:
        level: Log level name or number.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The attached StreamHandler.
    """
    handler = logging.StreamHandler()
    _attach(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Log cvmsketch records to a size-rotated file.

    Args:
        path: Log file path. Parent directories are created.
        level: Log level name or number.
        max_bytes: Size at which the file is rotated. Default 10 MB.
        backup_count: Rotated files to keep. Default 5.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The attached RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    _attach(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_json_logging(
    level: LogLevel | int = "INFO",
    path: str | Path | None = None,
) -> logging.Handler:
    """Log cvmsketch records as JSON lines.

    Args:
        level: Log level name or number.
        path: Optional file to write to (rotating, default size limits).
            None logs to stderr.

    Returns:
        The attached handler.
    """
    if path is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=DEFAULT_MAX_BYTES, backupCount=DEFAULT_BACKUP_COUNT)
    _attach(handler, level, JsonFormatter())
    return handler


def configure_from_env() -> None:
    """Configure logging from CVM_LOGGING, CVM_LOG_FILE and CVM_LOG_JSON.

    Does nothing when neither CVM_LOGGING nor CVM_LOG_FILE is set.
    """
    level = os.environ.get("CVM_LOGGING", "").upper()
    log_file = os.environ.get("CVM_LOG_FILE", "")
    use_json = os.environ.get("CVM_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if use_json:
        enable_json_logging(level=level, path=log_file or None)
    elif log_file:
        enable_file_logging(log_file, level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the cvmsketch logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level of one cvmsketch submodule logger.

    Args:
        module: Module path relative to cvmsketch, e.g. "sketching.cvm".
        level: Log level name or number.
    """
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Silence cvmsketch entirely (NullHandler only, level above CRITICAL)."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
