# src/shopfx/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for the package.
Library modules only create module loggers; the host application calls
setup_logging() once to attach handlers (stdout and/or a rotating file).

Files that USE this module:
- Host applications embedding shopfx (setup_logging at startup)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- shopfx.config (settings for default log destinations)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

from shopfx.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_stdout: Optional[bool] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
) -> List[logging.Handler]:
    """
    Configure application-wide logging settings.

    Any argument left as None falls back to the matching setting
    (LOG_FILE, LOG_DIR, SHOPFX_LOG_STDOUT, LOG_MAX_BYTES, LOG_BACKUP_COUNT).

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; writes shopfx.log inside it
        log_stdout: Whether to log to stdout
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup log files to keep

    Returns:
        The handlers that were installed
    """
    log_file = log_file if log_file is not None else settings.log_file
    log_dir = log_dir if log_dir is not None else settings.log_dir
    log_stdout = settings.log_stdout if log_stdout is None else log_stdout
    max_bytes = settings.log_max_bytes if max_bytes is None else max_bytes
    backup_count = settings.log_backup_count if backup_count is None else backup_count

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        handlers.append(stdout_handler)

    log_file_path: Optional[Path] = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "shopfx.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        fallback = logging.StreamHandler(sys.stdout)
        fallback.setFormatter(formatter)
        handlers = [fallback]

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path is not None:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.info("Logging configured: stdout, level=%s", level)
    return handlers
