"""Centralized logging configuration for Student Admin.

Provides rotating file logs with consistent formatting across all components.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "student_admin.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

ROOT_LOGGER = "student_admin"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    level: str | None = None,
    *,
    console: bool = True,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> logging.Logger:
    """Route the ``student_admin`` logger to a rotating file and optionally stderr.

    ``log_dir`` and ``level`` normally come from Settings. None falls back to
    ``logs/`` and INFO; unknown level names also mean INFO. Calling this again
    replaces the handlers installed by the previous call.

    Returns:
        The root student_admin logger.
    """
    log_path = Path(log_dir or DEFAULT_LOG_DIR) / DEFAULT_LOG_FILE
    log_path.parent.mkdir(parents=True, exist_ok=True)

    log_level = logging.getLevelName((level or DEFAULT_LOG_LEVEL).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(log_level)
    for stale in root.handlers:
        stale.close()
    root.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info("Logging to %s at %s", log_path, logging.getLevelName(log_level))
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'auth', 'records').
              Will be prefixed with 'student_admin.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Remove credentials from log output.

    Args:
        text: Text that may contain bearer tokens or JWTs.

    Returns:
        Sanitized text safe for logging.
    """
    patterns = [
        (r"Bearer [a-zA-Z0-9._-]+", "Bearer [REDACTED]"),
        (r"eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]*", "[JWT]"),
        (r"token=[a-zA-Z0-9._-]+", "token=[REDACTED]"),
        (r"password=\S+", "password=[REDACTED]"),
    ]

    result = text
    for pat, replacement in patterns:
        result = re.sub(pat, replacement, result)

    return result
