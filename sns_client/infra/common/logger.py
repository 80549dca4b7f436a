"""Centralized logging configuration."""
import logging
import os
import sys
from typing import Optional, Union


LOGGER_NAMESPACE = "sns_client"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def _resolve_level(level: Union[int, str, None]) -> int:
    """Resolve a level given as int, level name, or None (reads SNS_CLIENT_LOG_LEVEL)."""
    if level is None:
        level = os.getenv("SNS_CLIENT_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: Union[int, str, None] = None,
    format_string: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for applications using the client.

    The library never calls this itself; loggers only carry a NullHandler
    until an application opts in.

    Args:
        level: Logging level, as int or name. If None, uses SNS_CLIENT_LOG_LEVEL or INFO.
        format_string: Custom format string. If None, uses default.
        datefmt: Date format string. If None, uses default.
        force: If True, reconfigure even if already configured.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    logging.basicConfig(
        level=_resolve_level(level),
        format=format_string or DEFAULT_FORMAT,
        datefmt=datefmt or DEFAULT_DATEFMT,
        stream=sys.stdout,
        force=force,
    )

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
