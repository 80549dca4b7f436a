"""Common infrastructure utilities."""
from sns_client.infra.common.clock import Clock, SystemClock, FixedClock, get_clock, set_clock
from sns_client.infra.common.logger import setup_logging, get_logger
from sns_client.infra.common.errors import (
    SnsClientError,
    ConfigError,
    InvalidArgumentError,
    SnsRequestError,
    SnsServiceError,
    SnsApiError,
)

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_clock",
    "set_clock",
    "setup_logging",
    "get_logger",
    "SnsClientError",
    "ConfigError",
    "InvalidArgumentError",
    "SnsRequestError",
    "SnsServiceError",
    "SnsApiError",
]
