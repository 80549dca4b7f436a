"""Centralized error types."""
from typing import Optional


class SnsClientError(Exception):
    """Base exception for SNS client errors."""
    pass


class ConfigError(SnsClientError):
    """Configuration error."""
    pass


class InvalidArgumentError(SnsClientError, ValueError):
    """Required argument missing or empty. Raised before any request is sent."""
    pass


class SnsRequestError(SnsClientError):
    """Request reached (or tried to reach) SNS and did not succeed."""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
    
    @property
    def is_not_found(self) -> bool:
        """Whether the service answered with HTTP 404."""
        return self.status_code == 404


class SnsServiceError(SnsRequestError):
    """Non-2xx response carrying an AWS error document."""
    
    def __init__(self, code: str, error_message: str, status_code: Optional[int] = None):
        super().__init__(f"{code}: {error_message}", status_code)
        self.code = code
        self.error_message = error_message


class SnsApiError(SnsRequestError):
    """Failed request without a usable error document."""
    
    def __init__(
        self,
        status_code: Optional[int] = None,
        message: str = "There was a problem executing this request",
    ):
        super().__init__(message, status_code)
