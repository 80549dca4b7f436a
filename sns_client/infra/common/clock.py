"""Clock abstraction for request timestamps."""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional


AWS_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"


class Clock(ABC):
    """Abstract clock interface."""
    
    @abstractmethod
    def now(self) -> datetime:
        """Get current UTC datetime."""
        pass
    
    def aws_timestamp(self) -> str:
        """Get current UTC time in the query API timestamp format."""
        return self.now().astimezone(timezone.utc).strftime(AWS_TIMESTAMP_FORMAT)


class SystemClock(Clock):
    """System clock implementation using real time."""
    
    def now(self) -> datetime:
        """Get current UTC datetime."""
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant."""
    
    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant
    
    def now(self) -> datetime:
        return self.instant


# Default instance
_default_clock: Optional[Clock] = None


def get_clock() -> Clock:
    """Get the default clock instance."""
    global _default_clock
    if _default_clock is None:
        _default_clock = SystemClock()
    return _default_clock


def set_clock(clock: Optional[Clock]) -> None:
    """Set the default clock instance (for testing). None restores the system clock."""
    global _default_clock
    _default_clock = clock
