"""Clock abstraction so expiry checks can run against a fixed "now"."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current UTC time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current datetime with tzinfo=UTC."""
        pass


class SystemClock(Clock):
    """Production clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant, for tests."""

    def __init__(self, fixed_time: datetime) -> None:
        if fixed_time.tzinfo is None:
            raise ValueError("fixed_time must be timezone-aware")
        self._fixed_time = fixed_time.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self._fixed_time
