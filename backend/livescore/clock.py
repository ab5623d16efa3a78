from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol, Union


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock, always timezone-aware UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ManualClock:
    """Clock that only moves when told to.

    Used by tests and the demo command so start/end stamps are predictable.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime(2026, 6, 11, 18, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, value: datetime) -> None:
        self._now = value

    def advance(self, delta: Union[timedelta, float] = 1.0) -> datetime:
        if not isinstance(delta, timedelta):
            delta = timedelta(seconds=delta)
        if delta < timedelta(0):
            raise ValueError('ManualClock cannot move backwards')
        self._now += delta
        return self._now
