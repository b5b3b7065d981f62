"""Clock abstraction for testable time-dependent logic."""

from __future__ import annotations

from datetime import datetime


class SystemClock:
    """Default clock backed by the real local system time.

    Due dates are calendar dates for the customer, so local time is used
    rather than UTC.
    """

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock:
    """Clock frozen at a single instant."""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
