"""Replaceable source of wall-clock time, so tests can control it."""

import time
from datetime import datetime, timezone


class Clock:
    """The real clock."""

    def now(self) -> datetime:
        """Return the current time in UTC."""
        return datetime.now(timezone.utc)

    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds."""
        time.sleep(seconds)


_current: Clock = Clock()


def current_clock() -> Clock:
    """Return the clock currently in use."""
    return _current


def set_clock(clock: Clock) -> None:
    """Replace the clock in use."""
    global _current
    _current = clock


def reset_clock() -> None:
    """Restore the real clock."""
    set_clock(Clock())