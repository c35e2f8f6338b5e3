"""
Injectable clock for parse-time timestamp defaults.

Fields such as `createdAt` default to "now" when absent. That is the only
impure behaviour in the validation layer, so it is routed through here and
tests can pin it:

    from servemate_contracts import clock

    with clock.frozen(datetime(2024, 1, 1, tzinfo=timezone.utc)):
        user = CreateUser.parse(payload)
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


_clock: Callable[[], datetime] = _utc_now


def now() -> datetime:
    """Current time according to the installed clock."""
    return _clock()


def set_clock(fn: Callable[[], datetime]) -> None:
    """Install a zero-arg callable returning the current datetime."""
    global _clock
    _clock = fn


def reset_clock() -> None:
    """Restore the system UTC clock."""
    set_clock(_utc_now)


@contextmanager
def frozen(at: datetime) -> Iterator[datetime]:
    """Pin `now()` to a fixed instant for the duration of the block."""
    previous = _clock
    set_clock(lambda: at)
    try:
        yield at
    finally:
        set_clock(previous)
