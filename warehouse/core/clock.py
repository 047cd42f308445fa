"""Clock — injectable "today" provider for expiry checks.

Invariants:
    - A Clock is a zero-argument callable returning a date
    - Core code never reads system time except through system_clock

Design Decisions:
    - Plain callable over a Clock class: any lambda or bound method qualifies
"""

from datetime import date
from typing import Callable

Clock = Callable[[], date]


def system_clock() -> date:
    """Today's date according to the local system time."""
    return date.today()


def fixed_clock(day: date) -> Clock:
    """Clock pinned to `day`."""
    return lambda: day
