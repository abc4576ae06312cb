"""Helper functions for due-status calculations."""

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Union

from dateutil.parser import isoparse

from .status import Status

# Share of an interval left at which a service becomes due soon.
DUE_SOON_RATIO = 0.1

SECONDS_PER_DAY = 24 * 60 * 60

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: current UTC wall time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_instant(value: Union[str, date, datetime]) -> datetime:
    """
    Parse an ISO date or date-time into a naive UTC datetime.

    Plain dates are taken as midnight. Aware values are converted to UTC.
    """
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, date):
        instant = datetime.combine(value, time())
    else:
        instant = isoparse(str(value))
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc).replace(tzinfo=None)
    return instant


def days_between(start: datetime, end: datetime) -> int:
    """Whole days elapsed from start to end (floored)."""
    return math.floor((end - start).total_seconds() / SECONDS_PER_DAY)


def calc_due_date(last: datetime, interval_days: float) -> datetime:
    """Next due instant: last service + interval days."""
    return last + timedelta(days=interval_days)


def check_status(elapsed: float, interval: float) -> Status:
    """
    Classify elapsed usage against an interval.

    OVERDUE once nothing is left, DUE_SOON once the remainder is within
    DUE_SOON_RATIO of the interval (inclusive), UPCOMING otherwise.
    """
    remaining = interval - elapsed
    if remaining <= 0:
        return Status.OVERDUE
    if remaining <= interval * DUE_SOON_RATIO:
        return Status.DUE_SOON
    return Status.UPCOMING


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
