"""Helper functions for maintenance date and status calculations."""

import math
from datetime import date, datetime
from dateutil.relativedelta import relativedelta
from typing import Optional, Union

from .interval import resolve_interval_days
from .status import Status

DUE_SOON_DAYS = 7

SECONDS_PER_DAY = 24 * 60 * 60


def calc_next_maintenance(
    last_maintenance: Optional[date], interval_label: Optional[str], today: Optional[date] = None
) -> date:
    """
    Calculate next maintenance date: last + interval days.

    - With a last date: last_maintenance + interval
    - Without one: today + interval
    """
    if last_maintenance is None:
        last_maintenance = today or date.today()
    return last_maintenance + relativedelta(days=resolve_interval_days(interval_label))


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def days_until(next_maintenance: date, now: Union[date, datetime]) -> int:
    """
    Whole days until next maintenance, rounded up.

    A datetime "now" is measured against midnight starting the
    next-maintenance day, so any time on the due date itself gives 0.
    """
    delta = _as_datetime(next_maintenance) - _as_datetime(now)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def classify_status(next_maintenance: date, now: Union[date, datetime]) -> Status:
    """
    Classify urgency from the next maintenance date.

    - OVERDUE when the date has passed
    - DUE when it falls within DUE_SOON_DAYS (today counts as due)
    - GOOD otherwise
    """
    diff = days_until(next_maintenance, now)
    if diff < 0:
        return Status.OVERDUE
    if diff <= DUE_SOON_DAYS:
        return Status.DUE
    return Status.GOOD
