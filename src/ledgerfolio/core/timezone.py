"""Time helpers. Timestamps are stored in UTC; ledger dates are plain dates."""

from datetime import date, datetime, time
from typing import Union

import pytz
from dateutil import parser as date_parser
from dateutil.rrule import rrule, DAILY, MONTHLY

UTC = pytz.utc


def now_utc() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)


def today_utc() -> date:
    """Return today's date in UTC."""
    return now_utc().date()


def parse_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a date from a string, date, or datetime.

    Datetimes keep their calendar date; no timezone conversion happens
    because transaction dates are wall-calendar days.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()


def date_list(from_date: date, to_date: date, frequency: str = "all") -> list[date]:
    """
    List calendar dates between two dates, inclusive.

    ``frequency`` is "all" (every day), "month-start" (the 1st of each month)
    or "month-end" (the last day of each month). Returns an empty list when
    ``from_date`` is after ``to_date``.
    """
    if from_date > to_date:
        return []
    start = datetime.combine(from_date, time.min)
    until = datetime.combine(to_date, time.min)
    if frequency == "all":
        rule = rrule(DAILY, dtstart=start, until=until)
    elif frequency == "month-start":
        rule = rrule(MONTHLY, dtstart=start, until=until, bymonthday=1)
    elif frequency == "month-end":
        rule = rrule(MONTHLY, dtstart=start, until=until, bymonthday=-1)
    else:
        raise ValueError(f"Unknown frequency: {frequency}")
    return [occurrence.date() for occurrence in rule]
