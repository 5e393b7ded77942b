from typing import Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def days_between(start: Union[DateLike, int, float], end: Union[DateLike, int, float]) -> float:
    """
    Signed number of days from start to end.
    Plain numbers are taken as day offsets, so days_between(0, 365) == 365.
    """
    if isinstance(start, (int, float)) and isinstance(end, (int, float)):
        if isinstance(start, bool) or isinstance(end, bool):
            raise TypeError("day offsets must be numbers, not bool")
        return end - start
    return (to_date(end) - to_date(start)).days


def add_terms(start: DateLike, terms: int, days_per_term: int = 365) -> date:
    """
    End date of a window holding `terms` whole terms of `days_per_term` days.
    """
    return to_date(start) + relativedelta(days=terms * days_per_term)
