"""Calendar date arithmetic: day-of-year, month boundaries and week counts.

All values are plain ``datetime.date`` objects. There is no time of day and
no time zone involved anywhere.
"""

from collections.abc import Iterator
from datetime import date, timedelta

DAYS_PER_WEEK = 7
SUNDAY = 0
SATURDAY = 6

ONE_DAY = timedelta(days=1)


def day_of_year(d: date) -> int:
    """Return the 1-based ordinal of d within its year (1-366)."""
    return (d - date(d.year, 1, 1)).days + 1


def weeks_since(d: date, epoch: date) -> int:
    """Number of complete weeks from epoch to d.

    Negative for dates before the epoch; callers render those as blanks.
    """
    return (d - epoch).days // DAYS_PER_WEEK


def sunday_weekday(d: date) -> int:
    """Weekday with Sunday as 0 and Saturday as 6."""
    return d.isoweekday() % 7


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def first_of_next_month(d: date) -> date:
    """First day of the month after d's month."""
    if d.month == 12:
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def first_of_previous_month(d: date) -> date:
    """First day of the month before d's month."""
    if d.month == 1:
        return date(d.year - 1, 12, 1)
    return date(d.year, d.month - 1, 1)


def month_days(year: int, month: int) -> Iterator[date]:
    """Yield every day of the given month in order."""
    d = date(year, month, 1)
    end = first_of_next_month(d)
    while d < end:
        yield d
        d += ONE_DAY
