"""Resolution of command-line values into a CalendarConfig.

All validation happens here, before anything is rendered.
"""

from collections.abc import Sequence
from datetime import date

from ._types import CalendarConfig, HighlightStyle, Layout
from .epochs import parse_sat_sys, resolve_epoch

MIN_YEAR = 1980
# A year view of MAX_YEAR still needs the first day of the following year.
MAX_YEAR = 9998


class CalendarArgumentError(ValueError):
    """A month or year argument that cannot be shown."""


def parse_year(text: str) -> int:
    try:
        year = int(text)
    except ValueError:
        raise CalendarArgumentError(f"invalid year: {text}") from None
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise CalendarArgumentError(f"invalid year: {text}")
    return year


def parse_month(text: str) -> int:
    try:
        month = int(text)
    except ValueError:
        raise CalendarArgumentError(f"invalid month: {text}") from None
    if not 1 <= month <= 12:
        raise CalendarArgumentError(f"invalid month: {text}")
    return month


def resolve_config(
    args: Sequence[str],
    today: date,
    sat_sys: str = "GPS",
    three_month: bool = False,
    highlight: bool = True,
    highlight_style: HighlightStyle = HighlightStyle.REVERSE,
) -> CalendarConfig:
    """Build the configuration for positional arguments ``[[month] year]``.

    No argument shows the current month, a year alone shows that whole year
    and a month with a year shows that month. ``three_month`` replaces the
    layout with the three months around the reference date.

    Raises:
        CalendarArgumentError: for malformed or out-of-range arguments
    """
    match len(args):
        case 0:
            reference = today
            layout = Layout.ONE_MONTH
        case 1:
            reference = date(parse_year(args[0]), 1, 1)
            layout = Layout.ONE_YEAR
        case 2:
            month = parse_month(args[0])
            year = parse_year(args[1])
            if (year, month) == (today.year, today.month):
                reference = today
            else:
                reference = date(year, month, 1)
            layout = Layout.ONE_MONTH
        case _:
            raise CalendarArgumentError(f"too many arguments: {' '.join(args)}")

    if three_month:
        layout = Layout.THREE_MONTH

    system = parse_sat_sys(sat_sys)
    return CalendarConfig(
        reference_date=reference,
        today=today,
        sat_sys=system,
        epoch=resolve_epoch(system, reference),
        layout=layout,
        highlight=highlight,
        highlight_style=highlight_style,
    )
