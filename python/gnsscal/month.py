"""Single-month GNSS calendar.

Each week takes two lines: the GNSS week number followed by the day numbers,
then the day-of-year of each day underneath.

    GPS           October 2021
    Week   Sun Mon Tue Wed Thu Fri Sat
    2177                         1   2
                               274 275
    2178     3   4   5   6   7   8   9
          276 277 278 279 280 281 282

Week numbers are computed on the first day of the month and on every Sunday.
An epoch that does not fall on a Sunday (GLONASS) can therefore show the same
week number on two consecutive rows.
"""

from datetime import date

from ._types import HighlightStyle, SatSys
from .dates import SATURDAY, day_of_year, month_days, sunday_weekday, weeks_since

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_HEADER = "Week   Sun Mon Tue Wed Thu Fri Sat"

HIGHLIGHT_CODES = {
    HighlightStyle.REVERSE: "\033[7m",
    HighlightStyle.UNDERLINE: "\033[4m",
}
RESET = "\033[0m"

WEEK_FIELD = 6
DAY_FIELD = 4


def month_title(sat_sys: SatSys, year: int, month: int) -> str:
    """Satellite system label followed by the centered month name and year."""
    head = f"{MONTH_NAMES[month - 1]} {year:4d}"
    return f"{sat_sys}{head:>{17 + len(head) // 2}}"


def week_label(d: date, epoch: date) -> str:
    if d < epoch:
        return " " * WEEK_FIELD
    return f"{weeks_since(d, epoch):4d}  "


def day_label(d: date, highlighted: bool, style: HighlightStyle) -> str:
    # The escape codes wrap only the digits so the column width is unchanged.
    if highlighted:
        return f"  {HIGHLIGHT_CODES[style]}{d.day:2d}{RESET}"
    return f"  {d.day:2d}"


def render_month(
    year: int,
    month: int,
    today: date,
    highlight: bool,
    epoch: date,
    sat_sys: SatSys = SatSys.GPS,
    style: HighlightStyle = HighlightStyle.REVERSE,
) -> list[str]:
    """Render one month as a list of lines.

    Args:
        year, month: the month to show
        today: day to highlight when highlight is True
        highlight: whether today is highlighted at all
        epoch: date from which GNSS weeks are counted
        sat_sys: label printed in the title
        style: escape sequence used for the highlight

    Returns:
        Title, weekday header, then a day row and a day-of-year row per week.
    """
    lines = [month_title(sat_sys, year, month), WEEKDAY_HEADER]
    day_row = ""
    doy_row = ""

    for d in month_days(year, month):
        weekday = sunday_weekday(d)
        if d.day == 1 or weekday == 0:
            indent = " " * (DAY_FIELD * weekday)
            day_row += week_label(d, epoch) + indent
            doy_row += " " * WEEK_FIELD + indent

        day_row += day_label(d, highlight and d == today, style)
        doy_row += f" {day_of_year(d):3d}"

        if weekday == SATURDAY:
            lines.extend((day_row, doy_row))
            day_row = ""
            doy_row = ""

    if day_row:
        lines.extend((day_row, doy_row))
    return lines
