"""
Name: gnsscal
Description: displays a calendar with GNSS week and day-of-year
"""

import argparse
import logging
import sys
from datetime import date

from ._types import HighlightStyle
from .config import CalendarArgumentError, resolve_config
from .layout import render

DESCRIPTION = """\
Displays a calendar similar to 'cal', with the GNSS week in front of every
week and the day-of-year under every day. Without arguments the current
month is shown. With a year only, the whole year is shown.
"""

EPILOG = "Inspired by 'gpscal' created by Dr. Yuki Hatanaka."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gnsscal",
        description=DESCRIPTION,
        epilog=EPILOG,
        usage="%(prog)s [Flags] [[month] year]",
    )
    parser.add_argument(
        "-n",
        dest="highlight",
        action="store_false",
        help="turn off highlight of today",
    )
    parser.add_argument(
        "-3",
        dest="three_month",
        action="store_true",
        help="three-month layout: previous, current and next month",
    )
    parser.add_argument(
        "-u",
        dest="underline",
        action="store_true",
        help="underline today instead of reversing its colors",
    )
    parser.add_argument(
        "-satsys",
        "--satsys",
        default="GPS",
        metavar="SYS",
        help="satellite system of the GNSS week: GPS, QZS, GAL, BDS or GLO (default: GPS)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print debug messages"
    )
    parser.add_argument("args", nargs="*", help="[[month] year]")
    return parser


def main(argv: list[str] | None = None, today: date | None = None) -> int:
    """Parse arguments, print the calendar and return the exit status."""
    parser = build_parser()
    parsed = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if today is None:
        today = date.today()

    style = HighlightStyle.UNDERLINE if parsed.underline else HighlightStyle.REVERSE
    try:
        config = resolve_config(
            parsed.args,
            today,
            sat_sys=parsed.satsys,
            three_month=parsed.three_month,
            highlight=parsed.highlight,
            highlight_style=style,
        )
    except CalendarArgumentError as e:
        parser.error(str(e))

    print(render(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
