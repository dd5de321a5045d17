"""Three-month and full-year compositions, and layout dispatch."""

import logging
from datetime import date

from ._types import CalendarConfig, HighlightStyle, Layout, SatSys
from .dates import first_of_month, first_of_next_month, first_of_previous_month
from .epochs import resolve_epoch
from .grid import TextGrid, vstack
from .month import render_month

logger = logging.getLogger(__name__)

MONTH_GRID = TextGrid()

# Center months of the four three-month rows of a year view.
QUARTER_ANCHORS = (2, 5, 8, 11)


def three_month_lines(
    reference: date,
    today: date,
    highlight: bool,
    sat_sys: SatSys,
    style: HighlightStyle = HighlightStyle.REVERSE,
) -> list[str]:
    """Previous, current and next month of reference, side by side.

    Each panel resolves its own epoch from its first day, so a GLONASS view
    spanning a leap year boundary restarts the week count in the new panel.
    """
    blocks = []
    for start in (
        first_of_previous_month(reference),
        first_of_month(reference),
        first_of_next_month(reference),
    ):
        epoch = resolve_epoch(sat_sys, start)
        blocks.append(
            render_month(
                start.year, start.month, today, highlight, epoch, sat_sys, style
            )
        )
    return MONTH_GRID.hstack(blocks)


def year_lines(
    year: int,
    today: date,
    highlight: bool,
    sat_sys: SatSys,
    style: HighlightStyle = HighlightStyle.REVERSE,
) -> list[str]:
    """Twelve months as four three-month rows separated by blank lines.

    Only the row holding today's month keeps highlighting enabled.
    """
    rows = []
    for anchor in QUARTER_ANCHORS:
        holds_today = today.year == year and abs(today.month - anchor) <= 1
        rows.append(
            three_month_lines(
                date(year, anchor, 1), today, highlight and holds_today, sat_sys, style
            )
        )
    return vstack(rows)


def calendar_lines(config: CalendarConfig) -> list[str]:
    """Lines of the layout selected by config."""
    ref = config.reference_date
    logger.debug("rendering %s layout for %s (%s)", config.layout, ref, config.sat_sys)
    match config.layout:
        case Layout.ONE_MONTH:
            return render_month(
                ref.year,
                ref.month,
                config.today,
                config.highlight,
                config.epoch,
                config.sat_sys,
                config.highlight_style,
            )
        case Layout.THREE_MONTH:
            return three_month_lines(
                ref,
                config.today,
                config.highlight,
                config.sat_sys,
                config.highlight_style,
            )
        case Layout.ONE_YEAR:
            return year_lines(
                ref.year,
                config.today,
                config.highlight,
                config.sat_sys,
                config.highlight_style,
            )
        case _:
            raise ValueError(f"Unknown layout: {config.layout}")


def render(config: CalendarConfig) -> str:
    """The complete calendar as one newline-separated string."""
    return "\n".join(calendar_lines(config))
