"""Frozen dataclasses and enums shared by the calendar modules."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class SatSys(StrEnum):
    GPS = "GPS"
    QZS = "QZS"
    GAL = "GAL"
    BDS = "BDS"
    GLO = "GLO"


class Layout(StrEnum):
    ONE_MONTH = "one-month"
    THREE_MONTH = "three-month"
    ONE_YEAR = "one-year"


class HighlightStyle(StrEnum):
    REVERSE = "reverse"
    UNDERLINE = "underline"


@dataclass(frozen=True)
class CalendarConfig:
    reference_date: date
    today: date
    sat_sys: SatSys
    epoch: date
    layout: Layout = Layout.ONE_MONTH
    highlight: bool = True
    highlight_style: HighlightStyle = HighlightStyle.REVERSE
