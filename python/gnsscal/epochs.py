"""Week-counting epochs of the supported satellite systems.

GPS, QZSS, Galileo and BeiDou count weeks from a fixed date. GLONASS
restarts its count on January 1 of every leap year, so its epoch depends on
the date being looked at.
"""

import logging
from datetime import date

from ._types import SatSys
from .dates import weeks_since

logger = logging.getLogger(__name__)

GPS_EPOCH = date(1980, 1, 6)
QZSS_EPOCH = date(1980, 1, 6)
GALILEO_EPOCH = date(1999, 8, 22)
BEIDOU_EPOCH = date(2006, 1, 1)

DEFAULT_SAT_SYS = SatSys.GPS

FIXED_EPOCHS = {
    SatSys.GPS: GPS_EPOCH,
    SatSys.QZS: QZSS_EPOCH,
    SatSys.GAL: GALILEO_EPOCH,
    SatSys.BDS: BEIDOU_EPOCH,
}


def leap_year_date(d: date) -> date:
    """January 1 of the most recent year divisible by 4, at or before d."""
    return date(d.year - d.year % 4, 1, 1)


def resolve_epoch(sat_sys: SatSys, reference: date) -> date:
    """Return the date from which sat_sys counts weeks, as seen from reference."""
    match sat_sys:
        case SatSys.GLO:
            return leap_year_date(reference)
        case SatSys.GPS | SatSys.QZS | SatSys.GAL | SatSys.BDS:
            return FIXED_EPOCHS[sat_sys]
        case _:
            raise ValueError(f"Unknown satellite system: {sat_sys}")


def parse_sat_sys(name: str) -> SatSys:
    """Look up a satellite system by name, falling back to GPS.

    Unknown names are not an error: a warning is logged and the default
    system is used instead.
    """
    try:
        return SatSys(name.strip().upper())
    except ValueError:
        logger.warning(
            "unknown satellite system '%s', using %s instead", name, DEFAULT_SAT_SYS
        )
        return DEFAULT_SAT_SYS


def gnss_week(d: date, sat_sys: SatSys) -> int | None:
    """GNSS week of d for sat_sys, or None if d precedes the epoch."""
    epoch = resolve_epoch(sat_sys, d)
    if d < epoch:
        return None
    return weeks_since(d, epoch)
