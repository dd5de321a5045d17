import logging
from datetime import date

import pytest

from gnsscal._types import SatSys
from gnsscal.epochs import (
    DEFAULT_SAT_SYS,
    gnss_week,
    leap_year_date,
    parse_sat_sys,
    resolve_epoch,
)


class TestResolveEpoch:
    @pytest.mark.parametrize(
        "sat_sys, expected",
        [
            (SatSys.GPS, date(1980, 1, 6)),
            (SatSys.QZS, date(1980, 1, 6)),
            (SatSys.GAL, date(1999, 8, 22)),
            (SatSys.BDS, date(2006, 1, 1)),
        ],
    )
    def test_fixed_epochs(self, sat_sys, expected):
        assert resolve_epoch(sat_sys, date(2021, 10, 1)) == expected
        assert resolve_epoch(sat_sys, date(2030, 1, 1)) == expected

    @pytest.mark.parametrize(
        "reference, expected",
        [
            (date(2021, 10, 1), date(2020, 1, 1)),
            (date(2020, 1, 1), date(2020, 1, 1)),
            (date(2023, 12, 31), date(2020, 1, 1)),
            (date(2024, 1, 1), date(2024, 1, 1)),
        ],
    )
    def test_glonass_depends_on_reference(self, reference, expected):
        assert resolve_epoch(SatSys.GLO, reference) == expected


class TestLeapYearDate:
    def test_values(self):
        assert leap_year_date(date(2027, 6, 30)) == date(2024, 1, 1)
        assert leap_year_date(date(2000, 2, 29)) == date(2000, 1, 1)
        assert leap_year_date(date(1981, 1, 1)) == date(1980, 1, 1)


class TestParseSatSys:
    @pytest.mark.parametrize("name", ["GPS", "QZS", "GAL", "BDS", "GLO"])
    def test_known(self, name):
        assert parse_sat_sys(name) == SatSys(name)

    def test_case_insensitive(self):
        assert parse_sat_sys("gal") == SatSys.GAL
        assert parse_sat_sys(" Glo ") == SatSys.GLO

    def test_unknown_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gnsscal.epochs"):
            assert parse_sat_sys("IRN") == DEFAULT_SAT_SYS
        assert "IRN" in caplog.text
        assert caplog.records[0].levelno == logging.WARNING


class TestGnssWeek:
    @pytest.mark.parametrize(
        "sat_sys, expected",
        [
            (SatSys.GPS, 2177),
            (SatSys.QZS, 2177),
            (SatSys.GAL, 1153),
            (SatSys.BDS, 821),
            (SatSys.GLO, 91),
        ],
    )
    def test_october_2021(self, sat_sys, expected):
        assert gnss_week(date(2021, 10, 1), sat_sys) == expected

    def test_before_epoch_is_none(self):
        assert gnss_week(date(1999, 8, 21), SatSys.GAL) is None
        assert gnss_week(date(2005, 12, 31), SatSys.BDS) is None
        assert gnss_week(date(1980, 1, 5), SatSys.GPS) is None

    def test_glonass_restarts_on_leap_year(self):
        assert gnss_week(date(2023, 12, 31), SatSys.GLO) == 208
        assert gnss_week(date(2024, 1, 1), SatSys.GLO) == 0
