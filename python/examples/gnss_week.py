"""Print GNSS week and day-of-year for a date, then its three-month calendar."""

from datetime import date

from gnsscal._types import SatSys
from gnsscal.dates import day_of_year
from gnsscal.epochs import gnss_week
from gnsscal.layout import three_month_lines


def main():
    d = date(2021, 10, 16)

    print("=== GNSS Calendar Example ===")
    print(f"Date: {d}")
    print(f"Day of year: {day_of_year(d)}")
    print()
    print("--- GNSS Week ---")
    for sat_sys in SatSys:
        week = gnss_week(d, sat_sys)
        print(f"{sat_sys}: {'-' if week is None else week}")
    print()
    for line in three_month_lines(d, d, True, SatSys.GPS):
        print(line.rstrip())


if __name__ == "__main__":
    main()
