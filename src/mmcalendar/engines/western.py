"""
mmcalendar.engines.western
--------------------------
Western date <-> Julian Day Number under the British, Gregorian and Julian
regimes.

The British regime is Julian up to 1752-09-02 and Gregorian from 1752-09-14
(JDN 2361222, configurable); the eleven days in between never existed.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.config import DEFAULT_CONFIG, CalendarConfig
from ..core.errors import InvalidDateError
from ..core.time import (
    check_jdn_range,
    jdn_to_ymd,
    split_day_and_time,
    time_to_day_fraction,
    ymd_to_jdn,
)
from ..core.types import WesternDate

MIN_YEAR, MAX_YEAR = 1, 9999

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Day numbers (noon of the civil day)
# ============================================================

def gregorian_day_number(year: int, month: int, day: int) -> int:
    return ymd_to_jdn(year, month, day)


def julian_day_number(year: int, month: int, day: int) -> int:
    # March-based year so that February falls at the end
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def _julian_ymd(jdn: int) -> Tuple[int, int, int]:
    b = jdn + 1524
    c = math.floor((b - 122.1) / 365.25)
    f = math.floor(365.25 * c)
    e = math.floor((b - f) / 30.6001)
    m = e - 13 if e > 13 else e - 1
    d = b - f - math.floor(30.6001 * e)
    y = c - 4715 if m < 3 else c - 4716
    return y, m, d


# ============================================================
# Leap years and validation
# ============================================================

def is_leap_year(year: int, *, config: CalendarConfig = DEFAULT_CONFIG) -> bool:
    """
    Leap year under the configured regime.

    British years whose February precedes the switch follow the Julian rule.
    """
    julian_rule = config.calendar_type == "julian" or (
        config.calendar_type == "british"
        and julian_day_number(year, 2, 28) < config.gregorian_start
    )
    if julian_rule:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int, *, config: CalendarConfig = DEFAULT_CONFIG) -> int:
    if month == 2 and is_leap_year(year, config=config):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def validate_time(hour: int, minute: int, second: int) -> None:
    if not (0 <= hour <= 23):
        raise InvalidDateError(f"Invalid hour: {hour}")
    if not (0 <= minute <= 59):
        raise InvalidDateError(f"Invalid minute: {minute}")
    if not (0 <= second <= 59):
        raise InvalidDateError(f"Invalid second: {second}")


def validate_western_date(
    year: int, month: int, day: int, *, config: CalendarConfig = DEFAULT_CONFIG
) -> None:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidDateError(f"Invalid Western year: {year}", year=year, month=month, day=day)
    if not (1 <= month <= 12):
        raise InvalidDateError(f"Invalid Western month: {month}", year=year, month=month, day=day)
    max_day = days_in_month(year, month, config=config)
    if not (1 <= day <= max_day):
        raise InvalidDateError(
            f"Invalid Western day: {day} for year {year} month {month} (max {max_day})",
            year=year, month=month, day=day,
        )


# ============================================================
# Forward / inverse
# ============================================================

def _day_number(year: int, month: int, day: int, config: CalendarConfig) -> int:
    if config.calendar_type == "gregorian":
        return gregorian_day_number(year, month, day)
    if config.calendar_type == "julian":
        return julian_day_number(year, month, day)

    jdn = gregorian_day_number(year, month, day)
    if jdn < config.gregorian_start:
        jdn = julian_day_number(year, month, day)
        # dates inside the skipped days collapse onto the first Gregorian day
        if jdn > config.gregorian_start:
            jdn = config.gregorian_start
    return jdn


def western_to_julian(
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: int = 0,
    *,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> float:
    """Western date and local time -> UTC-based JDN."""
    validate_western_date(year, month, day, config=config)
    validate_time(hour, minute, second)

    jd = _day_number(year, month, day, config) + time_to_day_fraction(hour, minute, second)
    jd = config.local_to_utc(jd)
    check_jdn_range(jd)
    return jd


def julian_to_western(jdn: float, *, config: CalendarConfig = DEFAULT_CONFIG) -> WesternDate:
    """UTC-based JDN -> Western date and time in the configured local time zone."""
    check_jdn_range(jdn)
    local = config.utc_to_local(jdn)
    day_number, hour, minute, second = split_day_and_time(local)

    if config.calendar_type == "julian" or (
        config.calendar_type == "british" and day_number < config.gregorian_start
    ):
        y, m, d = _julian_ymd(day_number)
    else:
        y, m, d = jdn_to_ymd(day_number)

    return WesternDate(
        year=y,
        month=m,
        day=d,
        hour=hour,
        minute=minute,
        second=second,
        weekday=(day_number + 2) % 7,
        julian_day_number=local,
    )
