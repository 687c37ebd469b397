from __future__ import annotations

import math
from datetime import date
from typing import Tuple

from .errors import OutOfSupportedJdnRangeError

MIN_JDN = 1_000_000.0
MAX_JDN = 5_000_000.0

SECONDS_PER_DAY = 86400


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (year, month, day) -> Julian Day Number (JDN)."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert proleptic Gregorian date to Julian Day Number (JDN)."""
    return ymd_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_ymd(jdn))


def jdn_to_iso_string(jdn: int) -> str:
    """Debug rendering of a JDN as a proleptic Gregorian YYYY-MM-DD string.

    Works outside the range of datetime.date as well.
    """
    year, month, day = jdn_to_ymd(jdn)
    return f"{year}-{month:02d}-{day:02d}"


def round_half_up(x: float) -> int:
    """Round to nearest integer, halves towards +inf.

    The reference tables were computed with this rule; Python's round() is
    banker's rounding and disagrees on exact halves.
    """
    return int(math.floor(x + 0.5))


def jd_to_jdn(jd: float) -> int:
    """Day number of the civil day (midnight to midnight) containing JD."""
    return round_half_up(jd)


def time_to_day_fraction(hour: int, minute: int, second: int) -> float:
    """Noon-based fraction of a day: 12:00:00 -> 0.0, 00:00:00 -> -0.5."""
    return (hour - 12) / 24.0 + minute / 1440.0 + second / 86400.0


def split_day_and_time(jd: float) -> Tuple[int, int, int, int]:
    """
    Split a JD into (day number, hour, minute, second).

    The time of day is rounded to the nearest second; rounding up to
    midnight rolls over into the next day number.
    """
    total = round_half_up((jd + 0.5) * SECONDS_PER_DAY)
    day_number, secs = divmod(total, SECONDS_PER_DAY)
    hour, rem = divmod(secs, 3600)
    minute, second = divmod(rem, 60)
    return day_number, hour, minute, second


def check_jdn_range(jdn: float) -> None:
    if not (MIN_JDN <= jdn <= MAX_JDN):
        raise OutOfSupportedJdnRangeError(jdn, MIN_JDN, MAX_JDN)
