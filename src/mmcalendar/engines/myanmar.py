"""
mmcalendar.engines.myanmar
--------------------------
Myanmar date <-> Julian Day Number.

Month numbering: 0 = First Waso (big and little watat years only), 1 = Tagu
.. 12 = Tabaung, 13/14 = late Tagu/Kason, i.e. the months after Tabaung that
spill past the solar new year. Days run 1..30 within a month; the first 15
days are waxing, the rest waning.

Month lengths alternate 30/29 (odd/even month numbers), with Nayon (3)
gaining a day in big watat years. Day counts within the year use the
accumulated-days approximation floor(29.544 * m - 29.26).
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.config import DEFAULT_CONFIG, CalendarConfig
from ..core.errors import InvalidMyanmarDateError, OutOfSupportedJdnRangeError
from ..core.time import MAX_JDN, check_jdn_range, round_half_up, time_to_day_fraction
from ..core.types import MyanmarDate
from .era import LUNAR_YEAR_DAYS, MYANMAR_EPOCH, SOLAR_YEAR
from .western import validate_time
from .year_info import get_myanmar_year_info

MIN_YEAR, MAX_YEAR = 1, 9999
MIN_MONTH, MAX_MONTH = 0, 14
MIN_DAY, MAX_DAY = 1, 30

# Myanmar year + offset = Sasana (Buddhist era) year
BUDDHIST_ERA_OFFSET = 1182

TAGU, KASON, NAYON, WASO = 1, 2, 3, 4
FULL_MOON_DAY = 15

# first local day number whose solar year is ME 1 (1954534)
MIN_DAY_NUMBER = math.ceil(MYANMAR_EPOCH + SOLAR_YEAR * MIN_YEAR + 0.5)


# ============================================================
# Month-level helpers
# ============================================================

def month_length(month: int, year_type: int) -> int:
    """Days in a month (1..12 numbering, 0 for First Waso)."""
    length = 30 - month % 2
    if month == NAYON:
        length += year_type // 2
    return length


def moon_phase(day: int, month: int, year_type: int) -> int:
    """0=waxing, 1=full moon, 2=waning, 3=new moon."""
    return _phase(day, month_length(month, year_type))


def _phase(day: int, mlen: int) -> int:
    return (day + 1) // 16 + day // 16 + day // mlen


def fortnight_day(day: int) -> int:
    """Day within the waxing or waning fortnight, 1..15."""
    return day - 15 * (day // 16)


def sasana_year(year: int, month: int, day: int, sasana_year_type: int = 0) -> int:
    """
    Sasana (Buddhist era) year of a Myanmar date.

    month uses the full numbering (13/14 for late Tagu/Kason).
    """
    offset = BUDDHIST_ERA_OFFSET
    if sasana_year_type == 1:
        if month >= 13:
            offset += 1
    elif sasana_year_type == 2:
        if month == TAGU or (month == KASON and day < FULL_MOON_DAY):
            offset -= 1
    return year + offset


# ============================================================
# Validation
# ============================================================

def validate_myanmar_date(year: int, month: int, day: int) -> None:
    """
    Range check of date components only.

    Combinations that never occur (day 30 of a 29-day month, First Waso in a
    common year) pass; see is_valid_myanmar_date for the strict check.
    """
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidMyanmarDateError(
            f"Myanmar year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}",
            year=year, month=month, day=day,
        )
    if not (MIN_MONTH <= month <= MAX_MONTH):
        raise InvalidMyanmarDateError(
            f"Myanmar month must be between {MIN_MONTH} and {MAX_MONTH}, got {month}",
            year=year, month=month, day=day,
        )
    if not (MIN_DAY <= day <= MAX_DAY):
        raise InvalidMyanmarDateError(
            f"Myanmar day must be between {MIN_DAY} and {MAX_DAY}, got {day}",
            year=year, month=month, day=day,
        )


def is_valid_myanmar_date(year: int, month: int, day: int) -> bool:
    """True iff the date exists, i.e. survives a round trip through its JDN."""
    try:
        validate_myanmar_date(year, month, day)
    except InvalidMyanmarDateError:
        return False
    back = _jdn_to_myanmar_ymd(_myanmar_day_number(year, month, day))
    return back == (year, month, day)


def validate_myanmar_date_strict(year: int, month: int, day: int) -> None:
    validate_myanmar_date(year, month, day)
    if not is_valid_myanmar_date(year, month, day):
        raise InvalidMyanmarDateError(
            f"Myanmar date {year}/{month}/{day} does not exist in the calendar",
            year=year, month=month, day=day,
        )


# ============================================================
# Forward: Myanmar date -> JDN
# ============================================================

def _myanmar_day_number(year: int, month: int, day: int) -> int:
    """Integer local JDN of a (range-checked) Myanmar date."""
    yi = get_myanmar_year_info(year)

    month_type = month // 13
    mm = month % 13 + month_type
    b = yi.year_type // 2
    c = 1 if yi.year_type == 0 else 0

    mlen = month_length(mm, yi.year_type)
    mp = _phase(day, mlen)
    fd = fortnight_day(day)

    # day within month, rebuilt from (moon phase, fortnight day)
    m1 = mp % 2
    m2 = mp // 2
    md = m1 * (15 + m2 * (mlen - 15)) + (1 - m1) * (fd + 15 * m2)

    # shift so that First Waso sits between Nayon and Waso
    am = mm + 4 - ((mm + 15) // 16) * 4 + (mm + 12) // 16

    dd = (
        md
        + math.floor(29.544 * am - 29.26)
        - c * ((am + 11) // 16) * 30
        + b * ((am + 12) // 16)
    )
    dd += month_type * (LUNAR_YEAR_DAYS + (1 - c) * 30 + b)
    return dd + yi.first_day_jdn - 1


def myanmar_to_julian(
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: int = 0,
    *,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> float:
    """Myanmar date and local time -> UTC-based JDN."""
    validate_myanmar_date(year, month, day)
    validate_time(hour, minute, second)

    jd = _myanmar_day_number(year, month, day) + time_to_day_fraction(hour, minute, second)
    jd = config.local_to_utc(jd)
    check_jdn_range(jd)
    return jd


# ============================================================
# Inverse: JDN -> Myanmar date
# ============================================================

def _decode_day_number(jdn: int) -> Tuple[int, int, int, int, int, int]:
    """Local day number -> (year, month, day, year_type, month_type, month_length)."""
    year = math.floor((jdn - 0.5 - MYANMAR_EPOCH) / SOLAR_YEAR)
    yi = get_myanmar_year_info(year)
    dd = jdn - yi.first_day_jdn + 1
    # solar estimate ran ahead of Tagu 1: the day closes the previous year
    while dd < 1:
        year -= 1
        yi = get_myanmar_year_info(year)
        dd = jdn - yi.first_day_jdn + 1

    b = yi.year_type // 2
    c = 1 if yi.year_type == 0 else 0
    ylen = LUNAR_YEAR_DAYS + (1 - c) * 30 + b

    # days past the year length belong to late Tagu/Kason
    month_type = (dd - 1) // ylen
    dd -= month_type * ylen

    a = (dd + 423) // 512
    mm = math.floor((dd - b * a + c * a * 30 + 29.26) / 29.544)
    e = (mm + 12) // 16
    f = (mm + 11) // 16
    md = dd - math.floor(29.544 * mm - 29.26) - b * e + c * f * 30
    mm += f * 3 - e * 4

    mlen = month_length(mm, yi.year_type)
    return year, mm + 12 * month_type, md, yi.year_type, month_type, mlen


def _jdn_to_myanmar_ymd(jdn: int) -> Tuple[int, int, int]:
    year, month, day, _, _, _ = _decode_day_number(jdn)
    return year, month, day


def julian_to_myanmar(jdn: float, *, config: CalendarConfig = DEFAULT_CONFIG) -> MyanmarDate:
    """UTC-based JDN -> Myanmar date in the configured local time zone."""
    check_jdn_range(jdn)
    local = config.utc_to_local(jdn)
    day_number = round_half_up(local)
    if day_number < MIN_DAY_NUMBER:
        raise OutOfSupportedJdnRangeError(day_number, MIN_DAY_NUMBER, MAX_JDN)

    year, month, day, yt, month_type, mlen = _decode_day_number(day_number)

    return MyanmarDate(
        year=year,
        month=month,
        day=day,
        year_type=yt,
        moon_phase=_phase(day, mlen),
        fortnight_day=fortnight_day(day),
        weekday=(day_number + 2) % 7,
        sasana_year=sasana_year(year, month, day, config.sasana_year_type),
        month_length=mlen,
        month_type=month_type,
        julian_day_number=local,
    )
