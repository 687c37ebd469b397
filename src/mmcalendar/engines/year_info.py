"""
mmcalendar.engines.year_info
----------------------------
Year boundaries of the Myanmar calendar.

The year type and the first day of a year follow from the Waso full moon of
the nearest preceding watat year. At most three common years separate two
watat years, so the search back is bounded.
"""

from __future__ import annotations

import logging

from ..core.types import MyanmarYearInfo
from .era import FULL_MOON_TO_NEW_YEAR, LUNAR_YEAR_DAYS
from .watat import check_watat

logger = logging.getLogger(__name__)

MAX_COMMON_RUN = 3


def get_myanmar_year_info(year: int) -> MyanmarYearInfo:
    """Year type, Tagu 1 JDN and controlling Waso full moon of a Myanmar year."""
    current = check_watat(year)

    offset = 0
    prev = current
    while offset < MAX_COMMON_RUN:
        offset += 1
        prev = check_watat(year - offset)
        if prev.is_watat:
            break

    watat_error = False
    if current.is_watat:
        gap = (current.full_moon_jdn - prev.full_moon_jdn) % LUNAR_YEAR_DAYS
        year_type = min(gap // 31 + 1, 2)
        full_moon = current.full_moon_jdn
        if gap not in (30, 31):
            watat_error = True
            logger.warning(
                "Inconsistent watat gap of %d days for ME %d (previous watat ME %d)",
                gap, year, year - offset,
            )
    else:
        year_type = 0
        full_moon = prev.full_moon_jdn + LUNAR_YEAR_DAYS * offset

    first_day = prev.full_moon_jdn + LUNAR_YEAR_DAYS * offset - FULL_MOON_TO_NEW_YEAR
    logger.debug("ME %d: type=%d tagu1=%d fm=%d (back %d)", year, year_type, first_day, full_moon, offset)

    return MyanmarYearInfo(
        year=year,
        year_type=year_type,
        is_watat=year_type > 0,
        first_day_jdn=first_day,
        full_moon_jdn=full_moon,
        watat_error=watat_error,
    )


def year_type(year: int) -> int:
    return get_myanmar_year_info(year).year_type


def is_watat_year(year: int) -> bool:
    return get_myanmar_year_info(year).is_watat


def year_start_jdn(year: int) -> int:
    """JDN of Tagu 1 (first day) of the Myanmar year."""
    return get_myanmar_year_info(year).first_day_jdn


def year_length(year: int) -> int:
    """Days in the Myanmar year: 354, 384 (little watat) or 385 (big watat)."""
    yt = year_type(year)
    return LUNAR_YEAR_DAYS + (30 if yt else 0) + yt // 2
