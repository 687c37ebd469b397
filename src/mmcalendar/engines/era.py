"""
mmcalendar.engines.era
----------------------
Historical era constants of the Myanmar calendar.

The watat rule is an astronomical formula whose parameters changed with each
calendar reform, overlaid with year-by-year corrections where recorded
calendars departed from the formula. Both are flattened here into a single
ascending table of half-open Myanmar-year ranges, built once at import.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from ..core.errors import EraTableLookupFailure
from ..core.types import EraConstant

# ============================================================
# ASTRONOMICAL CONSTANTS
# ============================================================

SOLAR_YEAR = 1577917828.0 / 4320000.0  # 365.2587565 days
LUNAR_MONTH = 1577917828.0 / 53433336.0  # 29.53058795 days
MYANMAR_EPOCH = 1954168.050623  # JD of the beginning of ME 0

# Waso full moon to Tagu 1
FULL_MOON_TO_NEW_YEAR = 102
LUNAR_YEAR_DAYS = 354


# ============================================================
# ERA DEFINITIONS
# ============================================================

@dataclass(frozen=True)
class EraDef:
    name: str
    start_year: int
    era_index: float
    watat_offset: float
    num_months: int
    # year -> extra days added to watat_offset
    full_moon_offsets: Tuple[Tuple[int, float], ...] = ()
    # years whose computed watat flag is inverted
    watat_exceptions: Tuple[int, ...] = ()


ERA_DEFS: Tuple[EraDef, ...] = (
    # Makaranta system 1, ME 0 - 797; earlier years resolve here as well
    EraDef(
        "makaranta-1", 0, 1.1, -1.1, -1,
        full_moon_offsets=(
            (205, 1), (246, 1), (471, 1), (572, -1), (651, 1),
            (653, 2), (656, 1), (672, 1), (729, 1), (767, -1),
        ),
    ),
    EraDef(
        "makaranta-2", 798, 1.2, -1.1, -1,
        full_moon_offsets=(
            (813, -1), (849, -1), (851, -1), (854, -1), (927, -1),
            (933, -1), (936, -1), (938, -1), (949, -1), (952, -1),
            (963, -1), (968, -1), (1039, -1),
        ),
    ),
    EraDef(
        "thandeikta", 1100, 1.3, -0.85, -1,
        full_moon_offsets=((1120, 1), (1126, -1), (1150, 1), (1172, -1), (1207, 1)),
        watat_exceptions=(1201, 1202),
    ),
    EraDef(
        "british-colony", 1217, 2, -1, 4,
        full_moon_offsets=((1234, 1), (1261, -1)),
        watat_exceptions=(1263, 1264),
    ),
    EraDef(
        "independence", 1312, 3, -0.5, 8,
        full_moon_offsets=((1377, 1),),
        watat_exceptions=(1344, 1345),
    ),
)


def _expand_era(era: EraDef, end_year: int | None) -> List[EraConstant]:
    base = EraConstant(
        start_year=era.start_year,
        num_months=era.num_months,
        watat_offset=era.watat_offset,
        era_index=era.era_index,
        watat_exception=0,
    )
    fm = dict(era.full_moon_offsets)
    special = set(fm) | set(era.watat_exceptions)

    rows: List[EraConstant] = [base]
    for y in sorted(special):
        if y <= era.start_year or (end_year is not None and y >= end_year):
            raise EraTableLookupFailure(f"Exception year {y} lies outside era '{era.name}'")
        rows.append(replace(
            base,
            start_year=y,
            watat_offset=era.watat_offset + fm.get(y, 0),
            watat_exception=1 if y in era.watat_exceptions else 0,
        ))
        # back to the regular constants, unless the next year is special too
        nxt = y + 1
        if nxt not in special and (end_year is None or nxt < end_year):
            rows.append(replace(base, start_year=nxt))
    return rows


def build_era_table(defs: Sequence[EraDef] = ERA_DEFS) -> Tuple[EraConstant, ...]:
    """Flatten era definitions into an ascending tuple of half-open rows."""
    table: List[EraConstant] = []
    for i, era in enumerate(defs):
        end = defs[i + 1].start_year if i + 1 < len(defs) else None
        table.extend(_expand_era(era, end))
    return tuple(table)


ERA_TABLE: Tuple[EraConstant, ...] = build_era_table()
_STARTS: Tuple[int, ...] = tuple(r.start_year for r in ERA_TABLE)


def lookup(year: int, table: Sequence[EraConstant] = ERA_TABLE) -> EraConstant:
    """Era row whose range contains the given Myanmar year."""
    if not table:
        raise EraTableLookupFailure("Era table is empty")
    if table is ERA_TABLE:
        starts: Sequence[int] = _STARTS
    else:
        starts = [r.start_year for r in table]
    i = bisect_right(starts, year) - 1
    return table[max(i, 0)]


def era_name(year: int) -> str:
    """Name of the calendar era the Myanmar year belongs to."""
    name = ERA_DEFS[0].name
    for era in ERA_DEFS:
        if year >= era.start_year:
            name = era.name
    return name
