"""
mmcalendar.engines.watat
------------------------
Per-year intercalation test.

For a Myanmar year the excess days of the solar year over twelve lunar months
decide whether an intercalary month (second Waso) is inserted. Older eras use
a 19-year Metonic residue instead. The era table supplies the constants and
the historical corrections.
"""

from __future__ import annotations

from typing import Any, Dict

from ..core.time import round_half_up
from ..core.types import WatatInfo
from .era import LUNAR_MONTH, MYANMAR_EPOCH, SOLAR_YEAR, era_name, lookup

# solar twelfth minus lunar month, days
_MONTH_EXCESS = SOLAR_YEAR / 12 - LUNAR_MONTH


def _excess_days(year: int, num_months: int) -> float:
    ta = _MONTH_EXCESS * (12 - num_months)
    ed = (SOLAR_YEAR * (year + 3739)) % LUNAR_MONTH
    if ed < ta:
        ed += LUNAR_MONTH
    return ed


def _metonic_watat(year: int) -> int:
    # intercalary when year mod 19 is one of 2, 5, 7, 10, 13, 15, 18
    return ((year * 7 + 2) % 19) // 12


def check_watat(year: int) -> WatatInfo:
    """Watat status and Waso full moon JDN of a Myanmar year."""
    c = lookup(year)
    ed = _excess_days(year, c.num_months)
    fm = round_half_up(SOLAR_YEAR * year + MYANMAR_EPOCH - ed + 4.5 * LUNAR_MONTH + c.watat_offset)

    if c.era_index >= 2:
        tw = LUNAR_MONTH - _MONTH_EXCESS * c.num_months
        watat = 1 if ed >= tw else 0
    else:
        watat = _metonic_watat(year)

    watat ^= c.watat_exception
    return WatatInfo(year=year, is_watat=bool(watat), full_moon_jdn=fm)


def explain_watat(year: int) -> Dict[str, Any]:
    """Intermediate quantities of check_watat, for diagnostics."""
    c = lookup(year)
    ed = _excess_days(year, c.num_months)
    out: Dict[str, Any] = {
        "year": year,
        "era": era_name(year),
        "constants": {
            "EI": c.era_index,
            "WO": c.watat_offset,
            "NM": c.num_months,
            "EW": c.watat_exception,
        },
        "ta": _MONTH_EXCESS * (12 - c.num_months),
        "excess_days": ed,
    }
    if c.era_index >= 2:
        tw = LUNAR_MONTH - _MONTH_EXCESS * c.num_months
        raw = 1 if ed >= tw else 0
        out["method"] = "excess_days"
        out["tw"] = tw
    else:
        raw = _metonic_watat(year)
        out["method"] = "metonic_cycle"
        out["metonic_residue"] = (year * 7 + 2) % 19
    info = check_watat(year)
    out["watat_raw"] = bool(raw)
    out["is_watat"] = info.is_watat
    out["full_moon_jdn"] = info.full_moon_jdn
    return out
