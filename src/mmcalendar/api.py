from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any, Dict

from .core.config import DEFAULT_CONFIG, CalendarConfig
from .core.time import from_jdn, jdn_to_iso_string, to_jdn
from .core.types import MyanmarDate, MyanmarYearInfo, WatatInfo, WesternDate
from .engines import myanmar as _myanmar
from .engines import western as _western
from .engines.era import lookup
from .engines.watat import check_watat as _check_watat, explain_watat
from .engines.year_info import get_myanmar_year_info as _year_info


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
    return _western.western_to_julian(year, month, day, hour, minute, second, config=config)


def julian_to_western(jdn: float, *, config: CalendarConfig = DEFAULT_CONFIG) -> WesternDate:
    return _western.julian_to_western(jdn, config=config)


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
    return _myanmar.myanmar_to_julian(year, month, day, hour, minute, second, config=config)


def julian_to_myanmar(jdn: float, *, config: CalendarConfig = DEFAULT_CONFIG) -> MyanmarDate:
    return _myanmar.julian_to_myanmar(jdn, config=config)


def western_to_myanmar(
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: int = 0,
    *,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> MyanmarDate:
    jd = _western.western_to_julian(year, month, day, hour, minute, second, config=config)
    return _myanmar.julian_to_myanmar(jd, config=config)


def myanmar_to_western(
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: int = 0,
    *,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> WesternDate:
    jd = _myanmar.myanmar_to_julian(year, month, day, hour, minute, second, config=config)
    return _western.julian_to_western(jd, config=config)


def day_info(d: date, *, config: CalendarConfig = DEFAULT_CONFIG) -> MyanmarDate:
    """Myanmar date of a civil day given as a datetime.date.

    datetime.date is proleptic Gregorian whatever config.calendar_type says.
    """
    local_noon = float(to_jdn(d))
    return _myanmar.julian_to_myanmar(config.local_to_utc(local_noon), config=config)


def to_gregorian(year: int, month: int, day: int) -> date:
    """Proleptic Gregorian datetime.date of a Myanmar date."""
    jd = _myanmar.myanmar_to_julian(year, month, day, config=CalendarConfig(timezone_offset=0.0))
    return from_jdn(int(jd))


def get_myanmar_year_info(year: int) -> MyanmarYearInfo:
    return _year_info(year)


def check_watat(year: int) -> WatatInfo:
    return _check_watat(year)


def explain(year: int) -> Dict[str, Any]:
    """Everything the engine derives for one Myanmar year."""
    info = _year_info(year)
    out = info.to_dict()
    out["tagu_1"] = jdn_to_iso_string(info.first_day_jdn)
    out["waso_full_moon"] = jdn_to_iso_string(info.full_moon_jdn)
    out["era_row"] = asdict(lookup(year))
    out["watat"] = explain_watat(year)
    return out
