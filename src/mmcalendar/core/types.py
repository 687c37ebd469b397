from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class WesternDate:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int  # 0=Saturday .. 6=Friday
    julian_day_number: float  # local (timezone-adjusted) JD


@dataclass(frozen=True)
class MyanmarDate:
    year: int
    month: int  # 0=First Waso, 1..12, 13/14=late Tagu/Kason
    day: int  # 1..30
    year_type: int  # 0=common, 1=little watat, 2=big watat
    moon_phase: int  # 0=waxing, 1=full, 2=waning, 3=new
    fortnight_day: int  # 1..15
    weekday: int  # 0=Saturday .. 6=Friday
    sasana_year: int
    month_length: int
    month_type: int  # 0=first occurrence, 1=late
    julian_day_number: float  # local (timezone-adjusted) JD


@dataclass(frozen=True)
class EraConstant:
    """One row of the era table, valid from start_year up to the next row."""
    start_year: int
    num_months: int  # NM
    watat_offset: float  # WO, days
    era_index: float  # EI
    watat_exception: int = 0  # EW, XORed into the computed watat flag


@dataclass(frozen=True)
class WatatInfo:
    year: int
    is_watat: bool
    full_moon_jdn: int  # Waso (second Waso in watat years) full moon


@dataclass(frozen=True)
class MyanmarYearInfo:
    year: int
    year_type: int
    is_watat: bool
    first_day_jdn: int  # Tagu 1
    full_moon_jdn: int  # controlling Waso full moon
    watat_error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MyanmarYearInfo":
        return cls(
            year=int(data["year"]),
            year_type=int(data["year_type"]),
            is_watat=bool(data["is_watat"]),
            first_day_jdn=int(data["first_day_jdn"]),
            full_moon_jdn=int(data["full_moon_jdn"]),
            watat_error=bool(data.get("watat_error", False)),
        )
