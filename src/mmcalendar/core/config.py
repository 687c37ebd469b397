from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import InvalidConfigurationError

CalendarType = Literal["british", "gregorian", "julian"]

CALENDAR_TYPES = ("british", "gregorian", "julian")

# 1752-09-14, first Gregorian day in the British Empire
DEFAULT_GREGORIAN_START = 2361222

# Myanmar Time, UTC+6:30
MYANMAR_TIMEZONE_OFFSET = 6.5
# Local mean time of old Mandalay, UTC+6:24:47
ANCIENT_MYANMAR_TIMEZONE_OFFSET = 6.41306


@dataclass(frozen=True)
class CalendarConfig:
    """
    Conversion settings passed explicitly into every conversion call.

    calendar_type:
        "british"   Julian before gregorian_start, Gregorian from it on (default)
        "gregorian" proleptic Gregorian
        "julian"    proleptic Julian
    gregorian_start:
        JDN of the first Gregorian day for the British regime.
    timezone_offset:
        Hours east of UTC. Local dates are normalised to UTC-based JDN.
    sasana_year_type:
        0  Sasana year follows the solar year only
        1  late Tagu/Kason (months 13, 14) already count as the next Sasana year
        2  Sasana year starts on Kason full moon
    """
    calendar_type: CalendarType = "british"
    gregorian_start: int = DEFAULT_GREGORIAN_START
    timezone_offset: float = MYANMAR_TIMEZONE_OFFSET
    sasana_year_type: int = 0

    def __post_init__(self) -> None:
        if self.calendar_type not in CALENDAR_TYPES:
            raise InvalidConfigurationError(
                f"calendar_type must be one of {CALENDAR_TYPES}, got {self.calendar_type!r}"
            )
        if self.sasana_year_type not in (0, 1, 2):
            raise InvalidConfigurationError(
                f"sasana_year_type must be 0, 1 or 2, got {self.sasana_year_type!r}"
            )
        if not (-14.0 <= self.timezone_offset <= 14.0):
            raise InvalidConfigurationError(
                f"timezone_offset must be within [-14, 14] hours, got {self.timezone_offset!r}"
            )

    @classmethod
    def myanmar_time(cls) -> "CalendarConfig":
        return cls(timezone_offset=MYANMAR_TIMEZONE_OFFSET)

    @classmethod
    def ancient_myanmar_time(cls) -> "CalendarConfig":
        return cls(timezone_offset=ANCIENT_MYANMAR_TIMEZONE_OFFSET)

    @property
    def timezone_offset_days(self) -> float:
        return self.timezone_offset / 24.0

    def local_to_utc(self, local_jdn: float) -> float:
        return local_jdn - self.timezone_offset_days

    def utc_to_local(self, utc_jdn: float) -> float:
        return utc_jdn + self.timezone_offset_days


DEFAULT_CONFIG = CalendarConfig()
