"""mmcalendar public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    western_to_julian,
    julian_to_western,
    myanmar_to_julian,
    julian_to_myanmar,
    western_to_myanmar,
    myanmar_to_western,
    day_info,
    to_gregorian,
    get_myanmar_year_info,
    check_watat,
    explain,
)
from .core.config import DEFAULT_CONFIG, CalendarConfig
from .core.errors import (
    MmCalendarError,
    InvalidDateError,
    InvalidMyanmarDateError,
    OutOfSupportedJdnRangeError,
    EraTableLookupFailure,
    InvalidConfigurationError,
)
from .core.types import MyanmarDate, MyanmarYearInfo, WatatInfo, WesternDate
from .engines.myanmar import is_valid_myanmar_date, validate_myanmar_date_strict

__all__ = [
    "western_to_julian",
    "julian_to_western",
    "myanmar_to_julian",
    "julian_to_myanmar",
    "western_to_myanmar",
    "myanmar_to_western",
    "day_info",
    "to_gregorian",
    "get_myanmar_year_info",
    "check_watat",
    "explain",
    "is_valid_myanmar_date",
    "validate_myanmar_date_strict",
    "CalendarConfig",
    "DEFAULT_CONFIG",
    "MyanmarDate",
    "MyanmarYearInfo",
    "WatatInfo",
    "WesternDate",
    "MmCalendarError",
    "InvalidDateError",
    "InvalidMyanmarDateError",
    "OutOfSupportedJdnRangeError",
    "EraTableLookupFailure",
    "InvalidConfigurationError",
]
