# tests/test_config.py

import dataclasses

import pytest

from mmcalendar.core.config import (
    ANCIENT_MYANMAR_TIMEZONE_OFFSET,
    DEFAULT_CONFIG,
    DEFAULT_GREGORIAN_START,
    CalendarConfig,
)
from mmcalendar.core.errors import InvalidConfigurationError, MmCalendarError


def test_defaults():
    assert DEFAULT_CONFIG.calendar_type == "british"
    assert DEFAULT_CONFIG.gregorian_start == DEFAULT_GREGORIAN_START == 2361222
    assert DEFAULT_CONFIG.timezone_offset == 6.5
    assert DEFAULT_CONFIG.sasana_year_type == 0


def test_presets():
    assert CalendarConfig.myanmar_time().timezone_offset == 6.5
    assert CalendarConfig.ancient_myanmar_time().timezone_offset == ANCIENT_MYANMAR_TIMEZONE_OFFSET


@pytest.mark.parametrize(
    "kwargs",
    [
        {"calendar_type": "hebrew"},
        {"sasana_year_type": 3},
        {"sasana_year_type": -1},
        {"timezone_offset": 14.5},
        {"timezone_offset": -15.0},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(InvalidConfigurationError):
        CalendarConfig(**kwargs)


def test_invalid_config_is_value_error():
    with pytest.raises(ValueError):
        CalendarConfig(calendar_type="hebrew")
    assert issubclass(InvalidConfigurationError, MmCalendarError)


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.timezone_offset = 0.0


def test_local_utc_conversion():
    c = CalendarConfig(timezone_offset=6.5)
    assert c.timezone_offset_days == pytest.approx(6.5 / 24.0)
    assert c.local_to_utc(2460311.0) == pytest.approx(2460311.0 - 6.5 / 24.0)
    assert c.utc_to_local(c.local_to_utc(2460311.25)) == pytest.approx(2460311.25)
