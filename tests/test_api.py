# tests/test_api.py

import dataclasses
from datetime import date

import pytest

import mmcalendar as mm
from mmcalendar.engines.era import lookup


def test_public_surface():
    for name in mm.__all__:
        assert hasattr(mm, name), name


def test_western_to_myanmar_full_moon():
    md = mm.western_to_myanmar(2024, 5, 22)
    assert (md.year, md.month, md.day) == (1386, 2, 15)
    assert md.moon_phase == 1
    assert md.sasana_year == 2568


def test_myanmar_to_western():
    w = mm.myanmar_to_western(1386, 2, 15)
    assert (w.year, w.month, w.day) == (2024, 5, 22)
    assert (w.hour, w.minute, w.second) == (12, 0, 0)

    w = mm.myanmar_to_western(1385, 0, 16)
    assert (w.year, w.month, w.day) == (2023, 7, 3)


def test_conversions_are_deterministic():
    a = mm.western_to_myanmar(2024, 1, 4)
    b = mm.western_to_myanmar(2024, 1, 4)
    assert a == b
    assert (a.year, a.month, a.day, a.fortnight_day) == (1385, 9, 23, 8)


def test_day_info():
    md = mm.day_info(date(2024, 5, 22))
    assert (md.year, md.month, md.day) == (1386, 2, 15)
    md = mm.day_info(date(2000, 1, 1), config=mm.CalendarConfig(timezone_offset=0.0))
    assert (md.year, md.month, md.day) == (1361, 9, 25)


def test_to_gregorian():
    assert mm.to_gregorian(1386, 2, 15) == date(2024, 5, 22)
    assert mm.to_gregorian(1385, 4, 15) == date(2023, 8, 1)
    assert mm.to_gregorian(1385, 7, 15) == date(2023, 10, 29)
    with pytest.raises(mm.InvalidMyanmarDateError):
        mm.to_gregorian(1385, 15, 1)


def test_year_info_and_watat():
    info = mm.get_myanmar_year_info(1385)
    assert isinstance(info, mm.MyanmarYearInfo)
    assert info.year_type == 2
    assert mm.check_watat(1385).is_watat


def test_explain():
    out = mm.explain(1385)
    assert out["year_type"] == 2
    assert out["tagu_1"] == "2023-03-21"
    assert out["waso_full_moon"] == "2023-08-01"
    assert out["era_row"]["era_index"] == 3
    assert out["era_row"] == dataclasses.asdict(lookup(1385))
    assert set(out["era_row"]) == {"start_year", "num_months", "watat_offset", "era_index", "watat_exception"}
    assert out["watat"]["method"] == "excess_days"


def test_error_hierarchy():
    for cls in (
        mm.InvalidDateError,
        mm.InvalidMyanmarDateError,
        mm.OutOfSupportedJdnRangeError,
        mm.EraTableLookupFailure,
        mm.InvalidConfigurationError,
    ):
        assert issubclass(cls, mm.MmCalendarError)
