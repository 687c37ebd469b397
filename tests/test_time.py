# tests/test_time.py

import random
from datetime import date, timedelta

import pytest

from mmcalendar.core.errors import OutOfSupportedJdnRangeError
from mmcalendar.core.time import (
    check_jdn_range,
    from_jdn,
    jd_to_jdn,
    jdn_to_iso_string,
    jdn_to_ymd,
    round_half_up,
    split_day_and_time,
    time_to_day_fraction,
    to_jdn,
    ymd_to_jdn,
)


def test_jdn_roundtrip():
    random.seed(0)
    base = date(1900, 1, 1)
    for _ in range(500):
        d = base + timedelta(days=random.randint(0, 200 * 365))
        assert from_jdn(to_jdn(d)) == d


def test_jdn_known():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert to_jdn(date(2024, 5, 22)) == 2460453
    assert from_jdn(2361222) == date(1752, 9, 14)


def test_iso_string():
    assert jdn_to_iso_string(2460025) == "2023-03-21"
    assert jdn_to_iso_string(2451545) == "2000-01-01"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.4999) == 2
    assert jd_to_jdn(2460310.5) == 2460311
    assert jd_to_jdn(2460311.4999) == 2460311


def test_time_fraction():
    assert time_to_day_fraction(12, 0, 0) == 0.0
    assert time_to_day_fraction(0, 0, 0) == -0.5
    assert time_to_day_fraction(18, 30, 0) == pytest.approx(6.5 / 24.0)


def test_split_day_and_time():
    assert split_day_and_time(2460311.0) == (2460311, 12, 0, 0)
    assert split_day_and_time(2460310.5) == (2460311, 0, 0, 0)
    assert split_day_and_time(2460311.0 + 6.5 / 24.0) == (2460311, 18, 30, 0)
    assert split_day_and_time(2460311.0 + 59.6 / 86400.0) == (2460311, 12, 1, 0)


def test_check_jdn_range():
    check_jdn_range(1_000_000.0)
    check_jdn_range(5_000_000.0)
    with pytest.raises(OutOfSupportedJdnRangeError) as exc:
        check_jdn_range(5_000_000.1)
    assert exc.value.jdn == 5_000_000.1


def test_gregorian_helpers_agree():
    from mmcalendar.engines.western import gregorian_day_number

    random.seed(7)
    for _ in range(500):
        jdn = random.randint(2_100_000, 5_000_000)
        y, m, d = jdn_to_ymd(jdn)
        assert ymd_to_jdn(y, m, d) == jdn
        assert gregorian_day_number(y, m, d) == jdn
        assert jdn_to_iso_string(jdn) == from_jdn(jdn).isoformat()
