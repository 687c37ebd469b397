# tests/test_diagnostics.py

import pytest

np = pytest.importorskip("numpy")

from mmcalendar.diagnostics.watat_cycles import full_moon_gaps, gap_summary, watat_years


def test_watat_years():
    assert watat_years(1370, 1400).tolist() == [
        1372, 1374, 1377, 1380, 1382, 1385, 1388, 1391, 1393, 1396, 1399,
    ]


def test_full_moon_gaps():
    gaps = full_moon_gaps(1384, 1387)
    assert gaps.tolist() == [385, 354, 354]


def test_gap_summary_modern_century():
    s = gap_summary(1300, 1400)
    assert s["gaps"] == {354: 63, 384: 17, 385: 20}
    assert s["watat_count"] == 37
    assert s["watat_intervals"] == [2, 3]


def test_bad_ranges():
    with pytest.raises(ValueError):
        watat_years(1400, 1300)
    with pytest.raises(ValueError):
        full_moon_gaps(1385, 1385)
