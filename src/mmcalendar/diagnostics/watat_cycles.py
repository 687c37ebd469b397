from __future__ import annotations

from typing import Any, Dict

from mmcalendar.engines.year_info import get_myanmar_year_info


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "mmcalendar[diagnostics]"') from e


def watat_years(start_year: int, end_year: int):
    """Myanmar years in [start_year, end_year] that are watat, as an int array."""
    np = _need_numpy()
    if end_year < start_year:
        raise ValueError("end_year must be >= start_year")
    ys = [y for y in range(start_year, end_year + 1) if get_myanmar_year_info(y).is_watat]
    return np.array(ys, dtype=int)


def full_moon_gaps(start_year: int, end_year: int):
    """
    Day gaps between the controlling Waso full moons of consecutive years
    start_year..end_year, as an int array of length end_year - start_year.

    A common year follows 354 days after its predecessor's full moon, a
    watat year 384 or 385.
    """
    np = _need_numpy()
    if end_year <= start_year:
        raise ValueError("end_year must be > start_year")
    fm = np.array(
        [get_myanmar_year_info(y).full_moon_jdn for y in range(start_year, end_year + 1)],
        dtype=np.int64,
    )
    return np.diff(fm)


def gap_summary(start_year: int, end_year: int) -> Dict[str, Any]:
    np = _need_numpy()
    gaps = full_moon_gaps(start_year, end_year)
    values, counts = np.unique(gaps, return_counts=True)
    years = watat_years(start_year, end_year)
    return {
        "start_year": start_year,
        "end_year": end_year,
        "gaps": {int(v): int(c) for v, c in zip(values, counts)},
        "watat_count": int(years.size),
        "watat_intervals": sorted({int(d) for d in np.diff(years)}) if years.size > 1 else [],
    }
