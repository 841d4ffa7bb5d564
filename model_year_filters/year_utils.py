"""
Shared model-year helpers.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


def coerce_year(value) -> int:
    """Return an integer model year from an int or a numeric string."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid model year: {value!r}")
    if isinstance(value, int):
        year = value
    elif isinstance(value, str) and value.strip().isdigit():
        year = int(value.strip())
    else:
        raise ValueError(f"Invalid model year: {value!r}")
    if year < 0:
        raise ValueError(f"Invalid model year: {value!r}")
    return year


def parse_years(values: Optional[Iterable]) -> List[int]:
    """Coerce a collection of years into a sorted list without duplicates."""
    if not values:
        return []
    return sorted({coerce_year(value) for value in values})


def year_span(first: int, last: int) -> List[int]:
    """Build the inclusive [first, last] list of years."""
    return list(range(first, last + 1))


def format_year_ranges(years: Iterable) -> str:
    """Render years compactly, e.g. ``2015-2018, 2020, 2022-2024``."""
    ordered = parse_years(years)
    if not ordered:
        return ""

    ranges = []
    start = end = ordered[0]
    for year in ordered[1:] + [None]:
        if year is not None and year == end + 1:
            end = year
            continue
        if start == end:
            ranges.append(str(start))
        elif end == start + 1:
            ranges.append(f"{start}, {end}")
        else:
            ranges.append(f"{start}-{end}")
        if year is not None:
            start = end = year
    return ", ".join(ranges)
