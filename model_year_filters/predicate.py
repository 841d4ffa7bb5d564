"""
Year filter semantics.
"""

from __future__ import annotations

from typing import Optional

from .models import YearFilter


def allows(year: int, year_filter: Optional[YearFilter]) -> bool:
    """Return True if ``year_filter`` permits ``year``.

    The allow-list always wins. A ``from``/``to`` pair is read as a single
    range when ``from <= to`` and as "up to ``to`` or from ``from`` on" when
    ``to < from``. An allow-list without bounds permits only its own years.
    """
    if year_filter is None:
        return True

    if year_filter.years is not None and year in year_filter.years:
        return True

    to_year = year_filter.to_year
    from_year = year_filter.from_year

    if to_year is not None and from_year is not None:
        if to_year < from_year:
            return year <= to_year or year >= from_year
        return from_year <= year <= to_year
    if from_year is not None:
        return year >= from_year
    if to_year is not None:
        return year <= to_year
    if year_filter.years is not None:
        return False
    return True
