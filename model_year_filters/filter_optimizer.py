"""
Production filter optimization.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from .models import GenerationSet, YearFilter
from .year_utils import year_span


logger = logging.getLogger(__name__)

# OBD-II is mandatory from the 1996 model year on.
PROTOCOL_FLOOR_YEAR = 1996
FALLBACK_FIRST_YEAR = 2000
FUTURE_YEAR_MARGIN = 5


def year_universe(generations: GenerationSet, today: Optional[date] = None) -> List[int]:
    """List every candidate model year covered by the generations."""
    first = generations.first_year
    if first is None:
        first = FALLBACK_FIRST_YEAR
    last = generations.last_year
    if last is None:
        last = (today or date.today()).year + FUTURE_YEAR_MARGIN
    return year_span(first, last)


def optimize_filter(
    supported_years: Iterable[int],
    unsupported_years: Iterable[int],
    generations: GenerationSet,
    today: Optional[date] = None,
) -> Optional[YearFilter]:
    """Compute the smallest production filter consistent with the evidence.

    A year stays allowed unless it is confirmed unsupported; confirmed support
    outranks a contradicting unsupported entry. Years before the protocol
    floor are never allowed.

    Args:
        supported_years: Confirmed-supported model years
        unsupported_years: Confirmed-unsupported model years
        generations: Generation boundary for the vehicle
        today: Reference date for an open-ended generation span

    Returns:
        The simplest filter reproducing the allowed years, an empty filter
        when every year is allowed, or None when there is no evidence
    """
    supported = {y for y in supported_years if y >= PROTOCOL_FLOOR_YEAR}
    unsupported = set(unsupported_years)

    if not supported and not unsupported:
        return None

    overlap = supported & unsupported
    if overlap:
        logger.warning("Treating contradictory years as supported: %s", sorted(overlap))

    universe = year_universe(generations, today)
    allowed = [
        year
        for year in universe
        if year >= PROTOCOL_FLOOR_YEAR and (year in supported or year not in unsupported)
    ]

    if len(allowed) == len(universe):
        return YearFilter()
    if not allowed:
        logger.warning("No model year in %d-%d is allowed", universe[0], universe[-1])
        return None

    low = allowed[0]
    high = allowed[-1]

    if allowed == [year for year in universe if year >= low]:
        return YearFilter(from_year=low)

    if allowed == [year for year in universe if year <= high]:
        return YearFilter(to_year=high)

    if allowed == year_span(low, high):
        if low == universe[0] and high == universe[-1]:
            return YearFilter()
        return YearFilter(from_year=low, to_year=high)

    return _split_filter(allowed, universe)


def _split_filter(allowed: List[int], universe: List[int]) -> Optional[YearFilter]:
    """Express the allowed years as head range, tail range and middle years."""
    allowed_set = set(allowed)

    to_year = None
    for year in universe:
        if year not in allowed_set:
            break
        to_year = year

    from_year = None
    for year in reversed(universe):
        if year not in allowed_set:
            break
        from_year = year

    middle = tuple(
        year
        for year in allowed
        if (to_year is None or year > to_year) and (from_year is None or year < from_year)
    )

    result = YearFilter(to_year=to_year, from_year=from_year, years=middle or None)
    if result.is_empty:
        return None
    return result
