"""
Debug filter synthesis.

A command's debug filter marks the model years whose support is still
uncertain: permitted by the command's production filter and the generation
boundary, but not yet confirmed by a passing test. Those years keep being
probed by exploratory tests until the evidence settles them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from .models import GenerationSet, YearFilter
from .predicate import allows


logger = logging.getLogger(__name__)


def effective_year_range(
    generations: GenerationSet,
    command_filter: Optional[YearFilter] = None,
) -> Tuple[Optional[int], Optional[int]]:
    """Intersect the generation boundary with the command's own range.

    ``None`` marks an unbounded side. An OR-form filter (``to < from``)
    describes two disjoint ranges and does not tighten the boundary.
    """
    first = generations.first_year
    last = generations.last_year
    if command_filter is None:
        return first, last

    from_year = command_filter.from_year
    to_year = command_filter.to_year

    if from_year is not None and to_year is not None:
        if command_filter.is_or_range:
            return first, last
        first = from_year if first is None else max(first, from_year)
        last = to_year if last is None else min(last, to_year)
    elif from_year is not None:
        first = from_year if first is None else max(first, from_year)
    elif to_year is not None:
        last = to_year if last is None else min(last, to_year)
    return first, last


def _clamp(year: int, first: Optional[int], last: Optional[int]) -> int:
    if first is not None and year < first:
        year = first
    if last is not None and year > last:
        year = last
    return year


def synthesize_debug_filter(
    supported_years: Iterable[int],
    generations: GenerationSet,
    command_filter: Optional[YearFilter] = None,
) -> Optional[YearFilter]:
    """Compute the minimal filter covering the years still worth probing.

    Args:
        supported_years: Model years in which the command is confirmed to work
        generations: Generation boundary for the vehicle
        command_filter: The command's production filter, if any

    Returns:
        The debug filter, an empty filter when nothing is left to probe, or
        None when there is no confirmed support to anchor a range to
    """
    supported = set(supported_years)
    if not supported:
        return None

    if command_filter is not None and command_filter.is_allow_list:
        pending = tuple(y for y in command_filter.years if y not in supported)
        logger.debug(
            "Allow-list filter %s: %d of %d years unconfirmed",
            command_filter.years, len(pending), len(command_filter.years),
        )
        return YearFilter(years=pending) if pending else YearFilter()

    min_year = min(supported)
    max_year = max(supported)

    eff_first, eff_last = effective_year_range(generations, command_filter)
    min_year = _clamp(min_year, eff_first, eff_last)
    max_year = _clamp(max_year, eff_first, eff_last)

    to_year = None
    head = min_year - 1
    if (eff_first is None or head >= eff_first) and allows(head, command_filter):
        to_year = head

    from_year = None
    tail = max_year + 1
    if (eff_last is None or tail <= eff_last) and allows(tail, command_filter):
        from_year = tail

    # Unconfirmed years sandwiched between confirmed ones.
    gap_years = tuple(
        year
        for year in range(min_year + 1, max_year)
        if year not in supported and allows(year, command_filter)
    )

    result = YearFilter(to_year=to_year, from_year=from_year, years=gap_years or None)
    logger.debug(
        "Debug filter for supported %d-%d within [%s, %s]: %s",
        min(supported), max(supported), eff_first, eff_last, result.to_dict(),
    )
    return result
