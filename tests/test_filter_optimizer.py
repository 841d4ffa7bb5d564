"""Tests for production filter optimization."""

import logging
from datetime import date
from itertools import combinations

from model_year_filters.filter_optimizer import (
    FALLBACK_FIRST_YEAR,
    PROTOCOL_FLOOR_YEAR,
    optimize_filter,
    year_universe,
)
from model_year_filters.models import Generation, GenerationSet, YearFilter
from model_year_filters.predicate import allows


TODAY = date(2026, 1, 1)


def make_generations(first_year=None, last_year=None):
    if first_year is None:
        return GenerationSet()
    return GenerationSet((Generation("test", first_year, last_year),))


def test_suffix_through_open_boundary_uses_from():
    result = optimize_filter(
        range(2018, 2025), range(2007, 2018), make_generations(2007, None), today=TODAY
    )

    assert result == YearFilter(from_year=2018)


def test_unknown_years_stay_allowed():
    result = optimize_filter(range(2018, 2025), [], make_generations(2007, 2030))

    assert result == YearFilter()


def test_prefix_uses_to():
    result = optimize_filter(range(2007, 2020), range(2020, 2031), make_generations(2007, 2030))

    assert result == YearFilter(to_year=2019)


def test_inner_range_uses_from_and_to():
    unsupported = [2007, 2008, 2009, 2025, 2026, 2027, 2028, 2029, 2030]

    result = optimize_filter([2015], unsupported, make_generations(2007, 2030))

    assert result == YearFilter(from_year=2010, to_year=2024)
    assert not result.is_or_range


def test_disallowed_middle_uses_or_form():
    result = optimize_filter([2010], range(2012, 2016), make_generations(2007, 2030))

    assert result == YearFilter(to_year=2011, from_year=2016)
    assert result.is_or_range


def test_or_form_with_middle_years():
    result = optimize_filter([2012], [2010, 2011, 2013, 2014], make_generations(2007, 2030))

    assert result.to_dict() == {"to": 2009, "years": [2012], "from": 2015}


def test_middle_years_only():
    result = optimize_filter([2008], [2007, 2009, 2010, 2012], make_generations(2007, 2012))

    assert result == YearFilter(years=(2008, 2011))
    assert result.is_allow_list


def test_no_evidence_returns_none():
    assert optimize_filter([], [], make_generations(2007, 2030)) is None
    assert optimize_filter([1990, 1995], [], make_generations(2007, 2030)) is None


def test_everything_unsupported_returns_none():
    assert optimize_filter([], range(2007, 2031), make_generations(2007, 2030)) is None


def test_protocol_floor_excludes_early_years():
    result = optimize_filter([1994, 2000], [], make_generations(1990, 2005))

    assert result == YearFilter(from_year=PROTOCOL_FLOOR_YEAR)


def test_supported_wins_over_contradicting_unsupported():
    result = optimize_filter([2010], [2010, 2011], make_generations(2007, 2012))

    assert result == YearFilter(to_year=2010, from_year=2012)


def test_unbounded_generations_use_fallback_span():
    universe = year_universe(make_generations(), today=TODAY)

    assert universe[0] == FALLBACK_FIRST_YEAR
    assert universe[-1] == 2031

    result = optimize_filter([2010], range(2000, 2005), make_generations(), today=TODAY)
    assert result == YearFilter(from_year=2005)


def test_prefers_simplest_form():
    # A suffix could also be written {from, to} with to at the last year.
    result = optimize_filter([], [2007, 2008], make_generations(2007, 2012))

    assert result == YearFilter(from_year=2009)
    assert result.to_year is None


def test_filter_reproduces_every_evidence_pattern():
    generations = make_generations(2010, 2015)
    universe = list(range(2010, 2016))

    for size in range(0, len(universe) + 1):
        for unsupported in combinations(universe, size):
            supported = [y for y in universe if y not in unsupported][:1]
            result = optimize_filter(supported, unsupported, generations)

            if not supported and not unsupported:
                assert result is None
                continue
            if len(unsupported) == len(universe):
                assert result is None
                continue

            assert result is not None
            for year in universe:
                assert allows(year, result) == (year not in unsupported), (unsupported, result)


def test_idempotent():
    args = ([2012], [2010, 2011, 2013], make_generations(2007, 2030))

    assert optimize_filter(*args) == optimize_filter(*args)


def test_contradictory_years_are_reported(caplog):
    with caplog.at_level(logging.WARNING):
        result = optimize_filter([2010], [2010, 2011], make_generations(2007, 2012))

    assert result == YearFilter(to_year=2010, from_year=2012)
    assert "2010" in caplog.text
