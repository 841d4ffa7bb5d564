"""
Core data models for model-year filters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from .year_utils import coerce_year, parse_years


@dataclass(frozen=True)
class YearFilter:
    """Year constraint attached to a command.

    ``to_year`` bounds a head range, ``from_year`` bounds a tail range and
    ``years`` is an explicit allow-list. A missing field leaves that
    dimension unconstrained, so ``YearFilter()`` allows every year.
    """

    to_year: Optional[int] = None
    from_year: Optional[int] = None
    years: Optional[Tuple[int, ...]] = None

    def __post_init__(self) -> None:
        if self.years is not None:
            normalized = tuple(parse_years(self.years))
            object.__setattr__(self, "years", normalized or None)

    @property
    def is_empty(self) -> bool:
        return self.to_year is None and self.from_year is None and self.years is None

    @property
    def is_or_range(self) -> bool:
        """True when ``to < from``: years up to ``to`` or from ``from`` onwards."""
        return (
            self.to_year is not None
            and self.from_year is not None
            and self.to_year < self.from_year
        )

    @property
    def is_allow_list(self) -> bool:
        return self.years is not None and self.to_year is None and self.from_year is None

    def to_dict(self) -> Dict:
        data: Dict = {}
        if self.to_year is not None:
            data["to"] = self.to_year
        if self.years is not None:
            data["years"] = list(self.years)
        if self.from_year is not None:
            data["from"] = self.from_year
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional["YearFilter"]:
        """Parse the ``{to, from, years}`` object form; ``None`` stays ``None``."""
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError(f"Filter must be an object, got {type(data).__name__}")
        unknown = set(data) - {"to", "from", "years"}
        if unknown:
            raise ValueError(f"Unknown filter keys: {sorted(unknown)}")

        years = data.get("years")
        if years is not None and not isinstance(years, (list, tuple)):
            raise ValueError("Filter 'years' must be a list")
        return cls(
            to_year=coerce_year(data["to"]) if data.get("to") is not None else None,
            from_year=coerce_year(data["from"]) if data.get("from") is not None else None,
            years=tuple(years) if years is not None else None,
        )


def format_filter(year_filter: Optional[YearFilter]) -> str:
    """Render a filter inline, e.g. ``{ "to": 2017, "years": [2021], "from": 2026 }``."""
    if year_filter is None or year_filter.is_empty:
        return "{}"
    parts = []
    if year_filter.to_year is not None:
        parts.append(f'"to": {year_filter.to_year}')
    if year_filter.years is not None:
        parts.append(f'"years": [{", ".join(str(y) for y in year_filter.years)}]')
    if year_filter.from_year is not None:
        parts.append(f'"from": {year_filter.from_year}')
    return "{ " + ", ".join(parts) + " }"


@dataclass(frozen=True)
class Generation:
    """A named vehicle design era."""

    name: str
    start_year: int
    end_year: Optional[int] = None
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "Generation":
        end_year = data.get("end_year")
        generation = cls(
            name=str(data.get("name", "")),
            start_year=coerce_year(data["start_year"]),
            end_year=coerce_year(end_year) if end_year is not None else None,
            description=str(data.get("description") or ""),
        )
        if generation.end_year is not None and generation.end_year < generation.start_year:
            raise ValueError(
                f"Generation {generation.name!r} ends before it starts "
                f"({generation.start_year}-{generation.end_year})"
            )
        return generation


@dataclass(frozen=True)
class GenerationSet:
    """Generations for one product line; bounds the universe of model years."""

    generations: Tuple[Generation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "generations", tuple(self.generations))

    @property
    def first_year(self) -> Optional[int]:
        """Earliest start year, or ``None`` when unbounded."""
        if not self.generations:
            return None
        return min(g.start_year for g in self.generations)

    @property
    def last_year(self) -> Optional[int]:
        """Latest end year, or ``None`` when any generation is still in production."""
        if not self.generations:
            return None
        if any(g.end_year is None for g in self.generations):
            return None
        return max(g.end_year for g in self.generations)

    @classmethod
    def from_list(cls, items: Iterable[Dict]) -> "GenerationSet":
        return cls(tuple(Generation.from_dict(item) for item in items))


@dataclass(frozen=True)
class SupportSnapshot:
    """Confirmed-supported and confirmed-unsupported model years for a command."""

    supported: FrozenSet[int] = field(default_factory=frozenset)
    unsupported: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "supported", frozenset(self.supported))
        object.__setattr__(self, "unsupported", frozenset(self.unsupported))

    @property
    def has_evidence(self) -> bool:
        return bool(self.supported or self.unsupported)
