"""
Support evidence snapshots and summaries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import SupportSnapshot
from .year_utils import format_year_ranges, parse_years


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupportSummary:
    """Support evidence for one command, ready for display."""

    command_id: str
    supported: List[int]
    unsupported: List[int]
    all_years: List[int]
    support_percentage: float


def build_snapshot(
    supported: Optional[Iterable] = None,
    unsupported: Optional[Iterable] = None,
    command_id: str = "",
) -> SupportSnapshot:
    """Build a snapshot from raw year values.

    A year reported both supported and unsupported is kept as supported.
    """
    supported_years = set(parse_years(supported))
    unsupported_years = set(parse_years(unsupported))

    contradictions = supported_years & unsupported_years
    if contradictions:
        logger.warning(
            "Command %s has years marked both supported and unsupported: %s; "
            "keeping them as supported",
            command_id or "<unknown>",
            format_year_ranges(contradictions),
        )
        unsupported_years -= contradictions

    return SupportSnapshot(
        supported=frozenset(supported_years),
        unsupported=frozenset(unsupported_years),
    )


def summarize_support(command_id: str, snapshot: SupportSnapshot) -> SupportSummary:
    supported = sorted(snapshot.supported)
    unsupported = sorted(snapshot.unsupported)
    all_years = sorted(snapshot.supported | snapshot.unsupported)
    if all_years:
        percentage = round(len(supported) / len(all_years) * 100, 1)
    else:
        percentage = 0.0
    return SupportSummary(
        command_id=command_id,
        supported=supported,
        unsupported=unsupported,
        all_years=all_years,
        support_percentage=percentage,
    )


def format_support_info(summary: SupportSummary) -> str:
    """Format a support summary as human-readable lines."""
    lines = [
        f"Command: {summary.command_id}",
        f"Support: {summary.support_percentage}% "
        f"({len(summary.supported)}/{len(summary.all_years)} years)",
    ]
    if summary.supported:
        lines.append(f"Supported years: {format_year_ranges(summary.supported)}")
    if summary.unsupported:
        lines.append(f"Unsupported years: {format_year_ranges(summary.unsupported)}")
    return "\n".join(lines)
