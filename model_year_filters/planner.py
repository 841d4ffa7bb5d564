"""
Per-command filter planning.

Compares the filters a signalset currently declares with the filters the
support evidence calls for, and records what should change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Optional, Tuple

import pandas as pd

from .debug_filter import synthesize_debug_filter
from .filter_optimizer import optimize_filter
from .interfaces import GenerationSource, SupportSource
from .models import GenerationSet, SupportSnapshot, YearFilter, format_filter
from .support import SupportSummary, summarize_support
from .year_utils import format_year_ranges


logger = logging.getLogger(__name__)

ACTION_NONE = "none"
ACTION_ADD = "add"
ACTION_OPTIMIZE = "optimize"
ACTION_REMOVE = "remove"


@dataclass(frozen=True)
class CommandRecord:
    """The filter-related fields of a command definition."""

    command_id: str
    production_filter: Optional[YearFilter] = None
    debug_filter: Optional[YearFilter] = None
    debug: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> "CommandRecord":
        command_id = data.get("id")
        if not command_id:
            raise ValueError("Command is missing an 'id'")
        try:
            production_filter = YearFilter.from_dict(data.get("filter"))
            debug_filter = YearFilter.from_dict(data.get("dbgfilter"))
        except ValueError as e:
            raise ValueError(f"Command {command_id}: {e}") from e
        return cls(
            command_id=str(command_id),
            production_filter=production_filter,
            debug_filter=debug_filter,
            debug=data.get("dbg") is True,
        )


@dataclass(frozen=True)
class CommandPlan:
    """Recommended filter changes for one command."""

    command: CommandRecord
    summary: SupportSummary
    debug_action: str
    recommended_debug_filter: Optional[YearFilter]
    filter_action: str
    recommended_filter: Optional[YearFilter]

    @property
    def has_changes(self) -> bool:
        return self.debug_action != ACTION_NONE or self.filter_action != ACTION_NONE

    def to_record(self) -> Dict[str, Any]:
        return {
            "command_id": self.command.command_id,
            "dbg": self.command.debug,
            "current_filter": format_filter(self.command.production_filter),
            "filter_action": self.filter_action,
            "recommended_filter": format_filter(self.recommended_filter),
            "current_dbgfilter": format_filter(self.command.debug_filter),
            "debug_action": self.debug_action,
            "recommended_dbgfilter": format_filter(self.recommended_debug_filter),
            "supported_years": format_year_ranges(self.summary.supported),
            "unsupported_years": format_year_ranges(self.summary.unsupported),
            "support_percentage": self.summary.support_percentage,
        }


class FilterPlanner:
    """Plan debug and production filter updates against a generation boundary."""

    def __init__(self, generations: GenerationSet, today: Optional[date] = None):
        """Initialize the planner.

        Args:
            generations: Generation boundary for the vehicle
            today: Reference date for open-ended generations (default: today)
        """
        self.generations = generations
        self.today = today

    @classmethod
    def from_source(cls, source: GenerationSource, today: Optional[date] = None) -> "FilterPlanner":
        return cls(source.get_generations(), today=today)

    def plan_debug_filter(
        self, command: CommandRecord, snapshot: SupportSnapshot
    ) -> Tuple[str, Optional[YearFilter]]:
        """Decide whether the command's debug filter should be added, rewritten or dropped."""
        supported = snapshot.supported

        if command.debug and command.debug_filter is None:
            if not supported:
                return ACTION_NONE, None
            calculated = synthesize_debug_filter(
                supported, self.generations, command.production_filter
            )
            if calculated is not None and not calculated.is_empty:
                return ACTION_ADD, calculated
            return ACTION_NONE, None

        if command.debug_filter is None:
            return ACTION_NONE, None

        # A command still flagged for debugging keeps its filter until some year is confirmed.
        if command.debug and not supported:
            return ACTION_NONE, command.debug_filter

        calculated = None
        if supported:
            calculated = synthesize_debug_filter(
                supported, self.generations, command.production_filter
            )
        target = calculated if calculated is not None else YearFilter()

        if target == command.debug_filter:
            return ACTION_NONE, command.debug_filter
        if target.is_empty:
            return ACTION_REMOVE, None
        return ACTION_OPTIMIZE, target

    def plan_production_filter(
        self, command: CommandRecord, snapshot: SupportSnapshot
    ) -> Tuple[str, Optional[YearFilter]]:
        """Decide whether the command's production filter should change."""
        if not snapshot.has_evidence:
            return ACTION_NONE, command.production_filter

        optimized = optimize_filter(
            snapshot.supported, snapshot.unsupported, self.generations, today=self.today
        )
        if optimized is None:
            return ACTION_NONE, command.production_filter

        existing = command.production_filter or YearFilter()
        if optimized == existing:
            return ACTION_NONE, command.production_filter
        if optimized.is_empty:
            return ACTION_REMOVE, None
        return ACTION_OPTIMIZE, optimized

    def plan_command(self, command: CommandRecord, snapshot: SupportSnapshot) -> CommandPlan:
        debug_action, debug_filter = self.plan_debug_filter(command, snapshot)
        filter_action, production_filter = self.plan_production_filter(command, snapshot)
        return CommandPlan(
            command=command,
            summary=summarize_support(command.command_id, snapshot),
            debug_action=debug_action,
            recommended_debug_filter=debug_filter,
            filter_action=filter_action,
            recommended_filter=production_filter,
        )

    def plan_signalset(
        self, commands: Iterable[CommandRecord], support: SupportSource
    ) -> pd.DataFrame:
        """Plan every command and collect the results in a DataFrame."""
        records = []
        for command in commands:
            plan = self.plan_command(command, support.get_support(command.command_id))
            if plan.has_changes:
                logger.debug(
                    "%s: filter %s, dbgfilter %s",
                    command.command_id, plan.filter_action, plan.debug_action,
                )
            records.append(plan.to_record())

        columns = [
            "command_id",
            "dbg",
            "current_filter",
            "filter_action",
            "recommended_filter",
            "current_dbgfilter",
            "debug_action",
            "recommended_dbgfilter",
            "supported_years",
            "unsupported_years",
            "support_percentage",
        ]
        return pd.DataFrame(records, columns=columns)

    def analyze(self, commands: Iterable[CommandRecord], support: SupportSource) -> Dict[str, Any]:
        """Run the full planning pass.

        Returns:
            Dictionary with the plan DataFrame and summary counts
        """
        commands = list(commands)
        logger.info("Planning filters for %d commands", len(commands))
        plan_df = self.plan_signalset(commands, support)

        filter_changes = int((plan_df["filter_action"] != ACTION_NONE).sum())
        debug_changes = int((plan_df["debug_action"] != ACTION_NONE).sum())
        with_support = int((plan_df["supported_years"] != "").sum())

        return {
            "first_year": self.generations.first_year,
            "last_year": self.generations.last_year,
            "num_commands": len(commands),
            "num_with_support": with_support,
            "filter_changes": filter_changes,
            "debug_changes": debug_changes,
            "plan": plan_df,
        }
