"""
Load commands, generations and support evidence from a workbench JSON file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from .interfaces import InMemorySupportSource
from .models import GenerationSet
from .planner import CommandRecord
from .support import build_snapshot


logger = logging.getLogger(__name__)


class Workbench:
    """Commands of one signalset together with their evidence."""

    def __init__(
        self,
        generations: GenerationSet,
        commands: List[CommandRecord],
        support: InMemorySupportSource,
    ) -> None:
        self.generations = generations
        self.commands = commands
        self.support = support

    def get_generations(self) -> GenerationSet:
        return self.generations

    def find_command(self, command_id: str) -> CommandRecord:
        for command in self.commands:
            if command.command_id == command_id:
                return command
        raise KeyError(f"Unknown command: {command_id}")

    @classmethod
    def from_dict(cls, data: Dict) -> "Workbench":
        if not isinstance(data, dict):
            raise ValueError("Workbench must be a JSON object")

        generations = GenerationSet.from_list(data.get("generations") or [])
        commands = []
        snapshots = {}
        for entry in data.get("commands") or []:
            command = CommandRecord.from_dict(entry)
            if command.command_id in snapshots:
                raise ValueError(f"Duplicate command id: {command.command_id}")
            commands.append(command)
            snapshots[command.command_id] = build_snapshot(
                entry.get("supported"),
                entry.get("unsupported"),
                command_id=command.command_id,
            )

        logger.debug(
            "Loaded %d commands across %d generations",
            len(commands), len(generations.generations),
        )
        return cls(generations, commands, InMemorySupportSource(snapshots))


def load_workbench(path: Path) -> Workbench:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return Workbench.from_dict(data)
