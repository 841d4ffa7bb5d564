"""
Interfaces for support evidence and generation providers.
"""

from __future__ import annotations

from typing import Dict, Protocol

from .models import GenerationSet, SupportSnapshot


class SupportSource(Protocol):
    """Provide aggregated support evidence per command."""

    def get_support(self, command_id: str) -> SupportSnapshot:
        ...


class GenerationSource(Protocol):
    """Provide the generation boundary for a product line."""

    def get_generations(self) -> GenerationSet:
        ...


class InMemorySupportSource:
    """Support evidence held in a plain mapping of command id to snapshot."""

    def __init__(self, snapshots: Dict[str, SupportSnapshot]) -> None:
        self.snapshots = dict(snapshots)

    def get_support(self, command_id: str) -> SupportSnapshot:
        return self.snapshots.get(command_id, SupportSnapshot())
