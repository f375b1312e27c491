"""Contracts for the collaborators that feed the planner."""

from collections.abc import Iterable
from typing import Protocol

from mc_planner.models import InventorySnapshot, ProductionRule


class RuleRegistry(Protocol):
    """Supplies a snapshot of every known production rule."""

    def rules(self) -> Iterable[ProductionRule]:
        """Return all rules; the planner indexes them once."""


class InventorySource(Protocol):
    """Supplies the resources the actor can use right now."""

    def snapshot(self) -> InventorySnapshot:
        """Return current resource counts."""
