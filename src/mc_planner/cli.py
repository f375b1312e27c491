"""CLI-side handler wrapping the planner and shaping its results for printing."""

from __future__ import annotations

from mc_planner.config import settings
from mc_planner.models import InventorySnapshot
from mc_planner.planner import CraftingPlanner, DiagnosticReport, PlanReport
from mc_planner.planning import render_tree
from mc_planner.registry import JsonInventorySource, RuleRegistry, qualify
from mc_planner.telemetry.logging import LoggingTelemetry


class CliPlanHandler:
    """Simple sync facade over :class:`CraftingPlanner` for the typer commands."""

    def __init__(self, planner: CraftingPlanner, inventory: InventorySnapshot | None = None) -> None:
        self._planner = planner
        self._inventory = inventory or InventorySnapshot()

    @classmethod
    def from_sources(cls, registry: RuleRegistry, inventory: JsonInventorySource) -> CliPlanHandler:
        telemetry = LoggingTelemetry() if settings.telemetry_enabled else None
        return cls(CraftingPlanner.from_registry(registry, telemetry=telemetry), inventory.snapshot())

    def target(self, resource: str) -> str:
        return qualify(resource, self._planner.index.native_namespace)

    def plan(self, resource: str, count: int, *, tool_tier: int = -1, has_furnace: bool = False) -> PlanReport:
        return self._planner.plan(
            self.target(resource),
            count,
            self._inventory,
            tool_tier=tool_tier,
            has_furnace=has_furnace,
        )

    def tree(self, resource: str, count: int) -> str:
        return render_tree(self._planner.resolve(self.target(resource), count, self._inventory))

    def diagnose(self, resource: str | None = None) -> DiagnosticReport:
        targets = [self.target(resource)] if resource else None
        return self._planner.diagnose(targets)

    @staticmethod
    def format_report(report: PlanReport) -> dict:
        return {
            "target": report.target,
            "quantity": report.quantity,
            "complete": report.plan.is_complete,
            "steps": [str(step) for step in report.plan.steps],
            "prerequisites": [str(step) for step in report.prerequisites],
            "summary": report.plan.summarize(),
            "continuation": report.continuation_entry,
            "max_severity": report.max_severity.name if report.max_severity is not None else None,
            "warnings": [str(warning) for warning in report.warnings],
        }

    @staticmethod
    def format_diagnostic(report: DiagnosticReport) -> dict:
        return {
            "total": report.total,
            "straightforward": report.straightforward,
            "impossible": report.impossible,
            "extreme": report.extreme,
            "hard": report.hard,
            "missing_outputs": report.missing_outputs,
        }
