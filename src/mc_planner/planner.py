from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .config import settings
from .models import InventorySnapshot
from .planning import (
    CraftingPlan,
    DependencyNode,
    DependencyResolver,
    DifficultyWarning,
    RuleIndex,
    Severity,
    Step,
    analyze_difficulty,
    build_plan,
    classify,
    max_severity,
)
from .planning.prerequisites import heat_prerequisites, tool_prerequisites
from .planning.resolver import Classifier
from .registry import RuleRegistry
from .telemetry.logging import Telemetry


@dataclass(slots=True)
class PlanReport:
    target: str
    quantity: int
    tree: DependencyNode
    plan: CraftingPlan
    warnings: list[DifficultyWarning] = field(default_factory=list)
    prerequisites: list[Step] = field(default_factory=list)

    @property
    def max_severity(self) -> Severity | None:
        return max_severity(self.warnings)

    @property
    def continuation_entry(self) -> str:
        return self.plan.continuation_entry


@dataclass(slots=True)
class DiagnosticReport:
    total: int = 0
    impossible: dict[str, str] = field(default_factory=dict)
    extreme: list[str] = field(default_factory=list)
    hard: list[str] = field(default_factory=list)
    missing_outputs: list[str] = field(default_factory=list)

    @property
    def straightforward(self) -> int:
        return self.total - len(self.impossible) - len(self.extreme) - len(self.hard)


class CraftingPlanner:
    """Resolves goals into plans and annotates them for an executor."""

    def __init__(
        self,
        index: RuleIndex,
        *,
        classifier: Classifier = classify,
        max_depth: int | None = None,
        long_task_threshold: int | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.index = index
        self.resolver = DependencyResolver(
            index,
            classifier=classifier,
            max_depth=max_depth if max_depth is not None else settings.max_depth,
        )
        self._long_task_threshold = (
            long_task_threshold if long_task_threshold is not None else settings.long_task_threshold
        )
        self._telemetry = telemetry
        self._logger = logger or logging.getLogger("mc_planner.planner")

    @classmethod
    def from_registry(cls, registry: RuleRegistry, **kwargs) -> CraftingPlanner:
        index = RuleIndex.from_rules(
            registry.rules(),
            native_namespace=settings.native_namespace,
            untrusted_namespaces=settings.untrusted_namespaces,
        )
        return cls(index, **kwargs)

    def resolve(
        self,
        target: str,
        quantity: int = 1,
        inventory: InventorySnapshot | Mapping[str, int] | None = None,
    ) -> DependencyNode:
        """Resolve against a private copy of ``inventory``; the caller's counts are untouched."""
        return self.resolver.resolve(target, quantity, self._availability(inventory))

    def plan(
        self,
        target: str,
        quantity: int = 1,
        inventory: InventorySnapshot | Mapping[str, int] | None = None,
        *,
        tool_tier: int = -1,
        has_furnace: bool = False,
        with_prerequisites: bool = True,
    ) -> PlanReport:
        # Prerequisites only see the stock the goal itself left unclaimed.
        leftover = self._availability(inventory)
        tree = self.resolver.resolve(target, quantity, leftover)
        plan = build_plan(tree)

        prerequisites: list[Step] = []
        if with_prerequisites:
            tools = tool_prerequisites(plan, self.resolver, leftover, tool_tier=tool_tier)
            combined = CraftingPlan(steps=[*tools, *plan.steps], target=plan.target, target_quantity=plan.target_quantity)
            heat = heat_prerequisites(
                combined, leftover, has_furnace=has_furnace, namespace=self.index.native_namespace
            )
            prerequisites = [*tools, *heat]
            plan.prepend(prerequisites)
        plan.log_plan()

        warnings = analyze_difficulty(plan, long_task_threshold=self._long_task_threshold)
        report = PlanReport(
            target=target,
            quantity=quantity,
            tree=tree,
            plan=plan,
            warnings=warnings,
            prerequisites=prerequisites,
        )
        self._logger.info(
            "plan_ready",
            extra={
                "target": target,
                "quantity": quantity,
                "steps": len(plan.steps),
                "complete": plan.is_complete,
                "max_severity": report.max_severity.name if report.max_severity is not None else None,
            },
        )
        if self._telemetry is not None:
            self._telemetry.emit(
                "plan_ready",
                {"target": target, "quantity": quantity, "steps": [str(step) for step in plan.steps]},
            )
        return report

    def diagnose(self, targets: Iterable[str] | None = None) -> DiagnosticReport:
        """Plan every target from empty stock and bucket the results by worst severity."""
        report = DiagnosticReport()
        if targets is None:
            targets = self.index.outputs()
            report.missing_outputs = self.index.missing_outputs()

        for target in targets:
            report.total += 1
            result = self.plan(target, 1, with_prerequisites=False)
            worst = result.max_severity
            if worst is Severity.IMPOSSIBLE:
                reasons = [
                    str(warning) for warning in result.warnings if warning.severity is Severity.IMPOSSIBLE
                ]
                report.impossible[target] = "; ".join(reasons)
            elif worst is Severity.EXTREME:
                report.extreme.append(target)
            elif worst is Severity.HARD:
                report.hard.append(target)

        self._logger.info(
            "diagnose_finished",
            extra={
                "total": report.total,
                "impossible": len(report.impossible),
                "extreme": len(report.extreme),
                "hard": len(report.hard),
            },
        )
        return report

    @staticmethod
    def _availability(inventory: InventorySnapshot | Mapping[str, int] | None) -> dict[str, int]:
        if inventory is None:
            return {}
        if isinstance(inventory, InventorySnapshot):
            return inventory.availability()
        return {resource: count for resource, count in inventory.items() if count > 0}
