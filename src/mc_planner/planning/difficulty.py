"""Advisory difficulty warnings for a crafting plan. Never changes the plan."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from mc_planner.knowledge import advisories
from mc_planner.knowledge.ores import find_ore
from mc_planner.models import resource_path
from mc_planner.planning.plan import CraftingPlan, Step
from mc_planner.planning.steps import StepKind

DEFAULT_LONG_TASK_THRESHOLD = 20


class Severity(IntEnum):
    EASY = 0
    MODERATE = 1
    HARD = 2
    EXTREME = 3
    IMPOSSIBLE = 4


@dataclass(slots=True, frozen=True)
class DifficultyWarning:
    severity: Severity
    resource: str
    message: str

    def __str__(self) -> str:
        return f"[{self.severity.name}] {resource_path(self.resource)}: {self.message}"


def _table_warning(step: Step) -> DifficultyWarning | None:
    path = resource_path(step.resource)

    if step.kind is StepKind.UNRESOLVED:
        message = advisories.UNRESOLVED_HINTS.get(path) or advisories.UNOBTAINABLE.get(path)
        return DifficultyWarning(Severity.IMPOSSIBLE, step.resource, message or advisories.GENERIC_UNRESOLVED)
    if path in advisories.UNOBTAINABLE:
        return DifficultyWarning(Severity.IMPOSSIBLE, step.resource, advisories.UNOBTAINABLE[path])
    if path in advisories.EXTREME:
        return DifficultyWarning(Severity.EXTREME, step.resource, advisories.EXTREME[path])
    if path in advisories.HARD:
        return DifficultyWarning(Severity.HARD, step.resource, advisories.HARD[path])

    if step.is_async and path in advisories.NETHER_RESOURCES:
        return DifficultyWarning(Severity.HARD, step.resource, "Only found in the Nether.")
    if step.kind is StepKind.EXTRACT:
        ore = find_ore(step.resource)
        if ore is not None and ore.nether:
            return DifficultyWarning(Severity.HARD, step.resource, f"Nether resource. {ore.tip}")

    if path in advisories.MODERATE:
        return DifficultyWarning(Severity.MODERATE, step.resource, advisories.MODERATE[path])
    return None


def analyze_difficulty(
    plan: CraftingPlan,
    *,
    long_task_threshold: int = DEFAULT_LONG_TASK_THRESHOLD,
) -> list[DifficultyWarning]:
    """Flag infeasible, environment-restricted and merely slow steps, in plan order."""
    warnings: list[DifficultyWarning] = []
    for step in plan.steps:
        warning = _table_warning(step)
        if warning is not None:
            warnings.append(warning)
        if step.is_async and step.quantity >= long_task_threshold:
            warnings.append(
                DifficultyWarning(
                    Severity.MODERATE,
                    step.resource,
                    f"{step.kind.value.replace('_', ' ')} x{step.quantity} will take a while.",
                )
            )
    return warnings


def max_severity(warnings: Iterable[DifficultyWarning]) -> Severity | None:
    return max((warning.severity for warning in warnings), default=None)
