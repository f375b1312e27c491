"""Flatten a dependency tree into an ordered, merged list of executable steps.

Execution order follows ``StepKind.priority``: fell timber, collect surface
blocks, mine, hunt/fish/farm, heat-process, cut, and combine last. Steps that
share a priority keep the post-order position of their first occurrence.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from mc_planner.knowledge.organisms import organism_for_drop
from mc_planner.models import display_name, resource_path
from mc_planner.planning.steps import DependencyNode, StepKind


@dataclass(slots=True, frozen=True)
class Step:
    """A single executable step in the plan."""

    kind: StepKind
    resource: str
    quantity: int
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", display_name(self.resource))

    def __str__(self) -> str:
        return f"{self.kind.value} {resource_path(self.resource)} x{self.quantity}"

    @property
    def is_async(self) -> bool:
        return self.kind.is_async

    def describe(self) -> str:
        """Short prose used inside continuation plans ("smelt iron_ingot x3")."""
        text = f"{self.kind.value} {resource_path(self.resource)}"
        return f"{text} x{self.quantity}" if self.quantity > 1 else text

    def to_directive(self, remaining_plan: str = "") -> str:
        """Render the tool call an executor runs for this step.

        Async steps carry ``remaining_plan`` so the executor learns what to do
        once the step finishes.
        """
        item = resource_path(self.resource)
        kind = self.kind
        if kind is StepKind.CUT_FROM_BLOCK:
            return _call("chop_trees", {"maxLogs": self.quantity, "plan": remaining_plan})
        if kind is StepKind.EXTRACT:
            return _call("mine_ores", {"ore": item, "maxOres": self.quantity, "plan": remaining_plan})
        if kind is StepKind.COLLECT_SURFACE:
            return _call("gather_blocks", {"block": item, "maxBlocks": self.quantity, "plan": remaining_plan})
        if kind is StepKind.HARVEST:
            return _call("gather_plants", {"plant": item, "count": self.quantity, "plan": remaining_plan})
        if kind is StepKind.HARVEST_ORGANISM:
            return _call(
                "kill_mob",
                {"mob": organism_for_drop(self.resource), "count": self.quantity, "plan": remaining_plan},
            )
        if kind is StepKind.FISH:
            return _call("go_fishing", {"maxFish": self.quantity, "plan": remaining_plan})
        if kind is StepKind.FARM:
            return _call("farm_area", {"crop": item, "plan": remaining_plan})
        if kind.is_heat:
            return _call(
                "smelt_items",
                {"item": item, "count": self.quantity, "method": kind.value, "plan": remaining_plan},
            )
        if kind is StepKind.STONECUT:
            return _call("cut_block", {"item": item, "count": self.quantity})
        if kind is StepKind.COMBINE:
            return _call("craft_item", {"item": item, "count": self.quantity})
        return f"Unknown step: {item}"


def _call(tool: str, arguments: dict) -> str:
    return f"{tool}({json.dumps(arguments)})"


def flatten(tree: DependencyNode) -> list[DependencyNode]:
    """Post-order nodes with each ``(kind, resource)`` kept once across the whole tree."""
    result: list[DependencyNode] = []
    seen: set[tuple[StepKind, str]] = set()
    for node in tree.walk():
        key = (node.kind, node.resource)
        if key in seen:
            continue
        seen.add(key)
        result.append(node)
    return result


@dataclass(slots=True)
class CraftingPlan:
    """Ordered steps towards ``target``; fixed after building except for :meth:`prepend`."""

    steps: list[Step]
    target: str
    target_quantity: int
    _logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("mc_planner.plan"), repr=False, compare=False
    )

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    @property
    def is_empty(self) -> bool:
        return not self.steps

    @property
    def is_complete(self) -> bool:
        """False when some step could not be resolved to any method."""
        return all(step.kind is not StepKind.UNRESOLVED for step in self.steps)

    @property
    def async_steps(self) -> list[Step]:
        return [step for step in self.steps if step.is_async]

    @property
    def combine_steps(self) -> list[Step]:
        return [step for step in self.steps if step.kind is StepKind.COMBINE]

    @property
    def continuation_entry(self) -> str:
        return build_continuation_chain(self)

    def prepend(self, prerequisites: Iterable[Step]) -> None:
        """Put caller-ordered prerequisite steps in front; their order is kept as given."""
        prerequisites = list(prerequisites)
        if not prerequisites:
            return
        self.steps[:0] = prerequisites
        self._logger.info(
            "plan_prerequisites_prepended",
            extra={"target": self.target, "prerequisites": [str(step) for step in prerequisites]},
        )

    def remaining_after(self, index: int) -> str:
        return ", then ".join(step.describe() for step in self.steps[index + 1 :])

    def summarize(self) -> str:
        if not self.steps:
            return "No steps needed."
        parts = []
        for step in self.steps:
            text = f"{step.kind.value} {step.display_name}"
            parts.append(f"{text} x{step.quantity}" if step.quantity > 1 else text)
        return " → ".join(parts)

    def log_plan(self) -> None:
        self._logger.info("plan_built", extra={"target": self.target, "target_quantity": self.target_quantity})
        for number, step in enumerate(self.steps, start=1):
            self._logger.info(
                "plan_step",
                extra={"step": number, "kind": step.kind.value, "resource": step.resource, "quantity": step.quantity},
            )


def build_plan(tree: DependencyNode) -> CraftingPlan:
    """Flatten, drop stock already on hand, merge duplicates and order by priority.

    Quantities are summed over every occurrence in the tree; the first
    occurrence decides the position.
    """
    totals: dict[tuple[StepKind, str], int] = {}
    for node in tree.walk():
        key = (node.kind, node.resource)
        totals[key] = totals.get(key, 0) + node.quantity

    steps = [
        Step(node.kind, node.resource, totals[(node.kind, node.resource)])
        for node in flatten(tree)
        if node.kind is not StepKind.ALREADY_AVAILABLE
    ]
    steps.sort(key=lambda step: step.kind.priority)
    return CraftingPlan(steps=steps, target=tree.resource, target_quantity=tree.quantity)


def build_continuation_chain(plan: CraftingPlan) -> str:
    """Return the directive for the first step, each carrying prose of what follows.

    The chain is built from the end backwards; later directives are not
    returned separately because the executor re-derives the next one from the
    embedded description after each turn.
    """
    if not plan.steps:
        return ""

    directives = [""] * len(plan.steps)
    for index in range(len(plan.steps) - 1, -1, -1):
        directives[index] = plan.steps[index].to_directive(plan.remaining_after(index))
    return directives[0]
