"""Contract between a crafting plan and the executor that carries it out.

The executor works one step per turn. This module hands out the current step
with its directive, records the outcome, and says when replanning is needed;
replanning itself is a fresh resolver call with updated stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from mc_planner.planning.plan import CraftingPlan, Step


@dataclass(slots=True, frozen=True)
class StepOutcome:
    succeeded: bool
    detail: str = ""


class StepExecutor(Protocol):
    """Performs one plan step in the world."""

    def execute(self, step: Step, directive: str) -> StepOutcome:
        """Run ``step`` and report how it went."""


class CursorState(str, Enum):
    RUNNING = "running"
    FINISHED = "finished"
    NEEDS_REPLAN = "needs_replan"


@dataclass(slots=True)
class PlanCursor:
    """Walks a plan one step at a time, stopping at the first failure."""

    plan: CraftingPlan
    position: int = 0
    state: CursorState = CursorState.RUNNING
    completed: list[Step] = field(default_factory=list)
    failure: StepOutcome | None = None

    def __post_init__(self) -> None:
        if self.plan.is_empty:
            self.state = CursorState.FINISHED

    @property
    def current(self) -> Step | None:
        if self.state is not CursorState.RUNNING:
            return None
        return self.plan.steps[self.position]

    @property
    def needs_replan(self) -> bool:
        return self.state is CursorState.NEEDS_REPLAN

    @property
    def finished(self) -> bool:
        return self.state is CursorState.FINISHED

    def remaining_description(self) -> str:
        """Prose for the steps after the current one."""
        return self.plan.remaining_after(self.position)

    def directive(self) -> str:
        step = self.current
        if step is None:
            return ""
        return step.to_directive(self.remaining_description())

    def advance(self, outcome: StepOutcome) -> Step | None:
        """Record the outcome of the current step and return the next one, if any."""
        step = self.current
        if step is None:
            raise RuntimeError(f"cursor is {self.state.value}; nothing to advance")

        if not outcome.succeeded:
            self.failure = outcome
            self.state = CursorState.NEEDS_REPLAN
            return None

        self.completed.append(step)
        self.position += 1
        if self.position >= len(self.plan.steps):
            self.state = CursorState.FINISHED
        return self.current


def run_plan(plan: CraftingPlan, executor: StepExecutor) -> PlanCursor:
    """Drive ``executor`` through ``plan`` until it finishes or a step fails."""
    cursor = PlanCursor(plan)
    while (step := cursor.current) is not None:
        cursor.advance(executor.execute(step, cursor.directive()))
    return cursor
