from __future__ import annotations

import pytest

from mc_planner.planning import CraftingPlan, CursorState, PlanCursor, Step, StepKind, StepOutcome, run_plan


class StubExecutor:
    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[Step, str]] = []

    def execute(self, step: Step, directive: str) -> StepOutcome:
        self.calls.append((step, directive))
        if step.resource == self.fail_on:
            return StepOutcome(succeeded=False, detail="no trees nearby")
        return StepOutcome(succeeded=True)


def _plan() -> CraftingPlan:
    return CraftingPlan(
        steps=[
            Step(StepKind.CUT_FROM_BLOCK, "minecraft:oak_log", 1),
            Step(StepKind.COMBINE, "minecraft:oak_planks", 4),
            Step(StepKind.COMBINE, "minecraft:crafting_table", 1),
        ],
        target="minecraft:crafting_table",
        target_quantity=1,
    )


def test_run_plan_completes_every_step() -> None:
    executor = StubExecutor()

    cursor = run_plan(_plan(), executor)

    assert cursor.finished
    assert len(cursor.completed) == 3
    assert "combine oak_planks x4, then combine crafting_table" in executor.calls[0][1]
    assert executor.calls[2][1] == 'craft_item({"item": "crafting_table", "count": 1})'


def test_failed_step_requests_replan() -> None:
    executor = StubExecutor(fail_on="minecraft:oak_log")

    cursor = run_plan(_plan(), executor)

    assert cursor.needs_replan
    assert cursor.completed == []
    assert cursor.failure == StepOutcome(succeeded=False, detail="no trees nearby")
    assert cursor.current is None
    assert len(executor.calls) == 1


def test_cursor_walks_step_by_step() -> None:
    cursor = PlanCursor(_plan())

    assert cursor.state is CursorState.RUNNING
    assert cursor.current.resource == "minecraft:oak_log"
    assert cursor.remaining_description() == "combine oak_planks x4, then combine crafting_table"

    next_step = cursor.advance(StepOutcome(succeeded=True))

    assert next_step.resource == "minecraft:oak_planks"
    assert cursor.position == 1


def test_empty_plan_is_finished_immediately() -> None:
    cursor = PlanCursor(CraftingPlan(steps=[], target="minecraft:stick", target_quantity=1))

    assert cursor.finished
    assert cursor.directive() == ""
    with pytest.raises(RuntimeError):
        cursor.advance(StepOutcome(succeeded=True))
