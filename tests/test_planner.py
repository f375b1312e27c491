from __future__ import annotations

from mc_planner.models import Ingredient, InventorySnapshot, ProductionRule, Provenance, RuleMethod
from mc_planner.planner import CraftingPlanner
from mc_planner.planning import Severity, Step, StepKind


def _rule(output: str, inputs: dict[str, int], *, makes: int = 1, method: RuleMethod = RuleMethod.COMBINE,
          rule_id: str | None = None) -> ProductionRule:
    rule_id = rule_id or output
    return ProductionRule(
        rule_id=rule_id,
        output=output,
        output_quantity=makes,
        inputs=tuple(Ingredient(options=(item,), quantity=count) for item, count in inputs.items()),
        method=method,
        provenance=Provenance.NATIVE if rule_id.startswith("minecraft:") else Provenance.FOREIGN,
    )


class StubRegistry:
    def __init__(self, rules: list[ProductionRule]) -> None:
        self._rules = rules

    def rules(self) -> list[ProductionRule]:
        return self._rules


class StubTelemetry:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.events.append((event_name, payload))


RULES = [
    _rule("minecraft:iron_pickaxe", {"minecraft:iron_ingot": 3, "minecraft:stick": 2}),
    _rule("minecraft:iron_ingot", {"minecraft:raw_iron": 1}, method=RuleMethod.HEAT_PRIMARY),
    _rule("minecraft:wooden_pickaxe", {"minecraft:oak_planks": 3, "minecraft:stick": 2}),
    _rule("minecraft:stone_pickaxe", {"minecraft:cobblestone": 3, "minecraft:stick": 2}),
    _rule("minecraft:stick", {"minecraft:oak_planks": 2}, makes=4),
    _rule("minecraft:oak_planks", {"minecraft:oak_log": 1}, makes=4),
    _rule("othermod:gear", {"othermod:unobtainium": 1}, rule_id="othermod:gear"),
]


def _planner(**kwargs) -> CraftingPlanner:
    return CraftingPlanner.from_registry(StubRegistry(RULES), **kwargs)


def test_plan_prepends_tool_and_furnace_prerequisites() -> None:
    telemetry = StubTelemetry()

    report = _planner(telemetry=telemetry).plan("minecraft:iron_pickaxe")

    steps = [(step.kind, step.resource) for step in report.plan.steps]
    assert report.plan.steps[: len(report.prerequisites)] == report.prerequisites
    assert (StepKind.COMBINE, "minecraft:stone_pickaxe") in steps
    assert (StepKind.SMELT, "minecraft:iron_ingot") in steps
    assert (StepKind.EXTRACT, "minecraft:raw_iron") in steps
    assert steps[-1] == (StepKind.COMBINE, "minecraft:iron_pickaxe")
    assert report.continuation_entry.startswith("chop_trees(")
    assert telemetry.events[0][0] == "plan_ready"


def test_plan_without_prerequisites_when_tools_are_held() -> None:
    inventory = InventorySnapshot(counts={"minecraft:stone_pickaxe": 1, "minecraft:furnace": 1, "minecraft:coal": 8})

    report = _planner().plan("minecraft:iron_pickaxe", inventory=inventory)

    assert report.prerequisites == []
    assert report.plan.steps[0] == Step(StepKind.CUT_FROM_BLOCK, "minecraft:oak_log", 1)


def test_plan_leaves_caller_inventory_untouched() -> None:
    inventory = InventorySnapshot(counts={"minecraft:stick": 2, "minecraft:iron_ingot": 1})

    report = _planner().plan("minecraft:iron_pickaxe", inventory=inventory, with_prerequisites=False)

    assert inventory.counts == {"minecraft:stick": 2, "minecraft:iron_ingot": 1}
    smelt = [step for step in report.plan.steps if step.kind is StepKind.SMELT]
    assert smelt[0].quantity == 2
    assert not any(step.resource == "minecraft:stick" for step in report.plan.steps)


def test_unresolvable_target_is_flagged_impossible() -> None:
    report = _planner().plan("othermod:gear")

    assert report.plan.is_complete is False
    assert report.max_severity is Severity.IMPOSSIBLE


def test_diagnose_buckets_outputs() -> None:
    report = _planner().diagnose()

    assert report.total == 7
    assert list(report.impossible) == ["othermod:gear"]
    assert "minecraft:furnace" in report.missing_outputs
    assert "minecraft:stick" not in report.missing_outputs
    assert report.straightforward == report.total - 1 - len(report.extreme) - len(report.hard)


def test_diagnose_single_target() -> None:
    report = _planner().diagnose(["minecraft:stick"])

    assert report.total == 1
    assert report.impossible == {}
    assert report.missing_outputs == []


def test_tool_chain_only_uses_stock_the_goal_left_over() -> None:
    rules = [*RULES, _rule("minecraft:gilded_gear", {"minecraft:iron_ingot": 3, "minecraft:raw_gold": 1})]
    planner = CraftingPlanner.from_registry(StubRegistry(rules))
    inventory = InventorySnapshot(counts={"minecraft:iron_ingot": 3, "minecraft:stone_pickaxe": 1})

    report = planner.plan("minecraft:gilded_gear", inventory=inventory)

    prerequisites = [(step.kind, step.resource, step.quantity) for step in report.prerequisites]
    assert (StepKind.COMBINE, "minecraft:iron_pickaxe", 1) in prerequisites
    assert (StepKind.SMELT, "minecraft:iron_ingot", 3) in prerequisites
    assert not any(step.resource == "minecraft:iron_ingot" for step in report.plan.steps[len(prerequisites):])


def test_explicit_zero_long_task_threshold_is_kept() -> None:
    report = _planner(long_task_threshold=0).plan("minecraft:iron_pickaxe", with_prerequisites=False)

    slow = [warning.resource for warning in report.warnings if warning.message.endswith("will take a while.")]
    assert set(slow) == {step.resource for step in report.plan.async_steps}
    assert "minecraft:raw_iron" in slow
