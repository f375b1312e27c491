from __future__ import annotations

from mc_planner.models import Ingredient, ProductionRule, Provenance
from mc_planner.planning import CraftingPlan, DependencyResolver, Step, StepKind, index_rules
from mc_planner.planning.prerequisites import (
    FURNACE_COBBLESTONE,
    FUEL_LOGS,
    heat_prerequisites,
    held_pickaxe_tier,
    required_tier,
    tool_prerequisites,
)


def _native(output: str, inputs: dict[str, int], makes: int = 1) -> ProductionRule:
    return ProductionRule(
        rule_id=output,
        output=output,
        output_quantity=makes,
        inputs=tuple(Ingredient(options=(item,), quantity=count) for item, count in inputs.items()),
        provenance=Provenance.NATIVE,
    )


def _tool_resolver() -> DependencyResolver:
    return DependencyResolver(
        index_rules(
            [
                _native("minecraft:wooden_pickaxe", {"minecraft:oak_planks": 3, "minecraft:stick": 2}),
                _native("minecraft:stone_pickaxe", {"minecraft:cobblestone": 3, "minecraft:stick": 2}),
                _native("minecraft:stick", {"minecraft:oak_planks": 2}, makes=4),
                _native("minecraft:oak_planks", {"minecraft:oak_log": 1}, makes=4),
            ]
        )
    )


def _plan(*steps: Step) -> CraftingPlan:
    return CraftingPlan(steps=list(steps), target="minecraft:target", target_quantity=1)


def test_required_tier_comes_from_extract_steps() -> None:
    plan = _plan(
        Step(StepKind.EXTRACT, "minecraft:coal", 2),
        Step(StepKind.EXTRACT, "minecraft:raw_gold", 1),
        Step(StepKind.COLLECT_SURFACE, "minecraft:obsidian", 1),
    )

    assert required_tier(plan) == 2


def test_held_pickaxe_tier() -> None:
    assert held_pickaxe_tier({}) == -1
    assert held_pickaxe_tier({"minecraft:stone_pickaxe": 1, "minecraft:wooden_pickaxe": 1}) == 1


def test_tool_chain_is_built_up_to_the_required_tier() -> None:
    plan = _plan(Step(StepKind.EXTRACT, "minecraft:raw_iron", 3))
    availability = {"minecraft:stick": 1}

    steps = tool_prerequisites(plan, _tool_resolver(), availability)

    resources = [(step.kind, step.resource) for step in steps]
    assert (StepKind.COMBINE, "minecraft:wooden_pickaxe") in resources
    assert (StepKind.COMBINE, "minecraft:stone_pickaxe") in resources
    assert (StepKind.COLLECT_SURFACE, "minecraft:cobblestone") in resources
    assert len(resources) == len(set(resources))
    assert resources.index((StepKind.COMBINE, "minecraft:wooden_pickaxe")) < resources.index(
        (StepKind.COMBINE, "minecraft:stone_pickaxe")
    )
    assert availability == {"minecraft:stick": 1}


def test_no_tools_needed_when_tier_is_held() -> None:
    plan = _plan(Step(StepKind.EXTRACT, "minecraft:raw_iron", 3))

    assert tool_prerequisites(plan, _tool_resolver(), {"minecraft:stone_pickaxe": 1}) == []
    assert tool_prerequisites(plan, _tool_resolver(), {}, tool_tier=2) == []
    assert tool_prerequisites(_plan(Step(StepKind.EXTRACT, "minecraft:coal", 8)), _tool_resolver(), {}) == []


def test_heat_prerequisites_add_furnace_and_fuel() -> None:
    plan = _plan(Step(StepKind.EXTRACT, "minecraft:raw_iron", 3), Step(StepKind.SMELT, "minecraft:iron_ingot", 3))

    steps = heat_prerequisites(plan, {})

    assert steps == [
        Step(StepKind.COLLECT_SURFACE, "minecraft:cobblestone", FURNACE_COBBLESTONE),
        Step(StepKind.CUT_FROM_BLOCK, "minecraft:oak_log", FUEL_LOGS),
    ]


def test_heat_prerequisites_count_planned_cobblestone_and_chopping() -> None:
    plan = _plan(
        Step(StepKind.CUT_FROM_BLOCK, "minecraft:oak_log", 1),
        Step(StepKind.COLLECT_SURFACE, "minecraft:cobblestone", 3),
        Step(StepKind.SMELT, "minecraft:iron_ingot", 3),
    )

    steps = heat_prerequisites(plan, {"minecraft:cobblestone": 2})

    assert steps == [Step(StepKind.COLLECT_SURFACE, "minecraft:cobblestone", FURNACE_COBBLESTONE - 5)]


def test_no_heat_prerequisites_with_furnace_and_fuel() -> None:
    plan = _plan(Step(StepKind.SMELT, "minecraft:iron_ingot", 3))

    assert heat_prerequisites(plan, {"minecraft:coal": 4}, has_furnace=True) == []
    assert heat_prerequisites(plan, {"minecraft:furnace": 1, "minecraft:oak_planks": 2}) == []
    assert heat_prerequisites(_plan(Step(StepKind.COMBINE, "minecraft:stick", 4)), {}) == []
