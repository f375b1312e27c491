from __future__ import annotations

import pytest

from mc_planner.planning import StepKind, classify


@pytest.mark.parametrize(
    ("resource", "expected"),
    [
        ("minecraft:raw_iron", StepKind.EXTRACT),
        ("minecraft:deepslate_diamond_ore", StepKind.EXTRACT),
        ("coal", StepKind.EXTRACT),
        ("minecraft:oak_log", StepKind.CUT_FROM_BLOCK),
        ("minecraft:crimson_stem", StepKind.CUT_FROM_BLOCK),
        ("minecraft:stripped_birch_log", StepKind.CUT_FROM_BLOCK),
        ("minecraft:cobblestone", StepKind.COLLECT_SURFACE),
        ("minecraft:sand", StepKind.COLLECT_SURFACE),
        ("minecraft:suspicious_sand", StepKind.COLLECT_SURFACE),
        ("minecraft:leather", StepKind.HARVEST_ORGANISM),
        ("minecraft:white_wool", StepKind.HARVEST_ORGANISM),
        ("minecraft:salmon", StepKind.FISH),
        ("minecraft:wheat", StepKind.FARM),
        ("minecraft:red_tulip", StepKind.HARVEST),
        ("minecraft:brown_mushroom", StepKind.HARVEST),
    ],
)
def test_classify_raw_materials(resource: str, expected: StepKind) -> None:
    assert classify(resource) is expected


@pytest.mark.parametrize(
    "resource",
    [
        "minecraft:wooden_pickaxe",
        "minecraft:sandstone",
        "minecraft:iron_ingot",
        "minecraft:oak_planks",
        "minecraft:stick",
        "minecraft:log_bundle",
        "minecraft:cobblestone_wall",
    ],
)
def test_classify_does_not_match_composite_names(resource: str) -> None:
    assert classify(resource) is StepKind.UNRESOLVED


def test_classify_ignores_namespace() -> None:
    assert classify("othermod:oak_log") is classify("minecraft:oak_log") is StepKind.CUT_FROM_BLOCK


def test_classify_is_stable_across_calls() -> None:
    resources = ["minecraft:raw_gold", "minecraft:furnace", "minecraft:cod", "minecraft:flint"]

    first = [classify(resource) for resource in resources]
    second = [classify(resource) for resource in resources]

    assert first == second
