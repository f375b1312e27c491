from __future__ import annotations

import json
from pathlib import Path

import pytest

from mc_planner.models import Provenance, RuleMethod
from mc_planner.registry import (
    JsonInventorySource,
    JsonRuleRegistry,
    RegistryLoadError,
    parse_inventory,
    parse_rules,
    qualify,
)


def test_parse_rules_skips_unusable_records() -> None:
    payload = {
        "rules": [
            {
                "id": "minecraft:iron_pickaxe",
                "type": "minecraft:crafting_shaped",
                "output": {"item": "minecraft:iron_pickaxe"},
                "ingredients": [{"item": "iron_ingot", "count": 3}, {"items": ["stick", "othermod:rod"], "count": 2}],
            },
            {"id": "create:crushed_iron", "type": "create:crushing", "output": {"item": "create:crushed_raw_iron"}},
            {"id": "othermod:broken", "type": "smelting"},
            {"id": "othermod:blank", "output": {"items": ["", "  "]}},
            {"id": "othermod:blank_input", "output": {"item": "othermod:gear"}, "inputs": [{"item": ""}]},
            "not a rule",
        ]
    }

    rules = parse_rules(payload)

    assert len(rules) == 1
    pickaxe = rules[0]
    assert pickaxe.method is RuleMethod.COMBINE
    assert pickaxe.provenance is Provenance.NATIVE
    assert pickaxe.inputs[0].options == ("minecraft:iron_ingot",)
    assert pickaxe.inputs[1].options == ("minecraft:stick", "othermod:rod")
    assert pickaxe.inputs[1].quantity == 2


def test_parse_rules_infers_method_and_provenance() -> None:
    rules = parse_rules(
        [
            {"id": "othermod:ingot", "type": "blasting", "output": {"item": "minecraft:iron_ingot", "count": 2},
             "inputs": [{"item": "othermod:dust"}]},
            {"id": "stone_slab", "type": "stonecutting", "output": {"item": "stone_slab", "count": 2},
             "inputs": [{"item": "stone"}], "provenance": "foreign"},
        ]
    )

    ingot, slab = rules
    assert ingot.method is RuleMethod.HEAT_BLAST
    assert ingot.provenance is Provenance.FOREIGN
    assert ingot.output_quantity == 2
    assert slab.rule_id == "minecraft:stone_slab"
    assert slab.method is RuleMethod.CUT
    assert slab.provenance is Provenance.FOREIGN


def test_parse_rules_rejects_wrong_shape() -> None:
    with pytest.raises(RegistryLoadError):
        parse_rules({"recipes": []})


def test_json_rule_registry_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps([{"id": "minecraft:stick", "output": {"item": "minecraft:stick", "count": 4},
                     "inputs": [{"item": "minecraft:oak_planks", "count": 2}]}]),
        encoding="utf-8",
    )

    rules = JsonRuleRegistry(path).rules()

    assert [rule.output for rule in rules] == ["minecraft:stick"]


def test_load_errors_are_reported(tmp_path: Path) -> None:
    with pytest.raises(RegistryLoadError, match="does not exist"):
        JsonRuleRegistry(tmp_path / "missing.json").rules()

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(RegistryLoadError, match="not valid JSON"):
        JsonRuleRegistry(broken).rules()


def test_parse_inventory_shapes() -> None:
    flat = parse_inventory({"oak_log": 3, "minecraft:stick": "2", "dirt": 0, "junk": "many"})
    stacks = parse_inventory({"items": [{"item": "cobblestone", "count": 5}, {"id": "cobblestone", "count": 2}]})

    assert flat.counts == {"minecraft:oak_log": 3, "minecraft:stick": 2}
    assert stacks.counts == {"minecraft:cobblestone": 7}


def test_inventory_source_without_path_is_empty() -> None:
    snapshot = JsonInventorySource().snapshot()

    assert snapshot.counts == {}
    assert snapshot.availability() == {}


def test_qualify() -> None:
    assert qualify(" stick ") == "minecraft:stick"
    assert qualify("othermod:rod") == "othermod:rod"
