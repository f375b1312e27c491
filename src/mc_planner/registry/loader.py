"""Load production rules and inventory snapshots from JSON exports.

Rule file layout (a bare top-level list of rules is accepted too)::

    {"rules": [
        {"id": "minecraft:iron_pickaxe", "type": "crafting_shaped",
         "output": {"item": "minecraft:iron_pickaxe", "count": 1},
         "inputs": [{"item": "minecraft:iron_ingot", "count": 3},
                    {"items": ["minecraft:oak_planks", "minecraft:birch_planks"]}]}
    ]}

Records that fail validation or use a method the planner cannot execute
(machine processing and the like) are logged and skipped; only file-level
problems raise :class:`RegistryLoadError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from mc_planner.models import Ingredient, InventorySnapshot, ProductionRule, Provenance, RuleMethod

logger = logging.getLogger("mc_planner.registry")

METHOD_ALIASES: dict[str, RuleMethod] = {
    "combine": RuleMethod.COMBINE,
    "crafting": RuleMethod.COMBINE,
    "crafting_shaped": RuleMethod.COMBINE,
    "crafting_shapeless": RuleMethod.COMBINE,
    "shaped": RuleMethod.COMBINE,
    "shapeless": RuleMethod.COMBINE,
    "smelting": RuleMethod.HEAT_PRIMARY,
    "heat_primary": RuleMethod.HEAT_PRIMARY,
    "blasting": RuleMethod.HEAT_BLAST,
    "heat_blast": RuleMethod.HEAT_BLAST,
    "smoking": RuleMethod.HEAT_SMOKE,
    "heat_smoke": RuleMethod.HEAT_SMOKE,
    "campfire_cooking": RuleMethod.HEAT_CAMPFIRE,
    "heat_campfire": RuleMethod.HEAT_CAMPFIRE,
    "stonecutting": RuleMethod.CUT,
    "cut": RuleMethod.CUT,
}


class RegistryLoadError(ValueError):
    """Raised when a registry or inventory file cannot be read at all."""


def qualify(resource: str, namespace: str = "minecraft") -> str:
    """Add ``namespace`` to bare identifiers: ``stick`` -> ``minecraft:stick``."""
    resource = resource.strip()
    return resource if ":" in resource else f"{namespace}:{resource}"


class StackRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    item: str | None = None
    items: list[str] = Field(default_factory=list)
    count: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _has_options(self) -> StackRecord:
        if not self._raw_options():
            raise ValueError("stack needs a non-empty 'item' or 'items'")
        return self

    def _raw_options(self) -> list[str]:
        raw = [self.item] if self.item else self.items
        return [option.strip() for option in raw if option and option.strip()]

    def options(self, namespace: str) -> tuple[str, ...]:
        return tuple(dict.fromkeys(qualify(option, namespace) for option in self._raw_options()))


class RuleRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    type: str = "combine"
    output: StackRecord
    inputs: list[StackRecord] = Field(default_factory=list, alias="ingredients")
    provenance: Provenance | None = None

    @field_validator("type")
    @classmethod
    def _known_method(cls, value: str) -> str:
        key = value.split(":", 1)[-1].lower()
        if key not in METHOD_ALIASES:
            raise ValueError(f"unsupported rule type {value!r}")
        return key

    def to_rule(self, native_namespace: str = "minecraft") -> ProductionRule:
        rule_id = qualify(self.id, native_namespace)
        provenance = self.provenance
        if provenance is None:
            namespace = rule_id.split(":", 1)[0]
            provenance = Provenance.NATIVE if namespace == native_namespace else Provenance.FOREIGN
        output_options = self.output.options(native_namespace)
        return ProductionRule(
            rule_id=rule_id,
            output=output_options[0],
            output_quantity=self.output.count,
            inputs=tuple(
                Ingredient(options=stack.options(native_namespace), quantity=stack.count) for stack in self.inputs
            ),
            method=METHOD_ALIASES[self.type],
            provenance=provenance,
        )


def _read_json(path: str | Path) -> Any:
    target = Path(path).expanduser()
    if not target.exists():
        raise RegistryLoadError(f"File does not exist: {target}")
    try:
        return json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RegistryLoadError(f"{target} is not valid JSON: {exc}") from exc


def parse_rules(payload: Any, *, native_namespace: str = "minecraft") -> list[ProductionRule]:
    """Validate raw rule records; invalid ones are skipped with a warning."""
    if isinstance(payload, dict):
        payload = payload.get("rules")
    if not isinstance(payload, list):
        raise RegistryLoadError("Rule registry must be a list of rules or an object with a 'rules' list")

    rules: list[ProductionRule] = []
    skipped = 0
    for position, raw in enumerate(payload):
        try:
            rules.append(RuleRecord.model_validate(raw).to_rule(native_namespace))
        except ValidationError as exc:
            skipped += 1
            rule_id = raw.get("id") if isinstance(raw, dict) else None
            logger.warning(
                "rule_record_skipped",
                extra={"position": position, "rule_id": rule_id, "error": exc.errors()[0]["msg"]},
            )
    logger.info("rules_loaded", extra={"loaded": len(rules), "skipped": skipped})
    return rules


def load_rules(path: str | Path, *, native_namespace: str = "minecraft") -> list[ProductionRule]:
    return parse_rules(_read_json(path), native_namespace=native_namespace)


def parse_inventory(payload: Any, *, namespace: str = "minecraft", source: str = "json") -> InventorySnapshot:
    """Accept ``{"item": count}`` or ``{"items": [{"item": ..., "count": ...}]}``."""
    entries: list[tuple[Any, Any]]
    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        entries = [
            (stack.get("item") or stack.get("id"), stack.get("count", 1))
            for stack in payload["items"]
            if isinstance(stack, dict)
        ]
    elif isinstance(payload, dict):
        entries = list(payload.items())
    else:
        raise RegistryLoadError("Inventory must be an object of counts or an object with an 'items' list")

    counts: dict[str, int] = {}
    for resource, count in entries:
        if not isinstance(resource, str) or not resource.strip():
            continue
        try:
            amount = int(count)
        except (TypeError, ValueError):
            logger.warning("inventory_entry_skipped", extra={"resource": resource, "count": count})
            continue
        if amount <= 0:
            continue
        key = qualify(resource, namespace)
        counts[key] = counts.get(key, 0) + amount
    return InventorySnapshot(counts=counts, source=source)


def load_inventory(path: str | Path, *, namespace: str = "minecraft") -> InventorySnapshot:
    return parse_inventory(_read_json(path), namespace=namespace, source=str(path))
