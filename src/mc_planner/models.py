from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_NAMESPACE = "minecraft"


def resource_namespace(resource: str) -> str:
    namespace, sep, _ = resource.partition(":")
    return namespace if sep else DEFAULT_NAMESPACE


def resource_path(resource: str) -> str:
    """Return the identifier without its namespace (``minecraft:stick`` -> ``stick``)."""
    _, sep, path = resource.partition(":")
    return path if sep else resource


def display_name(resource: str) -> str:
    return resource_path(resource).replace("_", " ").title()


class Provenance(str, Enum):
    """Where a production rule comes from."""

    NATIVE = "native"
    FOREIGN = "foreign"


class RuleMethod(str, Enum):
    """How a production rule turns its inputs into its output."""

    COMBINE = "combine"
    HEAT_PRIMARY = "heat_primary"
    HEAT_BLAST = "heat_blast"
    HEAT_SMOKE = "heat_smoke"
    HEAT_CAMPFIRE = "heat_campfire"
    CUT = "cut"

    @property
    def is_heat(self) -> bool:
        return self in _HEAT_METHODS


_HEAT_METHODS = frozenset(
    {RuleMethod.HEAT_PRIMARY, RuleMethod.HEAT_BLAST, RuleMethod.HEAT_SMOKE, RuleMethod.HEAT_CAMPFIRE}
)


@dataclass(slots=True, frozen=True)
class Ingredient:
    """One input slot of a rule; more than one option means any of them is accepted."""

    options: tuple[str, ...]
    quantity: int = 1

    @property
    def is_choice(self) -> bool:
        return len(self.options) > 1


@dataclass(slots=True, frozen=True)
class ProductionRule:
    rule_id: str
    output: str
    output_quantity: int
    inputs: tuple[Ingredient, ...] = ()
    method: RuleMethod = RuleMethod.COMBINE
    provenance: Provenance = Provenance.FOREIGN

    @property
    def namespace(self) -> str:
        return resource_namespace(self.rule_id)

    @property
    def is_native(self) -> bool:
        return self.provenance == Provenance.NATIVE


@dataclass(slots=True)
class InventorySnapshot:
    """Resource counts reported by an inventory source at one point in time."""

    counts: dict[str, int] = field(default_factory=dict)
    source: str = "none"

    def availability(self) -> dict[str, int]:
        """Return a fresh availability map; each goal gets its own copy."""
        return {resource: count for resource, count in self.counts.items() if count > 0}
