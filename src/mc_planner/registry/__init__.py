"""Rule registry and inventory providers."""

from dataclasses import dataclass
from pathlib import Path

from mc_planner.models import InventorySnapshot, ProductionRule

from .interfaces import InventorySource, RuleRegistry
from .loader import RegistryLoadError, load_inventory, load_rules, parse_inventory, parse_rules, qualify


@dataclass(slots=True)
class JsonRuleRegistry:
    """Rule registry backed by a JSON export on disk."""

    path: Path
    native_namespace: str = "minecraft"

    def rules(self) -> list[ProductionRule]:
        return load_rules(self.path, native_namespace=self.native_namespace)


@dataclass(slots=True)
class JsonInventorySource:
    """Inventory source backed by a JSON snapshot; a missing path means empty stock."""

    path: Path | None = None
    namespace: str = "minecraft"

    def snapshot(self) -> InventorySnapshot:
        if self.path is None:
            return InventorySnapshot()
        return load_inventory(self.path, namespace=self.namespace)


__all__ = [
    "InventorySource",
    "JsonInventorySource",
    "JsonRuleRegistry",
    "RegistryLoadError",
    "RuleRegistry",
    "load_inventory",
    "load_rules",
    "parse_inventory",
    "parse_rules",
    "qualify",
]
