"""Step kinds and the dependency tree produced by the resolver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from mc_planner.models import ProductionRule, RuleMethod, resource_path


class StepKind(str, Enum):
    """How one resource is obtained. Declaration order has no meaning; see ``priority``."""

    COMBINE = "combine"
    SMELT = "smelt"
    BLAST = "blast"
    SMOKE = "smoke"
    CAMPFIRE_COOK = "campfire_cook"
    STONECUT = "stonecut"
    CUT_FROM_BLOCK = "cut_from_block"
    EXTRACT = "extract"
    COLLECT_SURFACE = "collect_surface"
    HARVEST = "harvest"
    HARVEST_ORGANISM = "harvest_organism"
    FISH = "fish"
    FARM = "farm"
    ALREADY_AVAILABLE = "already_available"
    UNRESOLVED = "unresolved"

    @property
    def priority(self) -> int:
        """Scheduling weight; lower runs earlier."""
        return _PRIORITIES[self]

    @property
    def is_async(self) -> bool:
        """Whether the step needs the actor out in the world for a while."""
        return self not in _SYNC_KINDS

    @property
    def is_leaf(self) -> bool:
        return self not in _RULE_KINDS

    @property
    def is_heat(self) -> bool:
        return self in _HEAT_KINDS


_PRIORITIES = {
    StepKind.ALREADY_AVAILABLE: 0,
    StepKind.CUT_FROM_BLOCK: 10,
    StepKind.COLLECT_SURFACE: 20,
    StepKind.EXTRACT: 30,
    StepKind.HARVEST_ORGANISM: 40,
    StepKind.FISH: 40,
    StepKind.FARM: 40,
    StepKind.HARVEST: 40,
    StepKind.SMELT: 50,
    StepKind.BLAST: 50,
    StepKind.SMOKE: 50,
    StepKind.CAMPFIRE_COOK: 50,
    StepKind.STONECUT: 55,
    StepKind.COMBINE: 60,
    StepKind.UNRESOLVED: 99,
}

_SYNC_KINDS = frozenset({StepKind.COMBINE, StepKind.STONECUT, StepKind.ALREADY_AVAILABLE, StepKind.UNRESOLVED})
_HEAT_KINDS = frozenset({StepKind.SMELT, StepKind.BLAST, StepKind.SMOKE, StepKind.CAMPFIRE_COOK})
_RULE_KINDS = _HEAT_KINDS | {StepKind.COMBINE, StepKind.STONECUT}

METHOD_KINDS = {
    RuleMethod.COMBINE: StepKind.COMBINE,
    RuleMethod.HEAT_PRIMARY: StepKind.SMELT,
    RuleMethod.HEAT_BLAST: StepKind.BLAST,
    RuleMethod.HEAT_SMOKE: StepKind.SMOKE,
    RuleMethod.HEAT_CAMPFIRE: StepKind.CAMPFIRE_COOK,
    RuleMethod.CUT: StepKind.STONECUT,
}


@dataclass(slots=True, frozen=True)
class DependencyNode:
    """One node of a resolved dependency tree; never mutated after construction."""

    resource: str
    quantity: int
    kind: StepKind
    rule: ProductionRule | None = None
    children: tuple[DependencyNode, ...] = ()

    def __post_init__(self) -> None:
        if self.kind.is_leaf and self.children:
            raise ValueError(f"{self.kind.value} node for {self.resource} cannot have children")

    def __str__(self) -> str:
        return f"{self.kind.value} {resource_path(self.resource)} x{self.quantity}"

    def walk(self) -> Iterator[DependencyNode]:
        """Yield every node in post-order, duplicates included."""
        for child in self.children:
            yield from child.walk()
        yield self

    def has_unresolved(self) -> bool:
        """True when this node or any descendant is ``UNRESOLVED``."""
        if self.kind is StepKind.UNRESOLVED:
            return True
        return any(child.has_unresolved() for child in self.children)

    def depth(self) -> int:
        if not self.children:
            return 0
        return 1 + max(child.depth() for child in self.children)


def render_tree(root: DependencyNode) -> str:
    """Render the tree with box-drawing branches, one node per line."""
    lines: list[str] = []

    def _render(node: DependencyNode, prefix: str, is_last: bool) -> None:
        lines.append(f"{prefix}{'└── ' if is_last else '├── '}{node}")
        child_prefix = prefix + ("    " if is_last else "│   ")
        for index, child in enumerate(node.children):
            _render(child, child_prefix, index == len(node.children) - 1)

    _render(root, "", True)
    return "\n".join(lines)
