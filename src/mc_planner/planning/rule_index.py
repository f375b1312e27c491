"""Output-keyed index over a production rule registry snapshot.

Large modded registries contain plenty of rules that type-check but make no
sense as a plan ("log -> porkchop -> iron ingot"). Candidates for each output
are therefore ranked by a provenance score once, at index time, so the
resolver always tries the authoritative, simple rules first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from mc_planner.models import ProductionRule, RuleMethod, resource_namespace

NATIVE_SCORE = 1_000
UNTRUSTED_PENALTY = -500
NATIVE_INGREDIENT_BONUS = 20
FOREIGN_INGREDIENT_PENALTY = -10
UNINSPECTABLE_SCORE = -9_999

CRITICAL_OUTPUTS = (
    "minecraft:furnace",
    "minecraft:crafting_table",
    "minecraft:iron_pickaxe",
    "minecraft:iron_ingot",
    "minecraft:stone_pickaxe",
    "minecraft:wooden_pickaxe",
    "minecraft:chest",
    "minecraft:torch",
    "minecraft:stick",
    "minecraft:oak_planks",
)


class RuleIndex:
    """Combine, heat and cut rules keyed by output, each list sorted best first."""

    def __init__(
        self,
        *,
        native_namespace: str = "minecraft",
        untrusted_namespaces: Sequence[str] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.native_namespace = native_namespace
        self._untrusted = tuple(untrusted_namespaces)
        self._logger = logger or logging.getLogger("mc_planner.rule_index")
        self._combine: dict[str, list[ProductionRule]] = {}
        self._heat: dict[str, list[ProductionRule]] = {}
        self._cut: dict[str, list[ProductionRule]] = {}
        self.indexed = 0
        self.skipped = 0

    @classmethod
    def from_rules(
        cls,
        rules: Iterable[ProductionRule],
        *,
        native_namespace: str = "minecraft",
        untrusted_namespaces: Sequence[str] = (),
        logger: logging.Logger | None = None,
    ) -> RuleIndex:
        index = cls(native_namespace=native_namespace, untrusted_namespaces=untrusted_namespaces, logger=logger)
        for rule in rules:
            index.add(rule)
        index.sort()
        index._logger.info(
            "rule_index_built",
            extra={
                "indexed": index.indexed,
                "skipped": index.skipped,
                "combine_outputs": len(index._combine),
                "heat_outputs": len(index._heat),
                "cut_outputs": len(index._cut),
            },
        )
        return index

    def add(self, rule: ProductionRule) -> bool:
        """Index one rule; a rule that cannot be inspected is skipped, never raised."""
        try:
            output = rule.output
            if not isinstance(output, str) or not output:
                raise ValueError("rule has no output")
            if int(rule.output_quantity) <= 0:
                raise ValueError(f"non-positive output quantity {rule.output_quantity!r}")
            method = RuleMethod(rule.method)
            for ingredient in rule.inputs:
                if not ingredient.options:
                    raise ValueError("ingredient without options")
        except Exception as exc:  # noqa: BLE001 - registry entries come from arbitrary sources.
            self.skipped += 1
            self._logger.warning(
                "rule_skipped",
                extra={"rule_id": getattr(rule, "rule_id", None), "error": f"{type(exc).__name__}: {exc}"},
            )
            return False

        if method is RuleMethod.COMBINE:
            table = self._combine
        elif method is RuleMethod.CUT:
            table = self._cut
        else:
            table = self._heat
        table.setdefault(output, []).append(rule)
        self.indexed += 1
        return True

    def sort(self) -> None:
        for table in (self._combine, self._heat, self._cut):
            for candidates in table.values():
                candidates.sort(key=self.score, reverse=True)

    def __len__(self) -> int:
        return self.indexed

    def combine_rules(self, resource: str) -> list[ProductionRule]:
        return self._combine.get(resource, [])

    def heat_rules(self, resource: str) -> list[ProductionRule]:
        return self._heat.get(resource, [])

    def cut_rules(self, resource: str) -> list[ProductionRule]:
        return self._cut.get(resource, [])

    def has_rules(self, resource: str) -> bool:
        return resource in self._combine or resource in self._heat or resource in self._cut

    def outputs(self) -> list[str]:
        """Every resource with at least one rule, sorted."""
        return sorted({*self._combine, *self._heat, *self._cut})

    def is_native(self, resource: str) -> bool:
        return resource_namespace(resource) == self.native_namespace

    def is_untrusted(self, namespace: str) -> bool:
        return any(namespace.startswith(tag) for tag in self._untrusted)

    def preferred_option(self, options: Sequence[str], availability: Mapping[str, int] | None = None) -> str:
        """Pick one concrete resource out of an "any of these" requirement.

        Stock on hand wins, then the native option, then the first listed.
        """
        if availability:
            for option in options:
                if availability.get(option, 0) > 0:
                    return option
        for option in options:
            if self.is_native(option):
                return option
        return options[0]

    def score(self, rule: ProductionRule) -> int:
        """Provenance score used to rank competing rules; higher is better."""
        try:
            score = 0
            if rule.is_native:
                score += NATIVE_SCORE
            if self.is_untrusted(rule.namespace):
                score += UNTRUSTED_PENALTY
            for ingredient in rule.inputs:
                if self.is_native(self.preferred_option(ingredient.options)):
                    score += NATIVE_INGREDIENT_BONUS
                else:
                    score += FOREIGN_INGREDIENT_PENALTY
            return score
        except Exception:  # noqa: BLE001
            return UNINSPECTABLE_SCORE

    def missing_outputs(self, resources: Iterable[str] = CRITICAL_OUTPUTS) -> list[str]:
        """Report well-known outputs with no rules at all; usually a broken registry export."""
        missing = [resource for resource in resources if not self.has_rules(resource)]
        for resource in missing:
            self._logger.error("critical_output_unindexed", extra={"resource": resource})
        return missing


def index_rules(rules: Iterable[ProductionRule], **kwargs) -> RuleIndex:
    return RuleIndex.from_rules(rules, **kwargs)
