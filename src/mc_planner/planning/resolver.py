"""Recursive goal decomposition into a dependency tree.

Example, starting from an empty inventory::

    combine iron_pickaxe x1
    ├── smelt iron_ingot x3
    │   └── extract raw_iron x3
    └── combine stick x2
        └── combine oak_planks x2
            └── cut_from_block oak_log x1
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, MutableMapping

from mc_planner.models import ProductionRule, RuleMethod
from mc_planner.planning.classifier import classify
from mc_planner.planning.rule_index import RuleIndex
from mc_planner.planning.steps import METHOD_KINDS, DependencyNode, StepKind

DEFAULT_MAX_DEPTH = 10

Classifier = Callable[[str], StepKind]


class DependencyResolver:
    """Expands a (resource, quantity) goal against a rule index and a stock map.

    The availability map passed to :meth:`resolve` is shared by the whole call
    tree and only ever decreases: every ``ALREADY_AVAILABLE`` leaf and every
    partial claim takes stock out of it. A rejected rule attempt puts its claims
    back before the next candidate runs. The ancestor set is per path; each child
    gets a copy, so siblings never see each other's in-progress entries.
    """

    def __init__(
        self,
        index: RuleIndex,
        *,
        classifier: Classifier = classify,
        max_depth: int = DEFAULT_MAX_DEPTH,
        logger: logging.Logger | None = None,
    ) -> None:
        self._index = index
        self._classify = classifier
        self._max_depth = max_depth
        self._logger = logger or logging.getLogger("mc_planner.resolver")

    def resolve(self, resource: str, quantity: int, availability: MutableMapping[str, int]) -> DependencyNode:
        if quantity <= 0:
            raise ValueError(f"quantity must be positive, got {quantity}")
        return self._resolve(resource, quantity, availability, set(), 0)

    def _resolve(
        self,
        resource: str,
        quantity: int,
        availability: MutableMapping[str, int],
        ancestors: set[str],
        depth: int,
    ) -> DependencyNode:
        if depth > self._max_depth:
            self._logger.warning("resolve_depth_exceeded", extra={"resource": resource, "quantity": quantity})
            return DependencyNode(resource, quantity, StepKind.UNRESOLVED)

        on_hand = availability.get(resource, 0)
        if on_hand >= quantity:
            availability[resource] = on_hand - quantity
            self._logger.debug("resolve_available", extra={"resource": resource, "quantity": quantity, "depth": depth})
            return DependencyNode(resource, quantity, StepKind.ALREADY_AVAILABLE)

        remaining = quantity
        if on_hand > 0:
            remaining = quantity - on_hand
            availability[resource] = 0
            self._logger.debug(
                "resolve_partial_claim",
                extra={"resource": resource, "claimed": on_hand, "remaining": remaining, "depth": depth},
            )

        if resource in ancestors:
            self._logger.debug("resolve_cycle", extra={"resource": resource, "depth": depth})
            return DependencyNode(resource, remaining, self._classify(resource))

        # Raw materials never go through rules, even when a registry offers an
        # "uncrafting" path such as raw_iron_block -> 9 raw_iron.
        verdict = self._classify(resource)
        if verdict is not StepKind.UNRESOLVED:
            self._logger.debug("resolve_raw", extra={"resource": resource, "kind": verdict.value, "depth": depth})
            return DependencyNode(resource, remaining, verdict)

        ancestors.add(resource)
        try:
            node = self._resolve_with_rules(resource, remaining, availability, ancestors, depth)
        finally:
            ancestors.discard(resource)

        if node is not None:
            return node
        self._logger.debug("resolve_no_rule", extra={"resource": resource, "quantity": remaining, "depth": depth})
        return DependencyNode(resource, remaining, verdict)

    def _resolve_with_rules(
        self,
        resource: str,
        quantity: int,
        availability: MutableMapping[str, int],
        ancestors: set[str],
        depth: int,
    ) -> DependencyNode | None:
        # A rejected attempt hands its stock claims back before the next one runs.
        before = dict(availability)
        heat_attempt: DependencyNode | None = None
        after_heat: dict[str, int] = before
        heat_rule = self._pick_heat_rule(resource)
        if heat_rule is not None:
            heat_attempt = self._apply(heat_rule, quantity, availability, ancestors, depth)
            if self._accepts(heat_attempt):
                return heat_attempt
            after_heat = dict(availability)
            _restore(availability, before)

        combine_rules = self._index.combine_rules(resource)
        for rule in combine_rules:
            node = self._apply(rule, quantity, availability, ancestors, depth)
            if self._accepts(node):
                return node
            self._logger.debug("resolve_candidate_rejected", extra={"resource": resource, "rule_id": rule.rule_id})
            _restore(availability, before)

        if combine_rules and heat_attempt is not None:
            self._logger.debug("resolve_heat_fallback", extra={"resource": resource, "depth": depth})
            _restore(availability, after_heat)
            return heat_attempt

        for rule in self._index.cut_rules(resource):
            node = self._apply(rule, quantity, availability, ancestors, depth)
            if self._accepts(node):
                return node
            self._logger.debug("resolve_candidate_rejected", extra={"resource": resource, "rule_id": rule.rule_id})
            _restore(availability, before)

        return None

    @staticmethod
    def _accepts(node: DependencyNode) -> bool:
        """Native rules are authoritative; anything else needs a fully resolved subtree."""
        return (node.rule is not None and node.rule.is_native) or not node.has_unresolved()

    def _pick_heat_rule(self, resource: str) -> ProductionRule | None:
        candidates = self._index.heat_rules(resource)
        for rule in candidates:
            if rule.method == RuleMethod.HEAT_PRIMARY:
                return rule
        return candidates[0] if candidates else None

    def _apply(
        self,
        rule: ProductionRule,
        quantity: int,
        availability: MutableMapping[str, int],
        ancestors: set[str],
        depth: int,
    ) -> DependencyNode:
        applications = math.ceil(quantity / max(1, rule.output_quantity))
        grouped: dict[str, int] = {}
        for ingredient in rule.inputs:
            concrete = self._index.preferred_option(ingredient.options, availability)
            grouped[concrete] = grouped.get(concrete, 0) + ingredient.quantity * applications

        self._logger.debug(
            "resolve_apply_rule",
            extra={"rule_id": rule.rule_id, "applications": applications, "inputs": grouped, "depth": depth},
        )
        children = tuple(
            self._resolve(input_resource, input_quantity, availability, set(ancestors), depth + 1)
            for input_resource, input_quantity in grouped.items()
        )
        return DependencyNode(rule.output, quantity, METHOD_KINDS[rule.method], rule, children)


def _restore(availability: MutableMapping[str, int], snapshot: dict[str, int]) -> None:
    availability.clear()
    availability.update(snapshot)
