"""Steps that have to happen before a plan can run: the right pickaxe, a furnace, fuel.

The resolver only answers "what does this item need"; it knows nothing about
the tools the actor holds. These helpers look at a finished plan and work out
what to splice in front of it with :meth:`CraftingPlan.prepend`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mc_planner.knowledge.ores import TIER_PICKAXES, required_mining_tier
from mc_planner.models import resource_path
from mc_planner.planning.plan import CraftingPlan, Step, build_plan
from mc_planner.planning.resolver import DependencyResolver
from mc_planner.planning.steps import StepKind

FURNACE_COBBLESTONE = 8
FUEL_LOGS = 4

_FUEL_NAMES = frozenset({"coal", "charcoal", "coal_block", "lava_bucket", "blaze_rod", "dried_kelp_block"})
_FUEL_SUFFIXES = ("_log", "_planks", "_wood", "_stem")
_FURNACES = frozenset({"furnace", "blast_furnace", "smoker"})

logger = logging.getLogger("mc_planner.prerequisites")


def _stock(availability: Mapping[str, int], path: str) -> int:
    return sum(count for resource, count in availability.items() if resource_path(resource) == path)


def is_fuel(resource: str) -> bool:
    path = resource_path(resource)
    return path in _FUEL_NAMES or path.endswith(_FUEL_SUFFIXES)


def held_pickaxe_tier(availability: Mapping[str, int]) -> int:
    """Best pickaxe tier found in stock, -1 when there is none."""
    best = -1
    for tier, pickaxe in TIER_PICKAXES.items():
        if _stock(availability, resource_path(pickaxe)) > 0:
            best = max(best, tier)
    return best


def required_tier(plan: CraftingPlan) -> int:
    tiers = [required_mining_tier(step.resource) for step in plan.steps if step.kind is StepKind.EXTRACT]
    return max(tiers, default=0)


def tool_prerequisites(
    plan: CraftingPlan,
    resolver: DependencyResolver,
    availability: Mapping[str, int],
    *,
    tool_tier: int = -1,
) -> list[Step]:
    """Tool-chain steps needed before the plan's ``EXTRACT`` steps can be mined.

    Each pickaxe below the required tier is resolved on a copy of
    ``availability``; the caller's map is left untouched.
    """
    needed = required_tier(plan)
    if needed == 0:
        return []

    have = max(tool_tier, held_pickaxe_tier(availability))
    if have >= needed:
        return []

    logger.info("tool_prerequisite_needed", extra={"required_tier": needed, "held_tier": have})
    chain = [TIER_PICKAXES[tier] for tier in range(max(have + 1, 0), needed + 1)]

    steps: list[Step] = []
    seen: set[tuple[StepKind, str]] = set()
    for tool in chain:
        if _stock(availability, resource_path(tool)) > 0:
            continue
        tool_plan = build_plan(resolver.resolve(tool, 1, dict(availability)))
        for step in tool_plan.steps:
            key = (step.kind, step.resource)
            if key in seen:
                continue
            seen.add(key)
            steps.append(step)
    return steps


def heat_prerequisites(
    plan: CraftingPlan,
    availability: Mapping[str, int],
    *,
    has_furnace: bool = False,
    namespace: str = "minecraft",
) -> list[Step]:
    """Cobblestone for a furnace and logs for fuel, when the plan heats anything."""
    if not any(step.kind.is_heat for step in plan.steps):
        return []

    steps: list[Step] = []
    furnace_on_hand = any(_stock(availability, name) > 0 for name in _FURNACES)
    if not has_furnace and not furnace_on_hand:
        planned = sum(
            step.quantity
            for step in plan.steps
            if step.kind is StepKind.COLLECT_SURFACE and resource_path(step.resource) == "cobblestone"
        )
        cobble = _stock(availability, "cobblestone") + planned
        if cobble < FURNACE_COBBLESTONE:
            steps.append(Step(StepKind.COLLECT_SURFACE, f"{namespace}:cobblestone", FURNACE_COBBLESTONE - cobble))

    has_fuel = any(count > 0 and is_fuel(resource) for resource, count in availability.items())
    chops = any(step.kind is StepKind.CUT_FROM_BLOCK for step in plan.steps)
    if not has_fuel and not chops:
        steps.append(Step(StepKind.CUT_FROM_BLOCK, f"{namespace}:oak_log", FUEL_LOGS))

    if steps:
        logger.info("heat_prerequisite_needed", extra={"prerequisites": [str(step) for step in steps]})
    return steps
