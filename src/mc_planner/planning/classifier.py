"""Classify resources that are obtained in the world rather than produced by a rule.

Every predicate is anchored (exact name, prefix or suffix). Plain substring
checks misfire on crafted items: ``wooden_pickaxe`` contains "wood" and
``sandstone`` contains "sand", yet neither is a raw material.
"""

from __future__ import annotations

from mc_planner.models import resource_path
from mc_planner.planning.steps import StepKind

_MINERALS = frozenset(
    {
        "diamond",
        "emerald",
        "coal",
        "lapis_lazuli",
        "redstone",
        "quartz",
        "amethyst_shard",
        "ancient_debris",
        "glowstone_dust",
        "deepslate",
    }
)

_TIMBER_SUFFIXES = ("_log", "_wood", "_stem", "_hyphae")
_TIMBER_NAMES = frozenset({"bamboo_block"})

_SURFACE_NAMES = frozenset(
    {
        "cobblestone",
        "cobbled_deepslate",
        "sand",
        "red_sand",
        "soul_sand",
        "gravel",
        "clay_ball",
        "clay",
        "dirt",
        "flint",
        "obsidian",
        "ice",
        "snow_block",
        "snowball",
        "netherrack",
        "soul_soil",
        "basalt",
        "blackstone",
        "end_stone",
        "moss_block",
        "mud",
        "dripstone_block",
        "pointed_dripstone",
        "calcite",
        "tuff",
        "stone",
    }
)

_ORGANISM_DROPS = frozenset(
    {
        "leather",
        "string",
        "bone",
        "spider_eye",
        "gunpowder",
        "ender_pearl",
        "blaze_rod",
        "ghast_tear",
        "slime_ball",
        "phantom_membrane",
        "rabbit_hide",
        "rabbit_foot",
        "feather",
        "ink_sac",
        "glow_ink_sac",
        "rotten_flesh",
        "bone_meal",
        "wither_skeleton_skull",
        "shulker_shell",
        "prismarine_shard",
        "prismarine_crystals",
        "magma_cream",
        "porkchop",
        "beef",
        "chicken",
        "mutton",
        "rabbit",
        "egg",
    }
)

_FISH = frozenset({"cod", "salmon", "tropical_fish", "pufferfish"})

_CROPS = frozenset(
    {
        "wheat",
        "wheat_seeds",
        "carrot",
        "potato",
        "beetroot",
        "beetroot_seeds",
        "melon_slice",
        "pumpkin",
        "sugar_cane",
        "bamboo",
        "cactus",
        "kelp",
        "cocoa_beans",
        "sweet_berries",
        "glow_berries",
        "nether_wart",
        "chorus_fruit",
        "apple",
    }
)

_FLORA_NAMES = frozenset(
    {
        "dandelion",
        "poppy",
        "blue_orchid",
        "allium",
        "azure_bluet",
        "oxeye_daisy",
        "cornflower",
        "lily_of_the_valley",
        "sunflower",
        "lilac",
        "rose_bush",
        "peony",
        "lily_pad",
        "vine",
        "short_grass",
        "tall_grass",
        "fern",
        "seagrass",
    }
)
_FLORA_SUFFIXES = ("_mushroom", "_tulip")


def classify(resource: str) -> StepKind:
    """Return how ``resource`` is acquired in the world, or ``UNRESOLVED``.

    Pure: consults neither rules nor availability.
    """
    path = resource_path(resource)

    if path.startswith("raw_") or path.endswith("_ore") or path in _MINERALS:
        return StepKind.EXTRACT
    if path.endswith(_TIMBER_SUFFIXES) or path.startswith("stripped_") or path in _TIMBER_NAMES:
        return StepKind.CUT_FROM_BLOCK
    if path in _SURFACE_NAMES or path.endswith("_sand"):
        return StepKind.COLLECT_SURFACE
    if path in _ORGANISM_DROPS or path.endswith("_wool"):
        return StepKind.HARVEST_ORGANISM
    if path in _FISH:
        return StepKind.FISH
    if path in _CROPS:
        return StepKind.FARM
    if path in _FLORA_NAMES or path.endswith(_FLORA_SUFFIXES):
        return StepKind.HARVEST
    return StepKind.UNRESOLVED
