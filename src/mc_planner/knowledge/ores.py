"""Ore & resource mining guide: Y-level ranges, pickaxe tiers, and name matching.

Tiers follow the usual pickaxe ladder: 0=wood, 1=stone, 2=iron, 3=diamond,
4=netherite. Y-levels are overworld coordinates unless ``nether`` is set.
"""

from __future__ import annotations

from dataclasses import dataclass

from mc_planner.models import resource_path

TIER_NAMES = {0: "wood", 1: "stone", 2: "iron", 3: "diamond", 4: "netherite"}

# Pickaxe that unlocks each tier, in crafting order.
TIER_PICKAXES = {
    0: "minecraft:wooden_pickaxe",
    1: "minecraft:stone_pickaxe",
    2: "minecraft:iron_pickaxe",
    3: "minecraft:diamond_pickaxe",
    4: "minecraft:netherite_pickaxe",
}


@dataclass(slots=True, frozen=True)
class OreInfo:
    name: str
    min_y: int
    max_y: int
    best_y: int
    min_tier: int
    tip: str
    modded: bool = False
    nether: bool = False

    @property
    def tier_name(self) -> str:
        return TIER_NAMES.get(self.min_tier, "unknown")


ORES: tuple[OreInfo, ...] = (
    OreInfo("coal", 0, 320, 96, 0, "Abundant above Y=0. Best around Y=96. Any pickaxe works."),
    OreInfo("copper", -16, 112, 48, 1, "Most common around Y=48. Stone pickaxe+."),
    OreInfo("iron", -64, 320, 16, 1, "Two peaks: Y=16 and Y=256 (mountains). Best at Y=16. Stone pickaxe+."),
    OreInfo("lapis", -64, 64, 0, 1, "Best at Y=0 (triangle distribution). Stone pickaxe+."),
    OreInfo("gold", -64, 32, -16, 2, "Best at Y=-16. Iron pickaxe+. Also found in Nether."),
    OreInfo("redstone", -64, 16, -59, 2, "Most common at Y=-59 (bottom of world). Iron pickaxe+."),
    OreInfo("diamond", -64, 16, -59, 2, "Most common at Y=-59. Reduced near air exposure. Iron pickaxe+."),
    OreInfo("emerald", -16, 320, 232, 2, "Mountain biomes only. Best at high Y in mountains. Iron pickaxe+."),
    OreInfo("nether quartz", 10, 117, 15, 0, "Found throughout the Nether. Any pickaxe works.", nether=True),
    OreInfo("nether gold", 10, 117, 15, 0, "Found in Nether. Drops gold nuggets. Any pickaxe works.", nether=True),
    OreInfo(
        "ancient debris",
        8,
        119,
        15,
        3,
        "Extremely rare in Nether around Y=15. Diamond pickaxe required. Blast-resistant.",
        nether=True,
    ),
    OreInfo("osmium", -64, 60, 16, 1, "Mekanism. Similar to iron distribution. Stone pickaxe+.", modded=True),
    OreInfo("tin", -20, 90, 20, 1, "Mekanism/Thermal. Common around Y=20. Stone pickaxe+.", modded=True),
    OreInfo("lead", -64, 40, 8, 1, "Mekanism/Thermal/IE. Best around Y=8. Stone pickaxe+.", modded=True),
    OreInfo("uranium", -64, 20, -20, 2, "Mekanism. Deep underground near Y=-20. Iron pickaxe+.", modded=True),
    OreInfo("silver", -64, 40, -10, 2, "Thermal/IE. Deep underground. Iron pickaxe+.", modded=True),
    OreInfo("nickel", -64, 40, -10, 2, "Thermal/IE. Deep underground. Iron pickaxe+.", modded=True),
    OreInfo("zinc", -64, 70, 20, 1, "Create. Common around Y=20. Stone pickaxe+.", modded=True),
    OreInfo("certus quartz", -64, 40, 16, 2, "AE2. Found underground. Iron pickaxe+.", modded=True),
    OreInfo("iridium", -64, 10, -40, 3, "Various mods. Very deep, very rare. Diamond pickaxe required.", modded=True),
)

_ALIASES = {
    "quartz": "nether quartz",
    "lapis lazuli": "lapis",
    "netherite": "ancient debris",
    "netherite scrap": "ancient debris",
    "debris": "ancient debris",
}

_STRIP_PREFIXES = ("raw_", "deepslate_", "nether_")
_STRIP_SUFFIXES = ("_ore", "_ingot", "_nugget", "_dust", "_gem", "_crystal", "_block")

# Mined blocks that need a tier but are not ores.
_BLOCK_TIERS = {"obsidian": 3, "crying_obsidian": 3}


def _normalize(resource: str) -> str:
    path = resource_path(resource).lower().strip()
    nether = path.startswith("nether_") and path.endswith("_ore")
    for prefix in _STRIP_PREFIXES:
        if path.startswith(prefix):
            path = path[len(prefix):]
    for suffix in _STRIP_SUFFIXES:
        if path.endswith(suffix):
            path = path[: -len(suffix)]
    name = path.replace("_", " ").strip()
    if nether:
        name = f"nether {name}"
    return _ALIASES.get(name, name)


def find_ore(resource: str) -> OreInfo | None:
    """Find the ore entry for an ore block, raw drop, or mineral id.

    ``iron_ore``, ``deepslate_iron_ore``, ``raw_iron`` and ``minecraft:iron_ore``
    all match ``iron``; matching is by whole normalized name, never by substring.
    """
    name = _normalize(resource)
    for ore in ORES:
        if ore.name == name:
            return ore
    return None


def required_mining_tier(resource: str) -> int:
    path = resource_path(resource)
    if path in _BLOCK_TIERS:
        return _BLOCK_TIERS[path]
    ore = find_ore(resource)
    return ore.min_tier if ore else 0
