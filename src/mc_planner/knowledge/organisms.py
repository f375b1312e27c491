"""Which organism yields a given drop."""

from __future__ import annotations

from mc_planner.models import resource_path

DROP_SOURCES: dict[str, str] = {
    "leather": "cow",
    "beef": "cow",
    "string": "spider",
    "spider_eye": "spider",
    "bone": "skeleton",
    "bone_meal": "skeleton",
    "gunpowder": "creeper",
    "ender_pearl": "enderman",
    "blaze_rod": "blaze",
    "ghast_tear": "ghast",
    "slime_ball": "slime",
    "phantom_membrane": "phantom",
    "rabbit_hide": "rabbit",
    "rabbit_foot": "rabbit",
    "rabbit": "rabbit",
    "feather": "chicken",
    "chicken": "chicken",
    "egg": "chicken",
    "ink_sac": "squid",
    "glow_ink_sac": "glow_squid",
    "rotten_flesh": "zombie",
    "wither_skeleton_skull": "wither_skeleton",
    "shulker_shell": "shulker",
    "prismarine_shard": "guardian",
    "prismarine_crystals": "guardian",
    "magma_cream": "magma_cube",
    "porkchop": "pig",
    "mutton": "sheep",
    "nether_star": "wither",
    "dragon_breath": "ender_dragon",
    "dragon_egg": "ender_dragon",
    "totem_of_undying": "evoker",
    "nautilus_shell": "drowned",
    "heart_of_the_sea": "buried_treasure",
    "turtle_scute": "turtle",
    "scute": "turtle",
    "armadillo_scute": "armadillo",
    "breeze_rod": "breeze",
}


def organism_for_drop(resource: str) -> str:
    """Name the creature to hunt for ``resource``; unknown drops name themselves."""
    path = resource_path(resource)
    if path in DROP_SOURCES:
        return DROP_SOURCES[path]
    if path.endswith("_wool"):
        return "sheep"
    return path
