"""Advisory text for resources the companion cannot obtain on its own (or only slowly).

Tables are keyed by resource path. The difficulty analyzer decides severity from
which table a resource is found in.
"""

from __future__ import annotations

# Cannot be produced or gathered at all; someone has to hand it over.
UNOBTAINABLE: dict[str, str] = {
    "bedrock": "Bedrock cannot be broken in survival.",
    "spawner": "Spawners cannot be picked up, even with Silk Touch.",
    "trial_spawner": "Trial spawners cannot be picked up.",
    "budding_amethyst": "Budding amethyst breaks without dropping anything.",
    "reinforced_deepslate": "Reinforced deepslate only generates in ancient cities and cannot be mined.",
    "end_portal_frame": "End portal frames cannot be mined in survival.",
    "command_block": "Command blocks are creative-only.",
    "barrier": "Barriers are creative-only.",
    "structure_block": "Structure blocks are creative-only.",
    "debug_stick": "The debug stick is creative-only.",
    "knowledge_book": "Knowledge books are creative-only.",
    "petrified_oak_slab": "Petrified oak slabs are not obtainable in survival.",
}

# Advisory text shown when a step stays unresolved.
UNRESOLVED_HINTS: dict[str, str] = {
    "enchanted_book": "Enchanted books come from enchanting, villager trades, or loot chests.",
    "name_tag": "Name tags come from fishing, villager trades, or loot chests.",
    "saddle": "Saddles come from fishing, villager trades, or loot chests.",
    "music_disc_13": "Music discs come from dungeon loot or creepers killed by skeletons.",
    "trident": "Tridents only drop from drowned; the companion cannot craft one.",
    "elytra": "Elytra are only found in end ships.",
    "enchanted_golden_apple": "Enchanted golden apples are loot-only.",
    "netherite_upgrade_smithing_template": "Netherite upgrade templates are found in bastion remnants.",
    "heart_of_the_sea": "Hearts of the sea come from buried treasure chests.",
    "totem_of_undying": "Totems drop from evokers in woodland mansions and raids.",
    "potion": "Potions require brewing, which the companion does not automate.",
    "filled_map": "Maps must be filled in by exploring.",
}

GENERIC_UNRESOLVED = (
    "No recipe or gathering method is known for this item. "
    "It may be loot-only, trade-only, or need a machine the companion cannot use."
)

# Needs a boss fight, a rare structure, or another dimension's endgame.
EXTREME: dict[str, str] = {
    "nether_star": "Requires summoning and defeating the Wither.",
    "dragon_breath": "Requires fighting the Ender Dragon and bottling its breath.",
    "dragon_egg": "Only one exists; it appears after the Ender Dragon is defeated.",
    "wither_skeleton_skull": "Wither skeleton skulls are a rare drop in nether fortresses.",
    "ancient_debris": "Ancient debris is extremely rare and needs a diamond pickaxe.",
    "netherite_scrap": "Netherite scrap is smelted from rare ancient debris.",
    "shulker_shell": "Shulkers live in end cities, beyond the Ender Dragon.",
    "echo_shard": "Echo shards are only found in ancient city loot.",
}

# Dangerous or environment-restricted.
HARD: dict[str, str] = {
    "blaze_rod": "Blazes only spawn in nether fortresses.",
    "ghast_tear": "Ghasts fly over lava in the Nether; tears often fall out of reach.",
    "ender_pearl": "Endermen are dangerous to fight and rare in some biomes.",
    "magma_cream": "Magma cubes live in the Nether.",
    "prismarine_shard": "Guardians live in ocean monuments.",
    "prismarine_crystals": "Guardians live in ocean monuments.",
    "phantom_membrane": "Phantoms only spawn after several sleepless nights.",
    "diamond": "Diamonds are deep underground and need an iron pickaxe.",
    "emerald": "Emerald ore only generates in mountain biomes.",
    "obsidian": "Obsidian needs a diamond pickaxe and a water/lava setup or a portal site.",
    "crying_obsidian": "Crying obsidian is found in ruined portals and bastions.",
    "glowstone_dust": "Glowstone hangs from nether ceilings.",
    "nether_wart": "Nether wart grows in nether fortresses.",
    "chorus_fruit": "Chorus plants only grow on the outer End islands.",
    "end_stone": "End stone is only found in the End.",
    "glow_ink_sac": "Glow squids only spawn in dark underground water.",
}

# Merely slow; worth mentioning but not blocking.
MODERATE: dict[str, str] = {
    "wither_rose": "Wither roses only appear when the Wither kills a mob.",
    "sponge": "Sponges drop from elder guardians in ocean monuments.",
    "cocoa_beans": "Cocoa only grows on jungle trees.",
    "sweet_berries": "Sweet berries grow in taiga biomes.",
    "bamboo": "Bamboo grows in jungle biomes.",
    "slime_ball": "Slimes spawn in swamps at night or deep slime chunks.",
    "rabbit_foot": "Rabbit feet are a rare drop.",
    "ink_sac": "Squids have to be hunted in water.",
    "pufferfish": "Pufferfish are a rare catch.",
    "tropical_fish": "Tropical fish are a rare catch outside warm oceans.",
    "honeycomb": "Honeycomb needs a full bee nest and shears.",
    "amethyst_shard": "Amethyst geodes are underground and easy to miss.",
}

# Every step of these kinds needs another dimension.
NETHER_RESOURCES = frozenset(
    {"netherrack", "soul_sand", "soul_soil", "basalt", "blackstone", "quartz", "nether_quartz_ore", "nether_gold_ore"}
)
