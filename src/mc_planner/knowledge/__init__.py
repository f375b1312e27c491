"""Static game knowledge used to classify resources and annotate plans."""

from .ores import ORES, TIER_PICKAXES, OreInfo, find_ore, required_mining_tier
from .organisms import organism_for_drop

__all__ = ["ORES", "TIER_PICKAXES", "OreInfo", "find_ore", "organism_for_drop", "required_mining_tier"]
