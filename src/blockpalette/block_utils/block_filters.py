"""
Block classification heuristics based on block identifiers, and the
configurable BlockFilter built on top of them.

The catalog carries no shape or physics data, so every classification here
is a keyword match against the lower-cased identifier.
"""

import re
from typing import List

from pydantic import BaseModel, Field

PARTIAL_BLOCK_KEYWORDS = (
    "slab", "stairs", "fence", "gate", "wall", "door", "trapdoor", "button",
    "pressure_plate", "carpet", "torch", "lantern", "chain", "rod", "bars",
)

TILE_ENTITY_KEYWORDS = (
    "chest", "furnace", "dispenser", "dropper", "hopper", "beacon",
    "brewing_stand", "enchanting_table", "ender_chest", "shulker_box", "barrel",
    "smoker", "blast_furnace", "campfire", "lectern", "jukebox",
)

TRANSPARENT_KEYWORDS = (
    "glass", "water", "lava", "ice", "slime_block", "honey_block", "barrier",
    "structure_void",
)

LIGHT_SOURCE_KEYWORDS = (
    "torch", "lantern", "glowstone", "sea_lantern", "beacon", "campfire", "fire",
    "lava", "magma_block", "jack_o_lantern", "redstone_lamp", "shroomlight",
    "crying_obsidian", "respawn_anchor", "candle", "glow_lichen",
    "amethyst_cluster",
)

SUPPORT_KEYWORDS = (
    "torch", "flower", "fern", "sapling", "wheat", "carrot", "potato",
    "beetroot", "sugar_cane", "cactus", "bamboo", "vine", "lily_pad", "seagrass",
    "kelp", "button", "lever", "sign", "banner", "painting",
)

CREATIVE_ONLY_KEYWORDS = (
    "barrier", "structure_void", "structure_block", "command_block", "jigsaw",
    "debug_stick", "knowledge_book", "spawn_egg",
)

# Partial shapes excluded by the solid and structural presets
PARTIAL_SHAPE_PATTERNS = [
    "_slab", "_stairs", "_fence", "_gate", "_wall", "_button",
    "_pressure_plate", "_door", "_trapdoor",
]

MATERIAL_KEYWORDS = [
    ("stone", ("stone", "cobblestone", "brick")),
    ("wood", ("wood", "plank", "log")),
    ("concrete", ("concrete", "terracotta")),
    ("fabric", ("wool", "carpet")),
    ("glass", ("glass",)),
    ("metal", ("metal", "iron", "gold")),
]

FAMILY_SUFFIXES = [
    ("_stairs", "stairs"),
    ("_slab", "slab"),
    ("_wool", "wool"),
    ("_concrete", "concrete"),
    ("_log", "log"),
    ("_planks", "planks"),
    ("_leaves", "leaves"),
]


def _block_id(block):
    return (block if isinstance(block, str) else block.id).lower()


def _name_part(block_id):
    return block_id.split(":", 1)[-1]


def _contains_any(text, keywords):
    return any(keyword in text for keyword in keywords)


def is_full_block(block):
    """False for slabs, stairs, fences and other partial shapes."""
    return not _contains_any(_block_id(block), PARTIAL_BLOCK_KEYWORDS)


def is_tile_entity(block):
    return _contains_any(_block_id(block), TILE_ENTITY_KEYWORDS)


def is_falling_block(block):
    """Blocks affected by gravity: sand, gravel, anvils and concrete powder."""
    name = _name_part(_block_id(block))
    if name == "sand" or (name.endswith("_sand") and name != "soul_sand"):
        return True
    return _contains_any(name, ("gravel", "anvil", "concrete_powder"))


def is_transparent(block):
    name = _name_part(_block_id(block))
    # "air" only as a whole word, otherwise stairs would count as transparent
    if name == "air" or name.endswith("_air"):
        return True
    return _contains_any(name, TRANSPARENT_KEYWORDS)


def is_light_source(block):
    return _contains_any(_block_id(block), LIGHT_SOURCE_KEYWORDS)


def needs_support(block):
    """Blocks that pop off without a supporting block (plants, torches, signs)."""
    block_id = _block_id(block)
    if _contains_any(block_id, SUPPORT_KEYWORDS):
        return True
    if "grass" in block_id and "grass_block" not in block_id:
        return True
    if "mushroom" in block_id and "mushroom_block" not in block_id:
        return True
    return "coral" in block_id and "coral_block" not in block_id


def is_survival_obtainable(block):
    return not _contains_any(_block_id(block), CREATIVE_ONLY_KEYWORDS)


def block_family(block):
    """
    Coarse family name of a block, e.g. "stairs", "wool", "log" or "stone".

    Blocks outside the known families are their own family (the identifier
    without namespace).
    """
    name = _name_part(_block_id(block))
    for suffix, family in FAMILY_SUFFIXES:
        if name.endswith(suffix):
            return family
    if "stone" in name and "redstone" not in name:
        return "stone"
    if "glass" in name:
        return "glass"
    return name


def categorize_material(block):
    """Material category used for usage notes: stone, wood, concrete, fabric, glass, metal or other."""
    block_id = _block_id(block)
    for category, keywords in MATERIAL_KEYWORDS:
        if _contains_any(block_id, keywords):
            return category
    return "other"


def matches_pattern(text, pattern):
    """
    Match an identifier against a pattern.

    Patterns containing "*" are wildcards over the whole identifier, anything
    else is a substring match. Matching is case-insensitive.
    """
    text = text.lower()
    pattern = pattern.lower()
    if "*" not in pattern:
        return pattern in text
    regex = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.fullmatch(regex, text, flags=re.DOTALL) is not None


class BlockFilter(BaseModel):
    """Which blocks may appear in a palette or gradient."""

    exclude_falling: bool = Field(default=False, description="Exclude gravity affected blocks")
    exclude_tile_entities: bool = Field(default=False, description="Exclude chests, furnaces and similar")
    full_blocks_only: bool = Field(default=False, description="Exclude slabs, stairs and other partial shapes")
    exclude_needs_support: bool = Field(default=False, description="Exclude plants, torches and similar")
    exclude_transparent: bool = Field(default=False, description="Exclude glass, water and similar")
    exclude_light_sources: bool = Field(default=False, description="Exclude light emitting blocks")
    survival_obtainable_only: bool = Field(default=False, description="Exclude creative-only blocks")
    exclude_patterns: List[str] = Field(default_factory=list, description="Id substrings to exclude")
    include_patterns: List[str] = Field(
        default_factory=list,
        description="Id substrings a block must match; checked before any exclusion",
    )

    @classmethod
    def solid_blocks_only(cls):
        """Solid, full, survival-obtainable building blocks."""
        return cls(
            exclude_falling=True,
            exclude_tile_entities=True,
            full_blocks_only=True,
            exclude_needs_support=True,
            exclude_transparent=True,
            survival_obtainable_only=True,
            exclude_patterns=list(PARTIAL_SHAPE_PATTERNS),
        )

    @classmethod
    def decorative_blocks(cls):
        """Anything placeable and stable, partial shapes included."""
        return cls(
            exclude_falling=True,
            exclude_tile_entities=True,
            survival_obtainable_only=True,
        )

    @classmethod
    def structural_blocks_only(cls):
        """Solid blocks that also do not emit light and are not see-through."""
        return cls(
            exclude_falling=True,
            exclude_tile_entities=True,
            full_blocks_only=True,
            exclude_needs_support=True,
            exclude_transparent=True,
            exclude_light_sources=True,
            survival_obtainable_only=True,
            exclude_patterns=PARTIAL_SHAPE_PATTERNS + ["glass", "water", "lava", "air"],
        )

    def allows(self, block):
        """
        Check whether a block passes the filter.

        Args:
            block: BlockRecord or block id string

        Returns:
            True if the block may be used
        """
        block_id = _block_id(block)

        if self.include_patterns and not any(
            pattern.lower() in block_id for pattern in self.include_patterns
        ):
            return False
        if any(pattern.lower() in block_id for pattern in self.exclude_patterns):
            return False

        checks = [
            (self.exclude_falling, is_falling_block),
            (self.exclude_tile_entities, is_tile_entity),
            (self.exclude_needs_support, needs_support),
            (self.exclude_transparent, is_transparent),
            (self.exclude_light_sources, is_light_source),
        ]
        if any(enabled and check(block_id) for enabled, check in checks):
            return False
        if self.full_blocks_only and not is_full_block(block_id):
            return False
        if self.survival_obtainable_only and not is_survival_obtainable(block_id):
            return False
        return True

    def __call__(self, block):
        return self.allows(block)
