"""
Curated block lists for the natural and architectural palettes.
"""

from collections import namedtuple

ThemeDefinition = namedtuple("ThemeDefinition", ["name", "description", "block_ids"])

NATURAL_THEMES = {
    "forest": ThemeDefinition(
        "Forest Biome",
        "Natural forest colors with browns, greens, and earth tones",
        [
            "minecraft:oak_log",
            "minecraft:oak_leaves",
            "minecraft:grass_block",
            "minecraft:coarse_dirt",
            "minecraft:moss_block",
            "minecraft:fern",
        ],
    ),
    "desert": ThemeDefinition(
        "Desert Biome",
        "Warm sandy colors and sun-baked earth tones",
        [
            "minecraft:sand",
            "minecraft:sandstone",
            "minecraft:smooth_sandstone",
            "minecraft:cut_sandstone",
            "minecraft:red_sand",
            "minecraft:terracotta",
        ],
    ),
    "ocean": ThemeDefinition(
        "Ocean Biome",
        "Cool blues and aquatic colors for underwater builds",
        [
            "minecraft:water",
            "minecraft:prismarine",
            "minecraft:dark_prismarine",
            "minecraft:sea_lantern",
            "minecraft:kelp",
            "minecraft:sand",
        ],
    ),
    "mountain": ThemeDefinition(
        "Mountain Biome",
        "Rocky grays and mineral tones for mountainous terrain",
        [
            "minecraft:stone",
            "minecraft:cobblestone",
            "minecraft:andesite",
            "minecraft:granite",
            "minecraft:diorite",
            "minecraft:gravel",
        ],
    ),
    "nether": ThemeDefinition(
        "Nether Dimension",
        "Dark reds, blacks, and otherworldly colors",
        [
            "minecraft:netherrack",
            "minecraft:nether_bricks",
            "minecraft:blackstone",
            "minecraft:crimson_planks",
            "minecraft:warped_planks",
            "minecraft:soul_sand",
        ],
    ),
    "end": ThemeDefinition(
        "End Dimension",
        "Pale yellows, purples, and ethereal tones",
        [
            "minecraft:end_stone",
            "minecraft:purpur_block",
            "minecraft:end_stone_bricks",
            "minecraft:obsidian",
            "minecraft:chorus_flower",
            "minecraft:chorus_plant",
        ],
    ),
}

NATURAL_THEME_ALIASES = {
    "woods": "forest",
    "sand": "desert",
    "water": "ocean",
    "stone": "mountain",
}

ARCHITECTURAL_STYLES = {
    "medieval": ThemeDefinition(
        "Medieval Architecture",
        "Traditional building materials for castles and medieval structures",
        [
            "minecraft:cobblestone",
            "minecraft:oak_planks",
            "minecraft:stone_bricks",
            "minecraft:dark_oak_planks",
            "minecraft:mossy_cobblestone",
            "minecraft:oak_log",
        ],
    ),
    "modern": ThemeDefinition(
        "Modern Architecture",
        "Clean lines and contemporary materials for modern builds",
        [
            "minecraft:white_concrete",
            "minecraft:light_gray_concrete",
            "minecraft:glass",
            "minecraft:iron_block",
            "minecraft:quartz_block",
            "minecraft:black_concrete",
        ],
    ),
    "rustic": ThemeDefinition(
        "Rustic Style",
        "Natural materials for farmhouses and country builds",
        [
            "minecraft:stripped_oak_log",
            "minecraft:cobblestone",
            "minecraft:coarse_dirt",
            "minecraft:hay_block",
            "minecraft:oak_fence",
            "minecraft:stone",
        ],
    ),
    "industrial": ThemeDefinition(
        "Industrial Style",
        "Metallic and mechanical blocks for factories and tech builds",
        [
            "minecraft:iron_block",
            "minecraft:gray_concrete",
            "minecraft:observer",
            "minecraft:anvil",
            "minecraft:cauldron",
            "minecraft:redstone_block",
        ],
    ),
}


def natural_themes():
    """Names of the natural palettes (aliases not included)."""
    return list(NATURAL_THEMES)


def architectural_styles():
    return list(ARCHITECTURAL_STYLES)


def get_natural_theme(name):
    """Look up a natural theme by name or alias, case-insensitively."""
    key = name.lower()
    return NATURAL_THEMES.get(NATURAL_THEME_ALIASES.get(key, key))


def get_architectural_style(name):
    return ARCHITECTURAL_STYLES.get(name.lower())
