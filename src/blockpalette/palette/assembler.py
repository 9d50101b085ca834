"""
Palette assembly: turning color relationships and curated block lists into
named palettes of real blocks.
"""

import logging

from blockpalette import config
from blockpalette.block_utils.block_filters import categorize_material
from blockpalette.block_utils.color_matcher import (
    find_blocks_by_color_range,
    resolve_gradient,
)
from blockpalette.color import palettes as color_palettes
from blockpalette.color.color import Color
from blockpalette.color.gradients import gradient_colors
from blockpalette.color.similarity import SimilarityMetric
from blockpalette.models import ColorSpace
from blockpalette.palette.models import BlockPalette, BlockRole, PaletteEntry, PaletteTheme
from blockpalette.palette.themes import get_architectural_style, get_natural_theme

logger = logging.getLogger("blockpalette.palette.assembler")

# Color used for curated blocks the catalog has no color for
FALLBACK_COLOR = Color((128, 128, 128))

USAGE_NOTES = {
    (BlockRole.PRIMARY, "stone"): "Excellent for foundations, walls, and main structures",
    (BlockRole.PRIMARY, "wood"): "Great for frames, floors, and warm architectural elements",
    (BlockRole.PRIMARY, "concrete"): "Perfect for modern builds and large surfaces",
    (BlockRole.SECONDARY, "stone"): "Use for detailing, trim, and structural accents",
    (BlockRole.SECONDARY, "wood"): "Ideal for stairs, slabs, and secondary features",
}

ROLE_NOTES = {
    BlockRole.SECONDARY: "Good for supporting elements and medium-scale features",
    BlockRole.ACCENT: "Use sparingly for highlights, borders, and eye-catching details",
    BlockRole.TRANSITION: "Perfect for gradual color changes and smooth blending",
    BlockRole.HIGHLIGHT: "Excellent for focal points, lighting accents, and key features",
}

DEFAULT_NOTE = "Versatile block suitable for various building applications"


def generate_usage_notes(block, role):
    """Usage guidance for a block in a role, based on its material."""
    material = categorize_material(block)
    note = USAGE_NOTES.get((role, material))
    if note is None:
        note = ROLE_NOTES.get(role, DEFAULT_NOTE)
    return note


def gradient_role(index, count):
    if index == 0:
        return BlockRole.PRIMARY
    if index == count - 1:
        return BlockRole.ACCENT
    if index == count // 2:
        return BlockRole.SECONDARY
    return BlockRole.TRANSITION


def monochrome_role(index, count):
    # Darkest first, the base color in the middle and the lightest last
    if count == 1:
        return BlockRole.PRIMARY
    if index == 0:
        return BlockRole.ACCENT
    if index == count // 2:
        return BlockRole.PRIMARY
    if index == count - 1:
        return BlockRole.HIGHLIGHT
    return BlockRole.SECONDARY


def complementary_role(index, count):
    if index == 0:
        return BlockRole.PRIMARY
    if index == 1:
        return BlockRole.ACCENT
    return BlockRole.SECONDARY


def themed_role(index, count):
    if index == 0:
        return BlockRole.PRIMARY
    if index == 1:
        return BlockRole.SECONDARY
    if index == count - 1:
        return BlockRole.ACCENT
    return BlockRole.TRANSITION


def make_entry(block, role, color=None):
    return PaletteEntry(
        block=block,
        color=color or block.color or FALLBACK_COLOR,
        role=role,
        usage_notes=generate_usage_notes(block, role),
    )


class PaletteAssembler:
    """
    Builds BlockPalette objects from a catalog.

    Every generator returns None when the theme is unknown, the input block
    has no color, or the optional BlockFilter leaves no usable block.
    """

    def __init__(self, catalog, metric=SimilarityMetric.OKLAB):
        self.catalog = catalog
        self.metric = SimilarityMetric(metric)

    def _lookup(self, block):
        if isinstance(block, str):
            return self.catalog.get(block)
        return block

    def _resolve_palette(self, targets, role_for, block_filter=None):
        """Resolve target colors to blocks, allowing repeats, and tag roles by target position."""
        predicate = block_filter.allows if block_filter is not None else None
        # Without uniqueness every target resolves, or none do when nothing is eligible
        resolved = resolve_gradient(
            targets, self.catalog, self.metric, unique=False, predicate=predicate
        )
        count = len(targets)
        return [make_entry(block, role_for(i, count)) for i, block in enumerate(resolved)]

    def _palette(self, name, description, theme, entries):
        if not entries:
            logger.warning(f"No blocks available for palette '{name}'")
            return None
        logger.info(f"Assembled palette '{name}' with {len(entries)} blocks")
        return BlockPalette(name, description, theme, tuple(entries))

    def _usable(self, block, block_filter):
        return (
            block is not None
            and block.color is not None
            and (block_filter is None or block_filter.allows(block))
        )

    def block_gradient(self, start, end, steps=config.DEFAULT_GRADIENT_STEPS, block_filter=None):
        """
        Gradient palette between two blocks.

        Args:
            start: BlockRecord or block id
            end: BlockRecord or block id
            steps: Number of gradient steps
            block_filter: Optional BlockFilter for endpoints and resolved blocks

        Returns:
            BlockPalette or None
        """
        start_block = self._lookup(start)
        end_block = self._lookup(end)
        if not (self._usable(start_block, block_filter) and self._usable(end_block, block_filter)):
            return None

        targets = gradient_colors(start_block.color, end_block.color, steps, ColorSpace.OKLAB)
        entries = self._resolve_palette(targets, gradient_role, block_filter)
        start_name = start_block.display_name
        end_name = end_block.display_name
        return self._palette(
            f"{start_name} to {end_name} Gradient",
            f"A smooth gradient from {start_name} to {end_name} using {len(entries)} blocks "
            "for natural color flow",
            PaletteTheme.GRADIENT,
            entries,
        )

    def monochrome(self, base, steps=config.DEFAULT_MONOCHROME_STEPS, block_filter=None):
        """Tonal palette from dark to light around a base block."""
        base_block = self._lookup(base)
        if not self._usable(base_block, block_filter):
            return None

        targets = color_palettes.monochrome_colors(base_block.color, steps)
        entries = self._resolve_palette(targets, monochrome_role, block_filter)
        name = base_block.display_name
        return self._palette(
            f"{name} Monochrome",
            f"A monochrome palette based on {name} with {len(entries)} tonal variations "
            "from dark to light",
            PaletteTheme.MONOCHROME,
            entries,
        )

    def complementary(self, base, block_filter=None):
        """Base block with its complementary and triadic counterparts."""
        base_block = self._lookup(base)
        if not self._usable(base_block, block_filter):
            return None

        targets = color_palettes.complementary_colors(base_block.color)
        entries = self._resolve_palette(targets, complementary_role, block_filter)
        name = base_block.display_name
        return self._palette(
            f"{name} Complementary",
            f"A complementary color scheme based on {name} with high contrast blocks",
            PaletteTheme.COMPLEMENTARY,
            entries,
        )

    def _themed(self, definition, theme, block_filter):
        count = len(definition.block_ids)
        entries = []
        for index, block_id in enumerate(definition.block_ids):
            block = self.catalog.get(block_id)
            if block is None:
                logger.debug(f"Themed block {block_id} is not in the catalog")
                continue
            if block_filter is not None and not block_filter.allows(block):
                continue
            entries.append(make_entry(block, themed_role(index, count)))
        return self._palette(definition.name, definition.description, theme, entries)

    def natural(self, theme, block_filter=None):
        """Biome palette (forest, desert, ocean, mountain, nether, end)."""
        definition = get_natural_theme(theme)
        if definition is None:
            logger.warning(f"Unknown natural theme: {theme}")
            return None
        return self._themed(definition, PaletteTheme.NATURAL, block_filter)

    def architectural(self, style, block_filter=None):
        """Building style palette (medieval, modern, rustic, industrial)."""
        definition = get_architectural_style(style)
        if definition is None:
            logger.warning(f"Unknown architectural style: {style}")
            return None
        return self._themed(definition, PaletteTheme.ARCHITECTURAL, block_filter)

    def theme_gradient(self, theme, steps=config.DEFAULT_THEME_STEPS, block_filter=None):
        """Palette following one of the curated color gradients (sunset, ocean, forest, fire)."""
        targets = color_palettes.theme_gradient_colors(theme, steps)
        if targets is None:
            logger.warning(f"Unknown gradient theme: {theme}")
            return None
        entries = self._resolve_palette(targets, gradient_role, block_filter)
        title = theme.lower().capitalize()
        return self._palette(
            f"{title} Gradient",
            f"Blocks following the {theme.lower()} color gradient",
            PaletteTheme.GRADIENT,
            entries,
        )

    def find_blocks_by_color_range(
        self,
        target,
        tolerance=config.DEFAULT_COLOR_TOLERANCE,
        max_blocks=config.DEFAULT_MAX_BLOCKS,
        block_filter=None,
    ):
        """Blocks within `tolerance` of a color, nearest first."""
        predicate = block_filter.allows if block_filter is not None else None
        return find_blocks_by_color_range(
            target, self.catalog, tolerance, max_blocks, self.metric, predicate
        )
