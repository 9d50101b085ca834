"""
Palette value types: roles, themes, entries and the palette itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from blockpalette.block_utils.catalog import BlockRecord
from blockpalette.color.color import Color


class BlockRole(str, Enum):
    """What a block is used for within a palette."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    ACCENT = "Accent"
    TRANSITION = "Transition"
    HIGHLIGHT = "Highlight"


class PaletteTheme(str, Enum):
    """How a palette was generated."""

    MONOCHROME = "Monochrome"
    GRADIENT = "Gradient"
    COMPLEMENTARY = "Complementary"
    NATURAL = "Natural"
    ARCHITECTURAL = "Architectural"


@dataclass(frozen=True)
class PaletteEntry:
    """A recommended block with its color, role and usage guidance."""

    block: BlockRecord
    color: Color
    role: BlockRole
    usage_notes: str

    @property
    def id(self) -> str:
        return self.block.id

    @property
    def display_name(self) -> str:
        return self.block.display_name

    @property
    def hex_string(self) -> str:
        return self.color.hex_string


@dataclass(frozen=True)
class BlockPalette:
    """A named, described collection of palette entries."""

    name: str
    description: str
    theme: PaletteTheme
    entries: Tuple[PaletteEntry, ...]

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def blocks(self):
        """The palette's BlockRecord objects in order."""
        return [entry.block for entry in self.entries]

    def to_text_list(self) -> str:
        from blockpalette.export.palette_export import to_text_list

        return to_text_list(self)

    def to_document(self):
        from blockpalette.export.palette_export import to_document

        return to_document(self)

    def to_json(self, indent=2) -> str:
        from blockpalette.export.palette_export import to_json

        return to_json(self, indent=indent)
