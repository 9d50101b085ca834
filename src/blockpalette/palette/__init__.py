from blockpalette.palette.assembler import PaletteAssembler
from blockpalette.palette.models import BlockPalette, BlockRole, PaletteEntry, PaletteTheme

__all__ = ["BlockPalette", "BlockRole", "PaletteAssembler", "PaletteEntry", "PaletteTheme"]
