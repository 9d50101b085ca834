"""
Palette export functionality.

Palettes can be written as a plain text list, a JSON document, GIMP (.gpl),
CSS custom properties, Adobe swatches (.aco) or a PNG swatch strip.
"""

import json
import logging
import os
from typing import List

import numpy as np
from pydantic import BaseModel, Field

logger = logging.getLogger("blockpalette.export.palette_export")


class PaletteBlockDocument(BaseModel):
    """One palette entry in a JSON export."""

    id: str = Field(..., description="Block identifier")
    name: str = Field(..., description="Display name")
    color: str = Field(..., description="Color as #RRGGBB")
    role: str = Field(..., description="Role of the block in the palette")
    usage: str = Field(..., description="Usage guidance")


class PaletteDocument(BaseModel):
    """JSON export of a whole palette."""

    name: str = Field(..., description="Palette name")
    description: str = Field(..., description="Palette description")
    theme: str = Field(..., description="How the palette was generated")
    blocks: List[PaletteBlockDocument] = Field(default_factory=list)


def to_text_list(palette):
    """
    Export a palette as a text list for easy copying.

    Format:
        # <name>
        <description>

        - <display name> (<#RRGGBB>): <usage notes>
    """
    lines = [f"# {palette.name}\n", f"{palette.description}\n\n"]
    for entry in palette.entries:
        lines.append(f"- {entry.display_name} ({entry.hex_string}): {entry.usage_notes}\n")
    return "".join(lines)


def to_document(palette):
    """Build the PaletteDocument for a palette."""
    return PaletteDocument(
        name=palette.name,
        description=palette.description,
        theme=palette.theme.value,
        blocks=[
            PaletteBlockDocument(
                id=entry.id,
                name=entry.display_name,
                color=entry.hex_string,
                role=entry.role.value,
                usage=entry.usage_notes,
            )
            for entry in palette.entries
        ],
    )


def to_json(palette, indent=2):
    return to_document(palette).model_dump_json(indent=indent)


def save_palette_json(palette, output_path):
    """
    Save a palette as a JSON document.

    Args:
        palette: BlockPalette to save
        output_path: Path of the JSON file to write

    Returns:
        Path to the saved file
    """
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(to_document(palette).model_dump(), f, indent=2)
    logger.info(f"Saved palette '{palette.name}' to {output_path}")
    return output_path


def load_palette_document(path):
    """Load a previously saved palette JSON file as a PaletteDocument."""
    with open(path, "r", encoding="utf-8") as f:
        return PaletteDocument.model_validate(json.load(f))


def to_gpl(palette):
    """Export as a GIMP palette file."""
    lines = ["GIMP Palette", f"Name: {palette.name}", "Columns: 0", "#"]
    for i, entry in enumerate(palette.entries, start=1):
        r, g, b = entry.color.rgb
        lines.append(f"{r:3} {g:3} {b:3} Color {i}")
    return "\n".join(lines) + "\n"


def to_css(palette):
    """Export as CSS custom properties on :root."""
    lines = [":root {"]
    for i, entry in enumerate(palette.entries, start=1):
        lines.append(f"  --color-{i}: {entry.hex_string};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_aco_bytes(palette):
    """
    Export as an Adobe Color Swatch (version 1) byte string.

    Every value is a big-endian unsigned 16 bit integer: version, color
    count, then per color the RGB color space id (0), three channels scaled
    to 16 bits and a zero pad.
    """
    values = [1, len(palette.entries)]
    for entry in palette.entries:
        r, g, b = entry.color.rgb
        values.extend([0, r << 8, g << 8, b << 8, 0])
    return np.array(values, dtype=">u2").tobytes()


def render_swatch(palette, swatch_size=64):
    """
    Render a palette as a horizontal strip of color squares.

    Args:
        palette: BlockPalette to render
        swatch_size: Edge length of each square in pixels

    Returns:
        PIL Image (1x1 transparent image for an empty palette)
    """
    from PIL import Image, ImageDraw

    count = len(palette.entries)
    if count == 0:
        return Image.new("RGBA", (1, 1), (0, 0, 0, 0))

    image = Image.new("RGBA", (count * swatch_size, swatch_size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    for i, entry in enumerate(palette.entries):
        x0 = i * swatch_size
        draw.rectangle(
            [x0, 0, x0 + swatch_size - 1, swatch_size - 1],
            fill=entry.color.rgb + (255,),
        )
    return image


def save_swatch(palette, output_path, swatch_size=64):
    """Render a palette swatch and save it (format from the file extension)."""
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    render_swatch(palette, swatch_size).save(output_path)
    logger.info(f"Saved swatch for '{palette.name}' to {output_path}")
    return output_path


# Text based formats by name
EXPORTERS = {
    "text": to_text_list,
    "json": to_json,
    "gpl": to_gpl,
    "css": to_css,
}


def get_exporter(name):
    """Get a text exporter by format name, or None."""
    return EXPORTERS.get(name.lower())
