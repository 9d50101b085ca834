"""Tests for blockpalette.export: text, JSON, GPL, CSS, ACO and swatch exports."""

import json

import numpy as np
import pytest
from PIL import Image

from blockpalette.block_utils.catalog import BlockRecord
from blockpalette.export.palette_export import (
    get_exporter,
    load_palette_document,
    render_swatch,
    save_palette_json,
    save_swatch,
    to_aco_bytes,
    to_css,
    to_gpl,
    to_text_list,
)
from blockpalette.palette.models import BlockPalette, BlockRole, PaletteEntry, PaletteTheme


def _entry(block_id, rgb, role, notes):
    block = BlockRecord.create(block_id, color=rgb)
    return PaletteEntry(block=block, color=block.color, role=role, usage_notes=notes)


@pytest.fixture
def palette():
    return BlockPalette(
        "Test Palette",
        "Two blocks",
        PaletteTheme.NATURAL,
        (
            _entry("minecraft:red_wool", (161, 39, 35), BlockRole.PRIMARY, "Main"),
            _entry("minecraft:white_concrete", (207, 213, 214), BlockRole.ACCENT, "Trim"),
        ),
    )


@pytest.fixture
def empty_palette():
    return BlockPalette("Empty", "Nothing", PaletteTheme.GRADIENT, ())


class TestTextExports:
    def test_text_list(self, palette):
        assert to_text_list(palette) == (
            "# Test Palette\n"
            "Two blocks\n\n"
            "- Red Wool (#A12723): Main\n"
            "- White Concrete (#CFD5D6): Trim\n"
        )

    def test_text_list_method(self, palette):
        assert palette.to_text_list() == to_text_list(palette)

    def test_json(self, palette):
        data = json.loads(palette.to_json())
        assert data["name"] == "Test Palette"
        assert data["theme"] == "Natural"
        assert data["blocks"][0] == {
            "id": "minecraft:red_wool",
            "name": "Red Wool",
            "color": "#A12723",
            "role": "Primary",
            "usage": "Main",
        }
        assert data["blocks"][1]["role"] == "Accent"

    def test_gpl(self, palette):
        lines = to_gpl(palette).splitlines()
        assert lines[0] == "GIMP Palette"
        assert lines[1] == "Name: Test Palette"
        assert lines[4] == "161  39  35 Color 1"
        assert lines[5] == "207 213 214 Color 2"

    def test_css(self, palette):
        css = to_css(palette)
        assert css.startswith(":root {\n")
        assert "  --color-1: #A12723;\n" in css
        assert "  --color-2: #CFD5D6;\n" in css
        assert css.endswith("}\n")

    def test_registry(self, palette):
        assert get_exporter("GPL") is to_gpl
        assert get_exporter("text")(palette) == to_text_list(palette)
        assert get_exporter("pdf") is None

    def test_empty_palette(self, empty_palette):
        assert to_text_list(empty_palette) == "# Empty\nNothing\n\n"
        assert json.loads(empty_palette.to_json())["blocks"] == []


class TestBinaryExports:
    def test_aco(self, palette):
        data = to_aco_bytes(palette)
        assert len(data) == 4 + 10 * 2
        values = np.frombuffer(data, dtype=">u2")
        assert list(values[:2]) == [1, 2]
        assert list(values[2:7]) == [0, 161 << 8, 39 << 8, 35 << 8, 0]

    def test_swatch(self, palette):
        image = render_swatch(palette, swatch_size=10)
        assert image.size == (20, 10)
        assert image.getpixel((5, 5)) == (161, 39, 35, 255)
        assert image.getpixel((15, 9)) == (207, 213, 214, 255)

    def test_empty_swatch(self, empty_palette):
        image = render_swatch(empty_palette)
        assert image.size == (1, 1)
        assert image.getpixel((0, 0))[3] == 0


class TestFiles:
    def test_json_round_trip(self, palette, tmp_path):
        path = save_palette_json(palette, str(tmp_path / "out" / "palette.json"))
        document = load_palette_document(path)
        assert document == palette.to_document()

    def test_save_swatch(self, palette, tmp_path):
        path = save_swatch(palette, str(tmp_path / "swatch.png"), swatch_size=4)
        with Image.open(path) as image:
            assert image.size == (8, 4)
