"""
Export functionality for block palettes.
"""

from blockpalette.export.palette_export import (
    get_exporter,
    render_swatch,
    save_palette_json,
    save_swatch,
    to_aco_bytes,
    to_css,
    to_gpl,
    to_json,
    to_text_list,
)

__all__ = [
    "get_exporter",
    "render_swatch",
    "save_palette_json",
    "save_swatch",
    "to_aco_bytes",
    "to_css",
    "to_gpl",
    "to_json",
    "to_text_list",
]
