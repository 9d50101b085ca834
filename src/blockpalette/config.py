"""
Configuration settings for blockpalette.
"""

import os

# Bundled block data
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
BLOCK_COLORS_CSV = os.path.join(DATA_DIR, "block_colors.csv")
BLOCK_PROPERTIES_JSON = os.path.join(DATA_DIR, "block_properties.json")

# Catalog files, overridable with an os.pathsep separated list
_catalog_env = os.environ.get("BLOCKPALETTE_CATALOG", "")
CATALOG_PATHS = (
    [p for p in _catalog_env.split(os.pathsep) if p]
    if _catalog_env
    else [BLOCK_COLORS_CSV, BLOCK_PROPERTIES_JSON]
)

# Palette and gradient defaults
DEFAULT_GRADIENT_STEPS = 10
DEFAULT_MONOCHROME_STEPS = 7
DEFAULT_THEME_STEPS = 8
DEFAULT_COLOR_TOLERANCE = 0.1
DEFAULT_MAX_BLOCKS = 20

# API settings
API_TITLE = "Block Palette API"
API_VERSION = "0.1.0"
CORS_ORIGINS = os.environ.get("BLOCKPALETTE_CORS_ORIGINS", "*").split(",")
