"""
blockpalette: color-aware queries, gradients and palettes over Minecraft
block catalogs.
"""

from blockpalette.block_utils.block_filters import BlockFilter
from blockpalette.block_utils.block_loader import load_catalog, load_default_catalog
from blockpalette.block_utils.catalog import BlockCatalog, BlockRecord
from blockpalette.color.color import Color
from blockpalette.color.similarity import SimilarityMetric
from blockpalette.models import ColorSamplingMethod, ColorSpace, EasingFunction, GradientConfig
from blockpalette.query_builder import BlockQuery

__version__ = "0.1.0"

__all__ = [
    "BlockCatalog",
    "BlockFilter",
    "BlockQuery",
    "BlockRecord",
    "Color",
    "ColorSamplingMethod",
    "ColorSpace",
    "EasingFunction",
    "GradientConfig",
    "SimilarityMetric",
    "load_catalog",
    "load_default_catalog",
]
