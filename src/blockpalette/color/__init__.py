"""
Color representation, distance metrics, interpolation and gradients.
"""

from blockpalette.color.color import Color
from blockpalette.color.gradients import gradient_colors, multi_gradient_colors
from blockpalette.color.interpolation import apply_easing, interpolate, interpolate_hue
from blockpalette.color.similarity import SimilarityMetric, color_distance

__all__ = [
    "Color",
    "SimilarityMetric",
    "apply_easing",
    "color_distance",
    "gradient_colors",
    "interpolate",
    "interpolate_hue",
    "multi_gradient_colors",
]
