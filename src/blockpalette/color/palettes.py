"""
Color-level palette generation: harmonies, tonal ramps and themed gradients.

Nothing here knows about blocks; the palette assembler resolves these colors
to catalog entries.
"""

import numpy as np

from blockpalette.color.color import Color
from blockpalette.color.gradients import gradient_colors, multi_gradient_colors
from blockpalette.models import ColorSpace

BLACK = Color((0, 0, 0))
WHITE = Color((255, 255, 255))

# Anchor colors and interpolation space for each themed gradient
THEME_GRADIENTS = {
    "sunset": (
        [(255, 94, 77), (255, 154, 0), (255, 206, 84), (163, 94, 195), (25, 25, 112)],
        ColorSpace.OKLAB,
    ),
    "ocean": (
        [(135, 206, 235), (0, 119, 190), (0, 82, 164), (0, 39, 77), (0, 20, 40)],
        ColorSpace.OKLAB,
    ),
    "forest": (
        [(173, 255, 47), (50, 205, 50), (34, 139, 34), (0, 100, 0), (25, 25, 25)],
        ColorSpace.OKLAB,
    ),
    "fire": (
        [(255, 255, 0), (255, 165, 0), (255, 69, 0), (220, 20, 60), (139, 0, 0)],
        ColorSpace.RGB,
    ),
}


def complementary_colors(base):
    """Base color, its complement (180°) and the two triadic hues (120°, 240°)."""
    h, s, l = base.hsl
    palette = [base]
    for offset in (180.0, 120.0, 240.0):
        palette.append(Color.from_hsl((h + offset) % 360.0, s, l))
    return palette


def monochrome_colors(base, steps):
    """
    Tonal ramp from black through the base color to white, in Oklab.

    The base color sits at index steps // 2 and the result has exactly
    `steps` colors.
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [base]
    half = steps // 2
    dark = gradient_colors(BLACK, base, half + 1, ColorSpace.OKLAB)
    light = gradient_colors(base, WHITE, steps - half, ColorSpace.OKLAB)
    return dark + light[1:]


def distinct_colors(colors, max_colors):
    """
    Greedily pick up to `max_colors` colors that are as far apart as possible.

    Starts from the first color, then repeatedly adds the color whose nearest
    already-picked neighbor is furthest away (Oklab distance).
    """
    colors = list(colors)
    if len(colors) <= max_colors:
        return colors
    if max_colors <= 0:
        return []

    vectors = np.array([c.oklab for c in colors], dtype=float)
    chosen = [0]
    nearest = np.linalg.norm(vectors - vectors[0], axis=1)
    while len(chosen) < max_colors:
        candidates = nearest.copy()
        candidates[chosen] = -np.inf
        index = int(np.argmax(candidates))
        chosen.append(index)
        nearest = np.minimum(nearest, np.linalg.norm(vectors - vectors[index], axis=1))
    return [colors[i] for i in chosen]


def sort_by_hue(colors):
    return sorted(colors, key=lambda c: c.hsl[0])


def sort_by_lightness(colors):
    return sorted(colors, key=lambda c: c.hsl[2])


def theme_gradient_names():
    return list(THEME_GRADIENTS)


def theme_gradient_colors(name, steps):
    """
    Gradient through the curated anchors of a named theme.

    Returns:
        List of colors, or None for an unknown theme name
    """
    theme = THEME_GRADIENTS.get(name.lower())
    if theme is None:
        return None
    anchors, color_space = theme
    return multi_gradient_colors([Color(rgb) for rgb in anchors], steps, color_space)
