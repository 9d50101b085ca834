"""
Blending two colors at a parametric position.

All functions here are pure; they take Color values and return new ones.
"""

import math

from blockpalette.color.color import Color
from blockpalette.models import ColorSpace, EasingFunction


def apply_easing(t, easing=EasingFunction.LINEAR):
    """
    Remap a progress value t in [0, 1] through an easing curve.

    Every curve satisfies ease(0) == 0 and ease(1) == 1.
    """
    easing = EasingFunction(easing)
    if easing is EasingFunction.LINEAR:
        return t
    if easing is EasingFunction.EASE_IN:
        return t * t
    if easing is EasingFunction.EASE_OUT:
        return 1.0 - (1.0 - t) * (1.0 - t)
    if easing is EasingFunction.EASE_IN_OUT:
        if t < 0.5:
            return 2.0 * t * t
        return 1.0 - 2.0 * (1.0 - t) * (1.0 - t)
    if easing is EasingFunction.CUBIC_BEZIER:
        # smoothstep stands in for a full bezier solve
        return t * t * (3.0 - 2.0 * t)
    if easing is EasingFunction.SINE:
        return math.sin(t * math.pi / 2.0)
    # exponential
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * (t - 1.0))


def _lerp(a, b, t):
    return a * (1.0 - t) + b * t


def interpolate_hue(start_hue, end_hue, t):
    """Blend two hues along the shorter arc, result normalized into [0, 360)."""
    diff = end_hue - start_hue
    if diff > 180.0:
        diff -= 360.0
    elif diff < -180.0:
        diff += 360.0
    return (start_hue + diff * t) % 360.0


def interpolate_rgb(start, end, t):
    return Color(tuple(round(_lerp(a, b, t)) for a, b in zip(start.rgb, end.rgb)))


def interpolate_hsl(start, end, t):
    h = interpolate_hue(start.hsl[0], end.hsl[0], t)
    s = _lerp(start.hsl[1], end.hsl[1], t)
    l = _lerp(start.hsl[2], end.hsl[2], t)
    return Color.from_hsl(h, s, l)


def interpolate_oklab(start, end, t):
    return Color.from_oklab(*(_lerp(a, b, t) for a, b in zip(start.oklab, end.oklab)))


def interpolate_lab(start, end, t):
    return Color.from_lab(*(_lerp(a, b, t) for a, b in zip(start.lab, end.lab)))


_INTERPOLATORS = {
    ColorSpace.RGB: interpolate_rgb,
    ColorSpace.HSL: interpolate_hsl,
    ColorSpace.OKLAB: interpolate_oklab,
    ColorSpace.LAB: interpolate_lab,
}


def interpolate(start, end, t, color_space=ColorSpace.OKLAB):
    """
    Return the color at position t between start and end.

    Args:
        start: Color at t == 0
        end: Color at t == 1
        t: Position in [0, 1], already eased
        color_space: ColorSpace the blend runs in

    Returns:
        A new Color rebuilt from the blended representation
    """
    return _INTERPOLATORS[ColorSpace(color_space)](start, end, t)
