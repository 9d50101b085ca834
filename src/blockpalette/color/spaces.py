"""
Conversions between RGB and the other color spaces a Color caches.

HSL and HSV go through the standard library, CIE Lab (D65) and Oklch through
coloraide. The "simple" Oklab used for catalog-wide distance scans is a cheap
linear approximation of Oklab, not the real non-linear transform.
"""

import colorsys
import math
import re

from coloraide import Color as ColorAide

HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}")


def _to_byte(value):
    """Scale a 0-1 channel to a clamped 0-255 integer."""
    return max(0, min(255, int(round(value * 255.0))))


def _nan_to_zero(value):
    return 0.0 if math.isnan(value) else float(value)


def hex_to_rgb(hex_color):
    """
    Parse a hex color string into an (r, g, b) tuple.

    Accepts "#RRGGBB", "RRGGBB" and the short "#RGB" form.

    Raises:
        ValueError: If the string is not a valid hex color
    """
    value = hex_color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Hex color must have 6 digits: {hex_color!r}")
    # int(..., 16) alone would accept signs and underscores
    if not HEX_DIGITS.fullmatch(value):
        raise ValueError(f"Invalid hex digits in color: {hex_color!r}")
    packed = int(value, 16)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def rgb_to_hsl(r, g, b):
    """Convert RGB to (hue degrees in [0, 360), saturation, lightness)."""
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return (h * 360.0) % 360.0, s, l


def hsl_to_rgb(h, s, l):
    """Convert HSL (hue in degrees) back to an RGB byte triple."""
    s = max(0.0, min(1.0, s))
    l = max(0.0, min(1.0, l))
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
    return _to_byte(r), _to_byte(g), _to_byte(b)


def hsv_to_rgb(h, s, v):
    """Convert HSV (hue in degrees) to an RGB byte triple."""
    r, g, b = colorsys.hsv_to_rgb((h % 360.0) / 360.0, s, v)
    return _to_byte(r), _to_byte(g), _to_byte(b)


def rgb_to_oklab_simple(r, g, b):
    """Linear Oklab approximation: luminance plus two opponent axes."""
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    lightness = 0.2126 * rf + 0.7152 * gf + 0.0722 * bf
    a = (rf - gf) * 0.5
    b_val = (rf + gf - 2.0 * bf) * 0.25
    return lightness, a, b_val


def oklab_simple_to_rgb(lightness, a, b):
    """Exact inverse of rgb_to_oklab_simple, clamped into the RGB cube."""
    r = lightness + 1.5026 * a + 0.1444 * b
    g = r - 2.0 * a
    b_val = r - a - 2.0 * b
    return _to_byte(r), _to_byte(g), _to_byte(b_val)


def rgb_to_lab(r, g, b):
    """CIE Lab with a D65 white point (L in 0-100)."""
    lab = ColorAide("srgb", [r / 255.0, g / 255.0, b / 255.0]).convert("lab-d65")
    return _nan_to_zero(lab[0]), _nan_to_zero(lab[1]), _nan_to_zero(lab[2])


def lab_to_rgb(lightness, a, b):
    """Convert CIE Lab (D65) to an RGB byte triple, clipping out-of-gamut values."""
    srgb = ColorAide("lab-d65", [lightness, a, b]).convert("srgb")
    return tuple(_to_byte(_nan_to_zero(srgb[i])) for i in range(3))


def rgb_to_oklch(r, g, b):
    """Oklch as (lightness, chroma, hue degrees); achromatic hue is 0."""
    oklch = ColorAide("srgb", [r / 255.0, g / 255.0, b / 255.0]).convert("oklch")
    hue = _nan_to_zero(oklch[2]) % 360.0
    return _nan_to_zero(oklch[0]), _nan_to_zero(oklch[1]), hue
