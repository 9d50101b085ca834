"""
Color distance metrics.

Every metric here is a true distance: non-negative, symmetric and zero for
identical colors.
"""

import math
from enum import Enum


class SimilarityMetric(str, Enum):
    """Distance metrics available for color matching."""

    OKLAB = "oklab"
    RGB = "rgb"
    LAB = "lab"
    HSL = "hsl"


def _euclidean(a, b):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def oklab_distance(color1, color2):
    """Euclidean distance in the simple Oklab space (perceptually uniform)."""
    return _euclidean(color1.oklab, color2.oklab)


def rgb_distance(color1, color2):
    """Euclidean distance between RGB byte triples."""
    return _euclidean(color1.rgb, color2.rgb)


def delta_e_cie76(color1, color2):
    """CIE76 Delta E, i.e. Euclidean distance in Lab."""
    return _euclidean(color1.lab, color2.lab)


def hsl_distance(color1, color2):
    """
    Hue-aware HSL distance.

    The hue difference takes the short way around the wheel, is scaled into
    [0, 0.5] and weighted by the mean saturation so that hue matters little
    between near-grey colors.
    """
    h1, s1, l1 = color1.hsl
    h2, s2, l2 = color2.hsl
    dh = abs(h1 - h2) % 360.0
    dh = min(dh, 360.0 - dh) / 360.0
    weighted_dh = dh * (s1 + s2) / 2.0
    return math.sqrt(weighted_dh**2 + (s1 - s2) ** 2 + (l1 - l2) ** 2)


_METRICS = {
    SimilarityMetric.OKLAB: oklab_distance,
    SimilarityMetric.RGB: rgb_distance,
    SimilarityMetric.LAB: delta_e_cie76,
    SimilarityMetric.HSL: hsl_distance,
}


def color_distance(color1, color2, metric=SimilarityMetric.OKLAB):
    """Distance between two colors under the given metric."""
    return _METRICS[SimilarityMetric(metric)](color1, color2)


def find_most_similar(target, candidates, metric=SimilarityMetric.OKLAB):
    """
    Find the candidate color closest to a target.

    Args:
        target: Color to match
        candidates: Sequence of Color objects
        metric: SimilarityMetric to compare with

    Returns:
        Tuple of (index, distance) for the closest candidate, or None if there
        are no candidates. The first of several equally close candidates wins.
    """
    best = None
    for index, candidate in enumerate(candidates):
        distance = color_distance(target, candidate, metric)
        if best is None or distance < best[1]:
            best = (index, distance)
    return best
