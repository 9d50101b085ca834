"""
Immutable color value carrying every representation the library works with.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from blockpalette.color import spaces
from blockpalette.color.similarity import (
    SimilarityMetric,
    color_distance,
    oklab_distance,
    rgb_distance,
)

Triple = Tuple[float, float, float]


@dataclass(frozen=True)
class Color:
    """
    A color stored as RGB with HSL, Oklab, Lab, Oklch and packed hex derived
    once at construction.

    Two colors are equal when their RGB triples are equal; the derived
    representations are pure functions of RGB.
    """

    rgb: Tuple[int, int, int]
    hsl: Triple = field(init=False, repr=False, compare=False)
    oklab: Triple = field(init=False, repr=False, compare=False)
    lab: Triple = field(init=False, repr=False, compare=False)
    oklch: Triple = field(init=False, repr=False, compare=False)
    hex: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        r, g, b = (max(0, min(255, int(c))) for c in self.rgb)
        object.__setattr__(self, "rgb", (r, g, b))
        object.__setattr__(self, "hsl", spaces.rgb_to_hsl(r, g, b))
        object.__setattr__(self, "oklab", spaces.rgb_to_oklab_simple(r, g, b))
        object.__setattr__(self, "lab", spaces.rgb_to_lab(r, g, b))
        object.__setattr__(self, "oklch", spaces.rgb_to_oklch(r, g, b))
        object.__setattr__(self, "hex", (r << 16) | (g << 8) | b)

    @classmethod
    def from_rgb(cls, r, g, b) -> "Color":
        return cls((r, g, b))

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Build a color from "#RRGGBB" (raises ValueError when malformed)."""
        return cls(spaces.hex_to_rgb(hex_color))

    @classmethod
    def from_hsl(cls, h, s, l) -> "Color":
        return cls(spaces.hsl_to_rgb(h, s, l))

    @classmethod
    def from_hsv(cls, h, s, v) -> "Color":
        return cls(spaces.hsv_to_rgb(h, s, v))

    @classmethod
    def from_oklab(cls, lightness, a, b) -> "Color":
        """Build a color from simple-Oklab coordinates (lossy through RGB bytes)."""
        return cls(spaces.oklab_simple_to_rgb(lightness, a, b))

    @classmethod
    def from_lab(cls, lightness, a, b) -> "Color":
        return cls(spaces.lab_to_rgb(lightness, a, b))

    @property
    def hex_string(self) -> str:
        """Upper-case "#RRGGBB" string."""
        return f"#{self.hex:06X}"

    @property
    def hue(self) -> float:
        return self.hsl[0]

    @property
    def lightness(self) -> float:
        return self.hsl[2]

    @property
    def brightness(self) -> int:
        """Perceived brightness as the plain channel sum R+G+B."""
        return sum(self.rgb)

    def vector(self, metric=SimilarityMetric.OKLAB) -> Optional[Triple]:
        """Coordinates whose Euclidean distance implements the metric, if any."""
        metric = SimilarityMetric(metric)
        if metric is SimilarityMetric.OKLAB:
            return self.oklab
        if metric is SimilarityMetric.RGB:
            return self.rgb
        if metric is SimilarityMetric.LAB:
            return self.lab
        return None

    def distance_oklab(self, other: "Color") -> float:
        return oklab_distance(self, other)

    def distance_rgb(self, other: "Color") -> float:
        return rgb_distance(self, other)

    def distance(self, other: "Color", metric=SimilarityMetric.OKLAB) -> float:
        return color_distance(self, other, metric)

    def __str__(self):
        return self.hex_string
