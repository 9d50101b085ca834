"""
Pydantic models and enumerations shared by the gradient and query layers.

These models describe how a gradient is generated: how many steps, which
color space the interpolation runs in and which easing curve shapes it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ColorSpace(str, Enum):
    """Color spaces available for gradient interpolation."""

    RGB = "rgb"
    HSL = "hsl"
    OKLAB = "oklab"
    LAB = "lab"


class EasingFunction(str, Enum):
    """Easing curves applied to the gradient position before interpolating."""

    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    CUBIC_BEZIER = "cubic_bezier"
    SINE = "sine"
    EXPONENTIAL = "exponential"


class ColorSamplingMethod(str, Enum):
    """How a block's representative color was sampled from its texture.

    Only meaningful to the texture extraction step; gradients carry it along
    unchanged.
    """

    DOMINANT = "dominant"
    AVERAGE = "average"
    CLUSTERING = "clustering"
    EDGE_WEIGHTED = "edge_weighted"
    MOST_FREQUENT = "most_frequent"


class GradientConfig(BaseModel):
    """Settings for a single gradient generation call."""

    model_config = ConfigDict(frozen=True)

    steps: int = Field(default=10, ge=0, description="Number of gradient steps")
    color_space: ColorSpace = Field(
        default=ColorSpace.OKLAB, description="Color space used for interpolation"
    )
    sampling_method: ColorSamplingMethod = Field(
        default=ColorSamplingMethod.DOMINANT,
        description="Texture sampling method the block colors came from",
    )
    easing: EasingFunction = Field(
        default=EasingFunction.LINEAR, description="Easing curve applied to t"
    )

    def with_steps(self, steps: int) -> "GradientConfig":
        return self.model_copy(update={"steps": steps})

    def with_color_space(self, color_space: ColorSpace) -> "GradientConfig":
        return self.model_copy(update={"color_space": ColorSpace(color_space)})

    def with_sampling(self, sampling: ColorSamplingMethod) -> "GradientConfig":
        return self.model_copy(update={"sampling_method": ColorSamplingMethod(sampling)})

    def with_easing(self, easing: EasingFunction) -> "GradientConfig":
        return self.model_copy(update={"easing": EasingFunction(easing)})
