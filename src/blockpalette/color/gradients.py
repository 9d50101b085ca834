"""
Gradient sequencing: turning anchor colors into N evenly spaced targets.
"""

import logging

from blockpalette.color.interpolation import apply_easing, interpolate
from blockpalette.models import ColorSpace, EasingFunction

logger = logging.getLogger("blockpalette.color.gradients")


def gradient_colors(
    start,
    end,
    steps,
    color_space=ColorSpace.OKLAB,
    easing=EasingFunction.LINEAR,
):
    """
    Generate a two-color gradient.

    Args:
        start: First Color
        end: Last Color
        steps: Number of colors to produce
        color_space: ColorSpace to interpolate in
        easing: EasingFunction applied to each position

    Returns:
        List of `steps` colors. One step yields only the start color and two
        steps yield exactly the endpoints.
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [start]
    if steps == 2:
        return [start, end]

    colors = []
    for i in range(steps):
        t = apply_easing(i / (steps - 1), easing)
        colors.append(interpolate(start, end, t, color_space))
    return colors


def segment_step_counts(segments, steps):
    """
    Split `steps` output colors across gradient segments.

    Each count includes both segment endpoints. Every segment after the first
    drops its start color when concatenated, so the counts sum to
    steps + segments - 1 and the later segments get the remainder.
    """
    total = steps + segments - 1
    base, extra = divmod(total, segments)
    return [base + (1 if i >= segments - extra else 0) for i in range(segments)]


def multi_gradient_colors(
    anchors,
    steps,
    color_space=ColorSpace.OKLAB,
    easing=EasingFunction.LINEAR,
):
    """
    Generate a gradient passing through every anchor color in order.

    Segment gradients are concatenated, skipping the duplicated boundary
    color at the start of every segment but the first.

    Returns:
        List of exactly `steps` colors (empty when there are no anchors).
    """
    anchors = list(anchors)
    if not anchors or steps <= 0:
        return []
    if len(anchors) == 1:
        return [anchors[0]] * steps
    if steps == 1:
        return [anchors[0]]

    segments = len(anchors) - 1
    counts = segment_step_counts(segments, steps)
    logger.debug(f"Multi-gradient of {steps} steps over {segments} segments: {counts}")

    colors = []
    for i, count in enumerate(counts):
        segment = gradient_colors(anchors[i], anchors[i + 1], count, color_space, easing)
        colors.extend(segment if i == 0 else segment[1:])
    return colors


def gradient_from_config(start, end, config):
    """Two-color gradient using a GradientConfig."""
    return gradient_colors(start, end, config.steps, config.color_space, config.easing)


def multi_gradient_from_config(anchors, config):
    """Multi-anchor gradient using a GradientConfig."""
    return multi_gradient_colors(anchors, config.steps, config.color_space, config.easing)
