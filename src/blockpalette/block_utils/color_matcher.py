"""
Functions for color matching and finding the closest block colors.
"""

import logging

import numpy as np

from blockpalette.color.similarity import SimilarityMetric, color_distance

logger = logging.getLogger("blockpalette.block_utils.color_matcher")


def color_distances(target, catalog, metric=SimilarityMetric.OKLAB):
    """
    Distance from a target color to every colored record of a catalog.

    Args:
        target: Color to compare against
        catalog: BlockCatalog
        metric: SimilarityMetric

    Returns:
        numpy array aligned with catalog.colored_records()
    """
    metric = SimilarityMetric(metric)
    vectors = catalog.vectors(metric)
    if vectors is None:
        return np.array(
            [color_distance(target, r.color, metric) for r in catalog.colored_records()],
            dtype=float,
        )
    if len(vectors) == 0:
        return np.zeros(0, dtype=float)
    return np.linalg.norm(vectors - np.asarray(target.vector(metric), dtype=float), axis=1)


def eligibility_mask(catalog, predicate=None):
    """Boolean mask over colored records that satisfy a predicate."""
    records = catalog.colored_records()
    if predicate is None:
        return np.ones(len(records), dtype=bool)
    return np.array([bool(predicate(r)) for r in records], dtype=bool)


def _closest_index(distances, allowed):
    if not allowed.any():
        return None
    masked = np.where(allowed, distances, np.inf)
    # argmin returns the first minimum, i.e. the earliest record in catalog order
    return int(np.argmin(masked))


def find_closest_block(
    target,
    catalog,
    metric=SimilarityMetric.OKLAB,
    exclude_ids=(),
    predicate=None,
):
    """
    Find the catalog block whose color is closest to the target.

    Args:
        target: Color to match
        catalog: BlockCatalog to search
        metric: SimilarityMetric used to compare colors
        exclude_ids: Block ids that may not be returned
        predicate: Optional callable taking a BlockRecord; False excludes it

    Returns:
        BlockRecord, or None when no colored block is eligible
    """
    records = catalog.colored_records()
    if not records:
        return None
    allowed = eligibility_mask(catalog, predicate)
    for block_id in exclude_ids:
        index = catalog.colored_position(block_id)
        if index is not None:
            allowed[index] = False
    index = _closest_index(color_distances(target, catalog, metric), allowed)
    return None if index is None else records[index]


def find_blocks_by_color_range(
    target,
    catalog,
    tolerance,
    max_blocks,
    metric=SimilarityMetric.OKLAB,
    predicate=None,
):
    """
    Find blocks within a color distance of the target, nearest first.

    Returns:
        List of at most max_blocks BlockRecord objects
    """
    records = catalog.colored_records()
    if not records or max_blocks <= 0:
        return []
    distances = color_distances(target, catalog, metric)
    allowed = eligibility_mask(catalog, predicate) & (distances <= tolerance)
    candidates = np.flatnonzero(allowed)
    order = candidates[np.argsort(distances[candidates], kind="stable")]
    return [records[i] for i in order[:max_blocks]]


def resolve_gradient(
    targets,
    catalog,
    metric=SimilarityMetric.OKLAB,
    unique=True,
    predicate=None,
):
    """
    Resolve each target color to its closest catalog block.

    Targets are resolved greedily in order. With unique=True a block used
    for one target is no longer a candidate for later ones, so the result is
    shorter than the targets once the eligible blocks run out.

    Args:
        targets: Sequence of Color objects
        catalog: BlockCatalog
        metric: SimilarityMetric
        unique: Whether a block may be used only once
        predicate: Optional callable restricting candidate blocks

    Returns:
        List of BlockRecord objects in target order
    """
    records = catalog.colored_records()
    if not records:
        return []
    allowed = eligibility_mask(catalog, predicate)
    resolved = []
    for step, target in enumerate(targets):
        index = _closest_index(color_distances(target, catalog, metric), allowed)
        if index is None:
            logger.debug(f"No block left for gradient step {step} ({target.hex_string})")
            break
        resolved.append(records[index])
        if unique:
            allowed[index] = False
    return resolved
