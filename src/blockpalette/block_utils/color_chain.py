"""
Ordering blocks into a visually smooth color sequence.
"""

import numpy as np

from blockpalette.color.similarity import SimilarityMetric, color_distance


def _distance_matrix(colors, metric):
    vectors = [c.vector(metric) for c in colors]
    if vectors[0] is None:
        n = len(colors)
        matrix = np.zeros((n, n), dtype=float)
        for i in range(n):
            for j in range(i + 1, n):
                matrix[i, j] = matrix[j, i] = color_distance(colors[i], colors[j], metric)
        return matrix
    points = np.asarray(vectors, dtype=float)
    return np.linalg.norm(points[:, None, :] - points[None, :, :], axis=2)


def sort_by_color_chain(records, metric=SimilarityMetric.OKLAB):
    """
    Greedy nearest-neighbor ordering of the colored records.

    Starts at the first colored record and repeatedly appends the remaining
    record closest to the last one placed. Records without a color are
    dropped. Ties go to the earlier record.

    Args:
        records: Sequence of BlockRecord objects
        metric: SimilarityMetric

    Returns:
        List of BlockRecord objects
    """
    colored = [r for r in records if r.color is not None]
    if len(colored) <= 1:
        return colored

    metric = SimilarityMetric(metric)
    distances = _distance_matrix([r.color for r in colored], metric)
    remaining = np.ones(len(colored), dtype=bool)
    current = 0
    remaining[current] = False
    order = [current]
    while remaining.any():
        candidates = np.where(remaining, distances[current], np.inf)
        current = int(np.argmin(candidates))
        remaining[current] = False
        order.append(current)
    return [colored[i] for i in order]
