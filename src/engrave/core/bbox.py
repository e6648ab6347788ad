"""Bounding-box estimation by arc-length sampling."""

from engrave.core._arclength import ArcLengthParameterization
from engrave.domain import BoundingBox, VectorPath

BBOX_SAMPLES = 200


def estimate_bbox(path: VectorPath, samples: int = BBOX_SAMPLES) -> BoundingBox | None:
    """Estimate a path's axis-aligned bounding box.

    The path is sampled at `samples + 1` equally spaced arc-length positions,
    independent of its geometric complexity. Extrema that fall between two
    samples on a tightly curved segment are under-estimated.

    Args:
        path: Path to measure
        samples: Number of sampling intervals

    Returns:
        Estimated bounding box, or None for a zero-length path
    """
    param = ArcLengthParameterization(path)
    total = param.total_length
    if not total > 0.0:
        return None
    samples = max(samples, 1)
    return BoundingBox.from_points(
        param.point_at_length(total * i / samples) for i in range(samples + 1)
    )
