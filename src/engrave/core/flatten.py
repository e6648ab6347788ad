"""Path flattening by uniform arc-length sampling.

The path is reparameterized by arc length and sampled at fixed steps of the
requested tolerance. This is uniform-step sampling, not adaptive flatness
subdivision: the chord error is only approximately bounded by the tolerance
and can exceed it on tightly curved segments shorter than a few steps.
"""

import math

from engrave.core._arclength import ArcLengthParameterization
from engrave.domain import FlattenedPolyline, Point, VectorPath

MIN_STEP_MM = 0.01
CLOSE_SNAP_RATIO = 0.75


def sampling_step(tolerance_mm: float) -> float:
    """Step length for a tolerance; NaN and anything below the floor clamp to it."""
    if not tolerance_mm > MIN_STEP_MM:
        return MIN_STEP_MM
    return tolerance_mm


def flatten(path: VectorPath, tolerance_mm: float) -> list[Point]:
    """Flatten a path into points sampled every `tolerance_mm` of arc length.

    Samples are taken at 0, step, 2*step, ... up to the total length. When at
    least three points result and the last one lies within 0.75 steps of the
    first, it is replaced by an exact copy of the first so that closed
    outlines produce polylines with identical endpoints. A closed single
    contour whose last sample is further away gets the first point appended.

    Args:
        path: Path to flatten (all contours are walked in order)
        tolerance_mm: Sampling step; values <= 0 clamp to MIN_STEP_MM

    Returns:
        Sampled points; empty for a zero-length path
    """
    step = sampling_step(tolerance_mm)
    param = ArcLengthParameterization(path)
    total = param.total_length
    if not total > 0.0:
        return []

    # Tolerate division landing just under an integer so the end sample survives
    count = math.floor(total / step + 1e-9)
    points = [param.point_at_length(min(i * step, total)) for i in range(count + 1)]

    if len(points) >= 3:
        if points[0].distance_to(points[-1]) < step * CLOSE_SNAP_RATIO:
            points[-1] = points[0]
        elif path.is_closed and len(path.subpaths()) == 1:
            points.append(points[0])
    return points


def flatten_contours(path: VectorPath, tolerance_mm: float) -> list[FlattenedPolyline]:
    """Flatten each contour of a path into its own polyline.

    A closed contour too short to yield three samples (a dot or period at a
    coarse tolerance) falls back to its on-curve vertices. Contours with
    fewer than two distinct points are dropped.

    Args:
        path: Path to flatten
        tolerance_mm: Sampling step in millimetres

    Returns:
        One FlattenedPolyline per non-degenerate contour
    """
    polylines: list[FlattenedPolyline] = []
    for contour in path.subpaths():
        points = flatten(contour, tolerance_mm)
        if len(points) < 3 and contour.is_closed:
            points = _closed_vertices(contour)
        if len(points) < 2:
            continue
        closed = len(points) >= 3 and points[0] == points[-1]
        polylines.append(FlattenedPolyline(points=tuple(points), closed=closed))
    return polylines


def _closed_vertices(contour: VectorPath) -> list[Point]:
    vertices: list[Point] = []
    for command in contour.commands:
        end = command.end_point
        if end is not None and (not vertices or end != vertices[-1]):
            vertices.append(end)
    if len(vertices) > 1 and vertices[-1] == vertices[0]:
        vertices.pop()
    if len(vertices) < 3:
        return vertices
    return vertices + [vertices[0]]
