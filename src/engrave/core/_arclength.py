"""Internal arc-length parameterization of vector paths.

This is an internal module used by the flattener and the bounding-box
estimator. Not intended for public use.
"""

import math
from bisect import bisect_right

from fontTools.misc.bezierTools import (
    calcCubicArcLength,
    calcQuadraticArcLength,
    segmentPointAtT,
)

from engrave.domain import CommandType, Point, VectorPath

# Chord-table resolution used to invert arc length -> curve parameter.
_TABLE_SUBDIVISIONS = 32

_Coord = tuple[float, float]


class _Segment:
    """One line or Bezier segment with its arc-length lookup table."""

    __slots__ = ("coords", "length", "_table")

    def __init__(self, coords: tuple[_Coord, ...]) -> None:
        self.coords = coords
        if len(coords) == 2:
            self.length = math.dist(coords[0], coords[1])
            self._table: list[float] = []
            return

        if len(coords) == 3:
            self.length = calcQuadraticArcLength(*coords)
        else:
            self.length = calcCubicArcLength(*coords)

        # Cumulative chord lengths at t = i / N
        table = [0.0]
        previous = coords[0]
        for i in range(1, _TABLE_SUBDIVISIONS + 1):
            current = segmentPointAtT(coords, i / _TABLE_SUBDIVISIONS)
            table.append(table[-1] + math.dist(previous, current))
            previous = current
        self._table = table

    def t_at_length(self, s: float) -> float:
        """Curve parameter at arc length s from the segment start."""
        if self.length <= 0.0:
            return 0.0
        fraction = min(max(s / self.length, 0.0), 1.0)
        if not self._table:
            return fraction

        table = self._table
        target = fraction * table[-1]
        i = min(bisect_right(table, target) - 1, _TABLE_SUBDIVISIONS - 1)
        span = table[i + 1] - table[i]
        local = (target - table[i]) / span if span > 0 else 0.0
        return (i + local) / _TABLE_SUBDIVISIONS

    def point_at_length(self, s: float) -> _Coord:
        t = self.t_at_length(s)
        if len(self.coords) == 2:
            (x0, y0), (x1, y1) = self.coords
            return (x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)
        return segmentPointAtT(self.coords, t)


class ArcLengthParameterization:
    """Maps arc-length positions along a whole path to points.

    Contours are concatenated in order; the pen-up jump between one contour
    and the next MOVE contributes no length.

    Example:
        param = ArcLengthParameterization(path)
        midpoint = param.point_at_length(param.total_length / 2)
    """

    def __init__(self, path: VectorPath) -> None:
        self._segments: list[_Segment] = []
        self._offsets: list[float] = []
        self.total_length = 0.0

        current: _Coord | None = None
        start: _Coord | None = None
        for command in path.commands:
            coords = tuple(p.to_tuple() for p in command.points)
            if command.kind == CommandType.MOVE:
                current = start = coords[0]
            elif command.kind == CommandType.CLOSE:
                if current is not None and start is not None and current != start:
                    self._add((current, start))
                current = start
            elif current is not None:
                self._add((current, *coords))
                current = coords[-1]

    def _add(self, coords: tuple[_Coord, ...]) -> None:
        segment = _Segment(coords)
        self._offsets.append(self.total_length)
        self._segments.append(segment)
        self.total_length += segment.length

    def point_at_length(self, s: float) -> Point:
        """Point at arc length s, clamped to [0, total_length].

        Raises:
            ValueError: If the path has no segments
        """
        if not self._segments:
            raise ValueError("Path has no segments")
        s = min(max(s, 0.0), self.total_length)
        index = max(bisect_right(self._offsets, s) - 1, 0)
        segment = self._segments[index]
        return Point(*segment.point_at_length(s - self._offsets[index]))
