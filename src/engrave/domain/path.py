"""Core geometric types for vector path representation.

This module defines the fundamental geometric types used throughout engrave:
- Point: An immutable 2D point
- CoordinateSpace: The unit system a path's coordinates are expressed in
- CommandType: Path drawing command kinds
- PathCommand: A single drawing command with its operands
- VectorPath: An ordered command sequence tagged with its coordinate space
"""

import math
from dataclasses import dataclass
from enum import Enum


class CoordinateSpace(Enum):
    """Unit system of a path's coordinates.

    Every VectorPath carries one of these tags; coordinates are never in an
    implicit space.
    """

    DESIGN_UNITS = "design_units"
    POINTS = "points"
    MILLIMETERS = "millimeters"


class CommandType(Enum):
    """Path drawing command kinds, named after their SVG letters."""

    MOVE = "M"
    LINE = "L"
    QUAD = "Q"
    CUBIC = "C"
    CLOSE = "Z"


OPERAND_COUNTS: dict[CommandType, int] = {
    CommandType.MOVE: 1,
    CommandType.LINE: 1,
    CommandType.QUAD: 2,
    CommandType.CUBIC: 3,
    CommandType.CLOSE: 0,
}


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path drawing command.

    Attributes:
        kind: Command type
        points: Operands; control points first, end point last
    """

    kind: CommandType
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        expected = OPERAND_COUNTS[self.kind]
        if len(self.points) != expected:
            raise ValueError(
                f"{self.kind.name} takes {expected} points, got {len(self.points)}"
            )

    @property
    def end_point(self) -> Point | None:
        """The on-curve point this command ends at (None for CLOSE)."""
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class VectorPath:
    """An ordered sequence of drawing commands in an explicit coordinate space.

    Paths are immutable: transforms return new instances.

    Attributes:
        commands: Drawing commands in order
        space: Coordinate space all operands are expressed in
    """

    commands: tuple[PathCommand, ...]
    space: CoordinateSpace

    @classmethod
    def empty(cls, space: CoordinateSpace) -> "VectorPath":
        """Create a path with no commands."""
        return cls(commands=(), space=space)

    def is_empty(self) -> bool:
        """Check if the path has no drawing commands."""
        return len(self.commands) == 0

    def subpaths(self) -> list["VectorPath"]:
        """Split the path into one path per contour (at every MOVE).

        Returns:
            List of single-contour paths in the same coordinate space
        """
        groups: list[list[PathCommand]] = []
        for command in self.commands:
            if command.kind == CommandType.MOVE or not groups:
                groups.append([])
            groups[-1].append(command)
        return [VectorPath(commands=tuple(group), space=self.space) for group in groups]

    @property
    def is_closed(self) -> bool:
        """True when the path is non-empty and every contour ends with CLOSE."""
        subpaths = self.subpaths()
        if not subpaths:
            return False
        return all(sub.commands[-1].kind == CommandType.CLOSE for sub in subpaths)

    def to_svg_data(self, decimals: int = 3) -> str:
        """Serialize to an SVG path ``d`` attribute.

        Args:
            decimals: Number of decimals kept per coordinate

        Returns:
            Path data string, empty for an empty path
        """
        parts: list[str] = []
        for command in self.commands:
            parts.append(command.kind.value)
            for point in command.points:
                parts.append(f"{format_number(point.x, decimals)} {format_number(point.y, decimals)}")
        return " ".join(parts)


def format_number(value: float, decimals: int = 3) -> str:
    """Format a coordinate deterministically, without trailing zeros."""
    text = f"{float(value):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
