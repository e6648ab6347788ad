"""Layout and export result types.

All coordinates in this module are millimetres in a Y-up frame (the font's
native orientation). SVG output flips Y once at export time.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from engrave.domain.path import Point, VectorPath


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox | None":
        """Bounding box of a point set, None when the set is empty."""
        xs: list[float] = []
        ys: list[float] = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)
        if not xs:
            return None
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def union(self, other: "BoundingBox | None") -> "BoundingBox":
        """Smallest box containing both boxes."""
        if other is None:
            return self
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def translated(self, dx: float, dy: float) -> "BoundingBox":
        return BoundingBox(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)


@dataclass(frozen=True)
class PositionedGlyph:
    """A glyph placed on the page.

    Attributes:
        char: Source character
        glyph_name: Font glyph name
        cursor: Pen position (mm) when the glyph was placed
        path: Outline in millimetres, translated to the cursor
        bbox: Estimated bounding box of path (None for blank glyphs)
        advance: Cursor advance applied after this glyph (mm)
    """

    char: str
    glyph_name: str
    cursor: Point
    path: VectorPath
    bbox: BoundingBox | None
    advance: float

    def has_geometry(self) -> bool:
        """Check if the glyph contributes any outline."""
        return not self.path.is_empty()


@dataclass(frozen=True)
class LayoutLine:
    """One line of laid-out text.

    Attributes:
        text: Source text of the line
        baseline_y: Cursor y (mm) of the line
        glyphs: Positioned glyphs in reading order
    """

    text: str
    baseline_y: float
    glyphs: tuple[PositionedGlyph, ...]


@dataclass(frozen=True)
class LayoutResult:
    """Complete layout of a text block.

    Attributes:
        lines: Laid-out lines, top to bottom
        bbox: Aggregate bounding box (None when nothing was drawn)
        origin: Offset applied by the origin policy
        height_mm: Height the layout was computed at
        missing: Characters the font had no glyph for, in order of appearance
    """

    lines: tuple[LayoutLine, ...]
    bbox: BoundingBox | None
    origin: Point = Point(0.0, 0.0)
    height_mm: float = 0.0
    missing: tuple[str, ...] = field(default_factory=tuple)

    @property
    def glyphs(self) -> tuple[PositionedGlyph, ...]:
        """All positioned glyphs across lines."""
        return tuple(glyph for line in self.lines for glyph in line.glyphs)

    def iter_paths(self) -> Iterator[VectorPath]:
        """Iterate over glyph paths that carry geometry."""
        for glyph in self.glyphs:
            if glyph.has_geometry():
                yield glyph.path


@dataclass(frozen=True)
class FlattenedPolyline:
    """Flattened approximation of one contour.

    Attributes:
        points: Polyline vertices in millimetres
        closed: True when the first and last points are identical
    """

    points: tuple[Point, ...]
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class DxfPolyline:
    """A flattened polyline assigned to a DXF layer."""

    layer: str
    polyline: FlattenedPolyline
