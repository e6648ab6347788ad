"""Domain models for engrave.

This module contains the core domain models representing paths, glyphs and
layout results. All models are designed to be:

- Immutable (frozen dataclasses); transforms return new instances
- Explicit about their coordinate space
- Independent of fonttools implementation details

Key classes:
- VectorPath: Drawing commands tagged with a CoordinateSpace
- Glyph: A single glyph with its outline in design units
- FontSource: Protocol the layout engine consumes
- LayoutResult: Positioned glyph paths plus extents
- FlattenedPolyline: Sampled contour ready for DXF export
"""

from engrave.domain.glyph import FontSource, Glyph, GlyphMetadata
from engrave.domain.layout import (
    BoundingBox,
    DxfPolyline,
    FlattenedPolyline,
    LayoutLine,
    LayoutResult,
    PositionedGlyph,
)
from engrave.domain.path import (
    CommandType,
    CoordinateSpace,
    PathCommand,
    Point,
    VectorPath,
)

__all__: list[str] = [
    # Enums
    "CommandType",
    "CoordinateSpace",
    # Path types
    "PathCommand",
    "Point",
    "VectorPath",
    # Font types
    "FontSource",
    "Glyph",
    "GlyphMetadata",
    # Layout types
    "BoundingBox",
    "DxfPolyline",
    "FlattenedPolyline",
    "LayoutLine",
    "LayoutResult",
    "PositionedGlyph",
]
