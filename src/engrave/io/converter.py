"""Converters between fonttools and domain models.

This module handles the conversion of fonttools glyphs into our domain
models (Glyph, VectorPath).
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from fontTools.ttLib import TTFont

from engrave.domain import (
    CommandType,
    CoordinateSpace,
    Glyph,
    GlyphMetadata,
    PathCommand,
    Point,
    VectorPath,
)


class VectorPathPen(BasePen):
    """A fontTools pen that records drawing into a VectorPath.

    BasePen decomposes TrueType multi-point qCurveTo runs (including the
    all-off-curve case) and component references, so only move, line,
    quadratic, cubic and close commands reach the recording.

    Example:
        pen = VectorPathPen(font.getGlyphSet())
        glyph_set["A"].draw(pen)
        outline = pen.path()
    """

    def __init__(
        self,
        glyphSet: Any = None,  # noqa: N803
        space: CoordinateSpace = CoordinateSpace.DESIGN_UNITS,
    ) -> None:
        super().__init__(glyphSet)
        self.space = space
        self._commands: list[PathCommand] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:  # noqa: N802
        self._commands.append(PathCommand(CommandType.MOVE, (Point(*pt),)))

    def _lineTo(self, pt: tuple[float, float]) -> None:  # noqa: N802
        self._commands.append(PathCommand(CommandType.LINE, (Point(*pt),)))

    def _curveToOne(self, pt1, pt2, pt3) -> None:  # noqa: N802
        self._commands.append(
            PathCommand(CommandType.CUBIC, (Point(*pt1), Point(*pt2), Point(*pt3)))
        )

    def _qCurveToOne(self, pt1, pt2) -> None:  # noqa: N802
        self._commands.append(PathCommand(CommandType.QUAD, (Point(*pt1), Point(*pt2))))

    def _closePath(self) -> None:  # noqa: N802
        self._commands.append(PathCommand(CommandType.CLOSE))

    def _endPath(self) -> None:  # noqa: N802
        pass

    def path(self) -> VectorPath:
        """Return the recorded path."""
        return VectorPath(commands=tuple(self._commands), space=self.space)


def fonttools_glyph_to_domain(
    name: str,
    fonttools_glyph: Any,
    font: TTFont,
    unicode_value: int | None = None,
) -> Glyph:
    """Convert fonttools glyph to domain Glyph model.

    Handles both TrueType (quadratic curves) and OpenType/CFF (cubic curves).
    The outline stays in font design units with the font's Y-up orientation.

    Args:
        name: Name of the glyph
        fonttools_glyph: The fonttools glyph object from GlyphSet
        font: The TTFont object for accessing metrics
        unicode_value: Code point the glyph was looked up by

    Returns:
        Domain Glyph model
    """
    pen = VectorPathPen(font.getGlyphSet())
    fonttools_glyph.draw(pen)

    return Glyph(
        metadata=_extract_glyph_metadata(name, font, unicode_value),
        outline=pen.path(),
    )


def _extract_glyph_metadata(name: str, font: TTFont, unicode_value: int | None) -> GlyphMetadata:
    """Extract glyph metrics from the hmtx table."""
    hmtx = font.get("hmtx")
    advance_width = 0
    lsb = 0

    if hmtx and name in hmtx.metrics:
        advance_width, lsb = hmtx.metrics[name]

    return GlyphMetadata(
        name=name,
        unicode=unicode_value,
        advance_width=advance_width,
        left_side_bearing=lsb,
    )
