"""Glyph representation and the font source interface.

This module defines the glyph domain model, which represents a single
glyph (character) in a font with its outline and metrics, and the narrow
FontSource protocol the layout engine consumes.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from engrave.domain.path import CoordinateSpace, VectorPath


@dataclass(frozen=True)
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    name: str
    unicode: int | None
    advance_width: int
    left_side_bearing: int = 0


@dataclass(frozen=True)
class Glyph:
    """A single glyph with its outline in font design units.

    Attributes:
        metadata: Glyph metadata (name, unicode, metrics)
        outline: Outline path in design units (empty for blank glyphs)
    """

    metadata: GlyphMetadata
    outline: VectorPath

    def __post_init__(self) -> None:
        if self.outline.space != CoordinateSpace.DESIGN_UNITS:
            raise ValueError("Glyph outlines must be in design units")

    @property
    def name(self) -> str:
        """Get glyph name from metadata."""
        return self.metadata.name

    @property
    def advance_width(self) -> int:
        """Get advance width in design units."""
        return self.metadata.advance_width

    def is_empty(self) -> bool:
        """Check if glyph has no outline.

        Empty glyphs include spaces and other non-printing characters.
        """
        return self.outline.is_empty()


@runtime_checkable
class FontSource(Protocol):
    """Capability interface the layout engine needs from a font."""

    @property
    def units_per_em(self) -> int:
        """Design units per em."""
        ...

    @property
    def fallback_advance(self) -> int:
        """Advance in design units used for characters without a glyph."""
        ...

    def glyph_for(self, char: str) -> Glyph | None:
        """Return the glyph mapped to a character, or None if the font lacks it."""
        ...

    def kerning(self, left: Glyph, right: Glyph) -> float:
        """Pair kerning adjustment in design units (0 when the pair is not kerned)."""
        ...
