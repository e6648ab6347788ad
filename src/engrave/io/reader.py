"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class, the fontTools-backed
implementation of the FontSource protocol consumed by the layout engine.
"""

from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from engrave.domain import Glyph
from engrave.exceptions import FontLoadError
from engrave.io.converter import fonttools_glyph_to_domain
from engrave.io.kerning import PairKerning


class FontReader:
    """Loads TTF/OTF fonts and serves glyphs, metrics and kerning.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            glyph = reader.glyph_for("A")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._data: bytes | None = None
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}
        self._glyphs: dict[str, Glyph] = {}
        self._kerning: PairKerning | None = None

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<memory>") -> "FontReader":
        """Create a reader for an in-memory font file.

        Args:
            data: Raw TTF/OTF bytes
            name: Label used in error messages
        """
        reader = cls(Path(name))
        reader._data = data
        return reader

    def load(self) -> None:
        """Load and validate the font file.

        Raises:
            FontLoadError: If the file is missing or cannot be parsed
        """
        if self._data is None and not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            source = BytesIO(self._data) if self._data is not None else str(self._font_path)
            font = TTFont(source)
            # TTFont parses lazily; touch the tables layout depends on
            self._cmap = dict(font.getBestCmap() or {})
            _ = font["head"].unitsPerEm
            _ = font["hmtx"].metrics
            kerning = PairKerning(font)
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e) or type(e).__name__) from e

        if not self._cmap:
            font.close()
            raise FontLoadError(str(self._font_path), "font has no Unicode character map")

        self._font = font
        self._kerning = kerning
        self._glyphs = {}

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self._require_font()["maxp"].numGlyphs

    @property
    def family_name(self) -> str:
        """Family name from the name table, or the file stem."""
        name_table = self._require_font().get("name")
        family = name_table.getBestFamilyName() if name_table else None
        return family or self._font_path.stem

    @property
    def has_kerning(self) -> bool:
        """True when the font carries GPOS or legacy kern pairs."""
        self._require_font()
        return bool(self._kerning)

    @property
    def fallback_advance(self) -> int:
        """Advance used for unmapped characters.

        The space glyph's advance, else the .notdef advance, else half an em.
        """
        font = self._require_font()
        metrics = font["hmtx"].metrics
        space = self._cmap.get(ord(" "))
        for name in (space, ".notdef"):
            if name is not None and name in metrics:
                return metrics[name][0]
        return self.units_per_em // 2

    def glyph_for(self, char: str) -> Glyph | None:
        """Get the glyph mapped to a character.

        Args:
            char: A single character

        Returns:
            Glyph domain model, or None if the font does not map the character

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        name = self._cmap.get(ord(char))
        if name is None:
            return None

        if name not in self._glyphs:
            glyph_set = font.getGlyphSet()
            self._glyphs[name] = fonttools_glyph_to_domain(
                name=name,
                fonttools_glyph=glyph_set[name],
                font=font,
                unicode_value=ord(char),
            )
        return self._glyphs[name]

    def kerning(self, left: Glyph, right: Glyph) -> float:
        """Pair kerning between two glyphs in design units."""
        self._require_font()
        if not self._kerning:
            return 0
        return self._kerning.value(left.name, right.name)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
        self._glyphs = {}
        self._kerning = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
