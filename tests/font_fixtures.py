"""Font builders and a fake FontSource shared by the test suite."""

from io import BytesIO

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib.path import parse_path

from engrave.domain import (
    CommandType,
    CoordinateSpace,
    Glyph,
    GlyphMetadata,
    PathCommand,
    Point,
    VectorPath,
)
from engrave.io import VectorPathPen

UPM = 1000


def rect_path(x0: float, y0: float, x1: float, y1: float) -> VectorPath:
    """Closed rectangle contour in design units."""
    corners = [(x0, y0), (x0, y1), (x1, y1), (x1, y0)]
    commands = [PathCommand(CommandType.MOVE, (Point(*corners[0]),))]
    commands += [PathCommand(CommandType.LINE, (Point(*c),)) for c in corners[1:]]
    commands.append(PathCommand(CommandType.CLOSE))
    return VectorPath(commands=tuple(commands), space=CoordinateSpace.DESIGN_UNITS)


def svg_path(d: str) -> VectorPath:
    """Millimetre VectorPath from SVG path data; arcs become cubics."""
    pen = VectorPathPen(space=CoordinateSpace.MILLIMETERS)
    parse_path(d, pen)
    return pen.path()


def make_glyph(name: str, advance: int, outline: VectorPath | None = None) -> Glyph:
    return Glyph(
        metadata=GlyphMetadata(name=name, unicode=None, advance_width=advance),
        outline=outline or VectorPath.empty(CoordinateSpace.DESIGN_UNITS),
    )


class FakeFont:
    """FontSource with rectangular glyphs and a fixed kerning table.

    H: 0..500 x 0..700, advance 600
    I: 100..200 x 0..700, advance 300
    space: no outline, advance 250
    """

    def __init__(self, kerning: dict[tuple[str, str], int] | None = None) -> None:
        self._glyphs = {
            "H": make_glyph("H", 600, rect_path(0, 0, 500, 700)),
            "I": make_glyph("I", 300, rect_path(100, 0, 200, 700)),
            " ": make_glyph("space", 250),
        }
        self._kerning = kerning if kerning is not None else {("H", "I"): -100}
        self.kerning_calls: list[tuple[str, str]] = []

    @property
    def units_per_em(self) -> int:
        return UPM

    @property
    def fallback_advance(self) -> int:
        return 250

    def glyph_for(self, char: str) -> Glyph | None:
        return self._glyphs.get(char)

    def kerning(self, left: Glyph, right: Glyph) -> float:
        self.kerning_calls.append((left.name, right.name))
        return self._kerning.get((left.name, right.name), 0)


def _rect_glyph(x0: int, y0: int, x1: int, y1: int, hole: tuple[int, int, int, int] | None = None):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    if hole is not None:
        hx0, hy0, hx1, hy1 = hole
        pen.moveTo((hx0, hy0))
        pen.lineTo((hx1, hy0))
        pen.lineTo((hx1, hy1))
        pen.lineTo((hx0, hy1))
        pen.closePath()
    return pen.glyph()


def _round_glyph():
    # Quadratic "O" spanning 0..600 x 0..700
    pen = TTGlyphPen(None)
    pen.moveTo((300, 0))
    pen.qCurveTo((600, 0), (600, 350))
    pen.qCurveTo((600, 700), (300, 700))
    pen.qCurveTo((0, 700), (0, 350))
    pen.qCurveTo((0, 0), (300, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(features: str | None = None) -> bytes:
    """Build a TrueType font with .notdef, space, A, B and O.

    Metrics (advance, lsb): A (700, 0), B (600, 50), O (650, 0),
    space (250, 0), .notdef (500, 50). Units per em is 1000.

    Args:
        features: Optional feature file source (e.g. kerning) to compile in
    """
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "A", "B", "O"])
    fb.setupCharacterMap({0x20: "space", 0x41: "A", 0x42: "B", 0x4F: "O"})
    fb.setupGlyf(
        {
            ".notdef": _rect_glyph(50, 0, 450, 700),
            "space": TTGlyphPen(None).glyph(),
            "A": _rect_glyph(0, 0, 600, 700),
            "B": _rect_glyph(50, 0, 550, 700, hole=(150, 100, 450, 600)),
            "O": _round_glyph(),
        }
    )
    fb.setupHorizontalMetrics(
        {
            ".notdef": (500, 50),
            "space": (250, 0),
            "A": (700, 0),
            "B": (600, 50),
            "O": (650, 0),
        }
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupNameTable({"familyName": "Engrave Test", "styleName": "Regular"})
    fb.setupPost()
    if features:
        fb.addOpenTypeFeatures(features)

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()
