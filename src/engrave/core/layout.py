"""Text layout: characters to positioned glyph paths in millimetres.

The layout frame is Y-up like the font's design space: the first baseline
sits at y = 0 and every following line moves down (y decreases) by the line
spacing. Output formats that grow Y downward flip once at export time.

Advance policy: the cursor moves by the glyph's advance width scaled to
millimetres, plus the pair kerning towards the next glyph when kerning is
enabled, plus the configured letter spacing. Characters the font cannot map
produce no geometry and advance by the font's fallback advance.
"""

import re

from engrave.config import LayoutConfig, OriginPolicy
from engrave.core.bbox import estimate_bbox
from engrave.core.transform import transform_path
from engrave.core.units import MM_PER_POINT, points_per_design_unit
from engrave.domain import (
    BoundingBox,
    CoordinateSpace,
    FontSource,
    Glyph,
    LayoutLine,
    LayoutResult,
    Point,
    PositionedGlyph,
)
from engrave.exceptions import ConfigurationError
from engrave.utils import RenderLogger

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF line breaks."""
    return _LINE_BREAK.split(text)


class LayoutEngine:
    """Lays out text with a font source.

    Each call to layout() recomputes the result from scratch; the engine
    keeps no state between runs.

    Example:
        engine = LayoutEngine(font, LayoutConfig(height_mm=12, kerning=True))
        result = engine.layout("Hello\\nWorld")
    """

    def __init__(
        self,
        font: FontSource,
        config: LayoutConfig,
        logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the layout engine.

        Args:
            font: Font collaborator providing glyphs and kerning
            config: Layout settings snapshot
            logger: Structured logging sink (a fresh one if None)
        """
        self.font = font
        self.config = config
        self.logger = logger if logger is not None else RenderLogger()

    def layout(self, text: str) -> LayoutResult:
        """Lay out text at the configured height.

        When the configuration carries a target width, the height is solved
        for first (see layout_to_width).

        Args:
            text: Text to lay out; LF/CRLF separate lines

        Returns:
            Layout with origin policy applied
        """
        if self.config.width_mm is not None:
            return self.layout_to_width(text, self.config.width_mm)
        return self._layout(text, self.config)

    def layout_to_width(self, text: str, width_mm: float) -> LayoutResult:
        """Lay out text scaled so the bounding box is `width_mm` wide.

        Layout width is affine in height (glyphs scale, letter spacing does
        not), so two measuring layouts determine the height to use.

        Raises:
            ConfigurationError: If the width is not positive or cannot be
                reached by any positive height
        """
        if not width_mm > 0:
            raise ConfigurationError("width_mm", "must be greater than 0")

        base = self.config.height_mm
        first = self._raw_width(text, base)
        second = self._raw_width(text, base * 2)
        slope = (second - first) / base
        if slope <= 0:
            raise ConfigurationError("width_mm", "text has no measurable width")

        height = base + (width_mm - first) / slope
        if not height > 0:
            raise ConfigurationError(
                "width_mm", f"{width_mm} mm is too narrow for the letter spacing in use"
            )

        self.logger.log_width_fit(width_mm, height)
        config = self.config.model_copy(update={"height_mm": height, "width_mm": None})
        return self._layout(text, config)

    def _raw_width(self, text: str, height_mm: float) -> float:
        measure = self.config.model_copy(
            update={"height_mm": height_mm, "width_mm": None, "origin": OriginPolicy.NONE}
        )
        bbox = self._layout(text, measure, quiet=True).bbox
        return bbox.width if bbox is not None else 0.0

    def _layout(self, text: str, config: LayoutConfig, quiet: bool = False) -> LayoutResult:
        logger = RenderLogger.silent() if quiet else self.logger
        lines = split_lines(text)
        logger.log_layout_start(len(lines), config.height_mm, config.kerning)

        pt_per_unit = points_per_design_unit(config.height_mm, self.font.units_per_em)
        mm_per_unit = pt_per_unit * MM_PER_POINT
        line_spacing = config.effective_line_spacing

        laid_out: list[LayoutLine] = []
        missing: list[str] = []
        bbox: BoundingBox | None = None
        y = 0.0

        for line_index, line in enumerate(lines):
            glyphs = [self.font.glyph_for(char) for char in line]
            placed: list[PositionedGlyph] = []
            x = 0.0

            for column, (char, glyph) in enumerate(zip(line, glyphs)):
                if glyph is None:
                    logger.log_glyph_missing(char, line_index, column)
                    missing.append(char)
                    x += self.font.fallback_advance * mm_per_unit + config.letter_spacing_mm
                    continue

                next_glyph = glyphs[column + 1] if column + 1 < len(glyphs) else None
                advance = self._advance(glyph, next_glyph, mm_per_unit, config)

                path_pt = transform_path(glyph.outline, pt_per_unit, 0.0, 0.0, CoordinateSpace.POINTS)
                path_mm = transform_path(path_pt, MM_PER_POINT, x, y, CoordinateSpace.MILLIMETERS)
                glyph_bbox = estimate_bbox(path_mm) if not path_mm.is_empty() else None
                if glyph_bbox is not None:
                    bbox = glyph_bbox.union(bbox)

                placed.append(
                    PositionedGlyph(
                        char=char,
                        glyph_name=glyph.name,
                        cursor=Point(x, y),
                        path=path_mm,
                        bbox=glyph_bbox,
                        advance=advance,
                    )
                )
                logger.log_glyph_placed(char, glyph.name, x, y, advance)
                x += advance

            laid_out.append(LayoutLine(text=line, baseline_y=y, glyphs=tuple(placed)))
            y -= line_spacing

        result = LayoutResult(
            lines=tuple(laid_out),
            bbox=bbox,
            height_mm=config.height_mm,
            missing=tuple(missing),
        )
        result = apply_origin(result, config.origin)
        if result.bbox is not None:
            logger.log_layout_complete(len(result.glyphs), result.bbox.width, result.bbox.height)
        return result

    def _advance(
        self,
        glyph: Glyph,
        next_glyph: Glyph | None,
        mm_per_unit: float,
        config: LayoutConfig,
    ) -> float:
        advance = glyph.advance_width
        if config.kerning and next_glyph is not None:
            advance += self.font.kerning(glyph, next_glyph)
        return advance * mm_per_unit + config.letter_spacing_mm


def origin_offset(bbox: BoundingBox | None, policy: OriginPolicy) -> Point:
    """Offset that moves a layout to the requested origin.

    LEFT_BASELINE puts the leftmost point on x = 0 and keeps the first
    baseline on y = 0; CENTER moves the bounding-box centre to (0, 0).
    """
    if bbox is None or policy == OriginPolicy.NONE:
        return Point(0.0, 0.0)
    if policy == OriginPolicy.LEFT_BASELINE:
        return Point(-bbox.min_x, 0.0)
    center = bbox.center
    return Point(-center.x, -center.y)


def apply_origin(result: LayoutResult, policy: OriginPolicy) -> LayoutResult:
    """Translate every glyph of a layout according to an origin policy.

    Args:
        result: Layout in raw coordinates
        policy: Origin policy to apply

    Returns:
        New layout with paths, cursors and boxes translated and the offset
        recorded in `origin`
    """
    offset = origin_offset(result.bbox, policy)
    if offset.x == 0.0 and offset.y == 0.0:
        return result

    dx, dy = offset.x, offset.y
    lines = tuple(
        LayoutLine(
            text=line.text,
            baseline_y=line.baseline_y + dy,
            glyphs=tuple(
                PositionedGlyph(
                    char=g.char,
                    glyph_name=g.glyph_name,
                    cursor=Point(g.cursor.x + dx, g.cursor.y + dy),
                    path=transform_path(g.path, 1.0, dx, dy),
                    bbox=g.bbox.translated(dx, dy) if g.bbox is not None else None,
                    advance=g.advance,
                )
                for g in line.glyphs
            ),
        )
        for line in result.lines
    )
    return LayoutResult(
        lines=lines,
        bbox=result.bbox.translated(dx, dy) if result.bbox is not None else None,
        origin=offset,
        height_mm=result.height_mm,
        missing=result.missing,
    )
