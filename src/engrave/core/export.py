"""Export formatting: layout results to SVG markup and DXF polyline sets.

Layout coordinates are millimetres with Y growing upward. SVG grows Y
downward, so every SVG path is flipped exactly once here, through FLIP_Y,
both for the exported document and for the on-screen preview. DXF shares the
layout's Y-up orientation and is never flipped.
"""

from dataclasses import dataclass
from xml.sax.saxutils import quoteattr

from engrave.config import ExportConfig
from engrave.core.flatten import flatten_contours
from engrave.core.transform import FLIP_Y, apply_transform, compose, flip_y, scale_translate
from engrave.core.units import round_mm
from engrave.domain import BoundingBox, DxfPolyline, LayoutResult
from engrave.domain.path import format_number
from engrave.utils import RenderLogger

_SVG_NS = "http://www.w3.org/2000/svg"
SHARED_LAYER = "TEXT"


@dataclass(frozen=True)
class SvgPath:
    """One SVG path element.

    Attributes:
        d: Path data in the SVG (Y-down) frame
        element_id: Optional id attribute (set per character in separate mode)
    """

    d: str
    element_id: str | None = None


def layer_name(index: int) -> str:
    """DXF layer name for the index-th character (1-based)."""
    return f"C{index}"


class ExportFormatter:
    """Turns a LayoutResult into SVG and DXF representations.

    Example:
        formatter = ExportFormatter(ExportConfig(separate=True))
        svg_text = formatter.svg_document(result)
        polylines = formatter.dxf_polylines(result)
    """

    def __init__(self, config: ExportConfig, logger: RenderLogger | None = None) -> None:
        """Initialize the formatter.

        Args:
            config: Export settings
            logger: Structured logging sink (a fresh one if None)
        """
        self.config = config
        self.logger = logger if logger is not None else RenderLogger()

    def svg_paths(self, result: LayoutResult) -> list[SvgPath]:
        """Build SVG path elements.

        In separate mode every glyph with geometry becomes its own path with
        id C<n>; otherwise all glyphs share one merged path datum.
        """
        entries = [
            (index, flip_y(glyph.path).to_svg_data())
            for index, glyph in enumerate(result.glyphs, start=1)
            if glyph.has_geometry()
        ]
        if self.config.separate:
            paths = [SvgPath(d=d, element_id=layer_name(index)) for index, d in entries]
        elif entries:
            paths = [SvgPath(d=" ".join(d for _, d in entries))]
        else:
            paths = []
        self.logger.log_svg_export(len(paths), self.config.separate)
        return paths

    def svg_view_box(self, result: LayoutResult) -> tuple[float, float, float, float]:
        """viewBox (min_x, min_y, width, height) of the flipped layout, rounded to 0.001 mm."""
        bbox = result.bbox
        if bbox is None:
            return (0.0, 0.0, 0.0, 0.0)
        return (
            round_mm(bbox.min_x),
            round_mm(-bbox.max_y),
            round_mm(bbox.width),
            round_mm(bbox.height),
        )

    def svg_document(self, result: LayoutResult) -> str:
        """Render the complete SVG document in millimetres."""
        view_box = self.svg_view_box(result)
        width, height = format_number(view_box[2]), format_number(view_box[3])
        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        lines.append(
            f'<svg xmlns="{_SVG_NS}" viewBox="{" ".join(format_number(v) for v in view_box)}" '
            f'width="{width}mm" height="{height}mm">'
        )
        for path in self.svg_paths(result):
            lines.append(f"  {self._path_element(path, self.config.stroke_width_mm)}")
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def preview_svg(
        self,
        result: LayoutResult,
        width_px: int = 800,
        height_px: int = 200,
        margin_px: float = 10.0,
    ) -> str:
        """Render a pixel-sized preview with the layout fitted and centred.

        The flip, fit scale and centring translate are composed into a single
        transform applied to the same layout paths the exporters use.
        """
        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        lines.append(
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(width_px)} {int(height_px)}" '
            f'width="{int(width_px)}" height="{int(height_px)}">'
        )
        if result.bbox is not None:
            scale, tx, ty = _fit(result.bbox, width_px, height_px, margin_px)
            transform = compose(FLIP_Y, scale_translate(scale, tx, ty))
            for path in result.iter_paths():
                d = apply_transform(path, transform).to_svg_data(decimals=2)
                lines.append(
                    f"  {self._path_element(SvgPath(d=d), self.config.stroke_width_mm * scale)}"
                )
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def dxf_polylines(self, result: LayoutResult) -> list[DxfPolyline]:
        """Flatten every glyph contour for DXF export.

        Each contour becomes one polyline. In separate mode the polylines of
        the n-th character go to layer C<n>, otherwise all share TEXT.
        """
        polylines: list[DxfPolyline] = []
        for index, glyph in enumerate(result.glyphs, start=1):
            if not glyph.has_geometry():
                continue
            layer = layer_name(index) if self.config.separate else SHARED_LAYER
            for polyline in flatten_contours(glyph.path, self.config.tolerance_mm):
                self.logger.log_polyline(layer, len(polyline), polyline.closed)
                polylines.append(DxfPolyline(layer=layer, polyline=polyline))
        return polylines

    def _path_element(self, path: SvgPath, stroke_width: float) -> str:
        id_attr = f' id="{path.element_id}"' if path.element_id else ""
        return (
            f'<path{id_attr} d="{path.d}" fill={quoteattr(self.config.fill)} '
            f'stroke={quoteattr(self.config.stroke)} stroke-width="{format_number(round_mm(stroke_width))}"/>'
        )


def _fit(
    bbox: BoundingBox, width_px: float, height_px: float, margin_px: float
) -> tuple[float, float, float]:
    """Scale and translate that centre a flipped bbox inside a pixel canvas."""
    avail_w = max(width_px - 2 * margin_px, 1.0)
    avail_h = max(height_px - 2 * margin_px, 1.0)
    candidates = []
    if bbox.width > 0:
        candidates.append(avail_w / bbox.width)
    if bbox.height > 0:
        candidates.append(avail_h / bbox.height)
    scale = min(candidates) if candidates else 1.0

    # After the flip the box spans x: [min_x, max_x], y: [-max_y, -min_y]
    tx = margin_px + (avail_w - bbox.width * scale) / 2 - bbox.min_x * scale
    ty = margin_px + (avail_h - bbox.height * scale) / 2 + bbox.max_y * scale
    return scale, tx, ty

