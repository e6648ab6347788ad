"""Core layout and geometry pipeline for engrave.

This module contains the core algorithms for:

- Unit conversion (millimetres, points, design units)
- Path transforms (scale, translate, Y-flip, composition)
- Path flattening by uniform arc-length sampling
- Bounding-box estimation
- Text layout (cursor advance, kerning, spacing, origin policy)
- Export formatting (SVG markup, DXF polyline sets)

All geometry functions are pure and never mutate their inputs.

Key functions:
- mm_to_font_size: Millimetres to font size in points
- transform_path: Uniform scale + translation of a VectorPath
- flatten: Arc-length sampled points of a path
- estimate_bbox: Sampled bounding box of a path

Key classes:
- LayoutEngine: Lays out text with a FontSource
- ExportFormatter: Builds SVG and DXF representations
- Engraver: Batch pipeline used by the CLI
"""

from engrave.core.bbox import BBOX_SAMPLES, estimate_bbox
from engrave.core.export import ExportFormatter, SvgPath
from engrave.core.flatten import MIN_STEP_MM, flatten, flatten_contours
from engrave.core.layout import LayoutEngine, apply_origin, origin_offset, split_lines
from engrave.core.processor import Engraver, ExportReport
from engrave.core.transform import (
    FLIP_Y,
    apply_transform,
    compose,
    flip_y,
    scale_translate,
    transform_path,
)
from engrave.core.units import (
    MM_PER_POINT,
    design_units_to_mm,
    mm_to_font_size,
    points_to_mm,
    round_mm,
)

__all__ = [
    "BBOX_SAMPLES",
    "FLIP_Y",
    "MIN_STEP_MM",
    "MM_PER_POINT",
    # Pipeline classes
    "Engraver",
    "ExportFormatter",
    "ExportReport",
    "LayoutEngine",
    "SvgPath",
    # Functions
    "apply_origin",
    "apply_transform",
    "compose",
    "design_units_to_mm",
    "estimate_bbox",
    "flatten",
    "flatten_contours",
    "flip_y",
    "mm_to_font_size",
    "origin_offset",
    "points_to_mm",
    "round_mm",
    "scale_translate",
    "split_lines",
    "transform_path",
]
