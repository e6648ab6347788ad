"""Unit conversions between millimetres, points and font design units.

All conversions are exact rational scalings. Rounding only happens in
round_mm, which is reserved for output formatting.
"""

import math

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0
MM_PER_POINT = MM_PER_INCH / POINTS_PER_INCH


def mm_to_font_size(mm: float) -> float:
    """Convert a length in millimetres to a font size in points (1 pt = 1/72 in)."""
    return mm * POINTS_PER_INCH / MM_PER_INCH


def points_to_mm(pt: float) -> float:
    """Convert points to millimetres (inverse of mm_to_font_size)."""
    return pt * MM_PER_INCH / POINTS_PER_INCH


def points_per_design_unit(height_mm: float, units_per_em: int) -> float:
    """Scale factor from design units to points for a font of the given height."""
    return mm_to_font_size(height_mm) / units_per_em


def design_units_to_mm(value: float, units_per_em: int, height_mm: float) -> float:
    """Convert a design-unit distance to millimetres.

    Args:
        value: Distance in font design units
        units_per_em: The font's units per em
        height_mm: Em height in millimetres

    Returns:
        Distance in millimetres
    """
    return value * points_per_design_unit(height_mm, units_per_em) * MM_PER_POINT


def round_mm(x: float, decimals: int = 3) -> float:
    """Round half up to a number of decimals (0.001 mm by default).

    Examples:
        >>> round_mm(1.23456)
        1.235
    """
    factor = 10**decimals
    return math.floor(x * factor + 0.5) / factor
