"""Engrave - Convert text set in a vector font into CNC-ready geometry.

Engrave lays out text with a TrueType/OpenType font, converts the glyph
outlines to millimetres and exports them as SVG paths or as flattened DXF
polylines suitable for engraving and cutting.

Example:
    $ engrave --font Roboto-Regular.ttf --text "Hello" --height-mm 12

This will create out/text.svg and out/text.dxf.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
