"""Font and file I/O layer for engrave.

This module handles reading fonts using fonttools and writing export files.
It provides a clean abstraction layer between fonttools/ezdxf and the
domain models.

Key responsibilities:
- Load TTF/OTF fonts (from disk or memory)
- Convert fonttools outlines to VectorPath
- Look up GPOS/kern pair kerning
- Write SVG documents and DXF drawings

Key classes:
- FontReader: FontSource implementation backed by fonttools
- DxfWriter: ezdxf drawing builder
"""

from engrave.io.converter import VectorPathPen
from engrave.io.reader import FontReader
from engrave.io.writer import DxfWriter, write_svg

__all__ = [
    "DxfWriter",
    "FontReader",
    "VectorPathPen",
    "write_svg",
]
