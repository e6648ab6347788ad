"""Writers for exported geometry.

This module writes SVG documents to disk and builds DXF drawings from
flattened polylines with ezdxf. DXF units are fixed to millimetres.
"""

from collections.abc import Iterable
from io import StringIO
from pathlib import Path

import ezdxf
from ezdxf import units

from engrave.domain import DxfPolyline
from engrave.exceptions import ExportWriteError

DXF_VERSION = "R2010"
LAYER_COLOR = 7  # white/black depending on background


def write_svg(document: str, output_path: Path) -> Path:
    """Write an SVG document as UTF-8.

    Args:
        document: Complete SVG markup
        output_path: Destination file

    Returns:
        The written path

    Raises:
        ExportWriteError: If the file cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(document)
    except OSError as e:
        raise ExportWriteError(str(output_path), str(e)) from e
    return output_path


class DxfWriter:
    """Builds a millimetre DXF drawing from flattened polylines.

    Layers are created on first use. Closed polylines are written as closed
    LWPOLYLINE entities without repeating the first vertex.

    Example:
        writer = DxfWriter()
        writer.add_polylines(formatter.dxf_polylines(result))
        writer.save(Path("out/text.dxf"))
    """

    def __init__(self, dxfversion: str = DXF_VERSION) -> None:
        self._doc = ezdxf.new(dxfversion)
        self._doc.units = units.MM
        self._msp = self._doc.modelspace()

    def add_polyline(self, item: DxfPolyline) -> None:
        """Add one polyline entity on its layer."""
        if item.layer not in self._doc.layers:
            self._doc.layers.add(item.layer, color=LAYER_COLOR)

        points = item.polyline.points
        if item.polyline.closed:
            points = points[:-1]
        self._msp.add_lwpolyline(
            [p.to_tuple() for p in points],
            format="xy",
            close=item.polyline.closed,
            dxfattribs={"layer": item.layer},
        )

    def add_polylines(self, items: Iterable[DxfPolyline]) -> int:
        """Add several polylines; returns how many were added."""
        count = 0
        for item in items:
            self.add_polyline(item)
            count += 1
        return count

    def to_string(self) -> str:
        """Serialize the drawing to an in-memory ASCII DXF string."""
        stream = StringIO()
        self._doc.write(stream)
        return stream.getvalue()

    def save(self, output_path: Path) -> Path:
        """Write the drawing to disk.

        Raises:
            ExportWriteError: If the file cannot be written
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._doc.saveas(output_path)
        except OSError as e:
            raise ExportWriteError(str(output_path), str(e)) from e
        return output_path
