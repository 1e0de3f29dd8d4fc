"""
PDF rendering backend built on the reportlab canvas.

reportlab measures in points with the origin at the lower-left corner of
the page, so this backend reports ``y_axis_down = False`` and the master
transform needs no reflection.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from pathlib import Path

from reportlab.lib import colors
from reportlab.pdfgen import canvas

from .page_formats import page_size_pt

logger = logging.getLogger(__name__)


class PdfBackend:
    """Draws every page of a kit into one multi-page PDF."""

    unit = "pt"
    y_axis_down = False
    extension = ".pdf"

    def __init__(self):
        self._buffer = io.BytesIO()
        self._canvas: canvas.Canvas | None = None
        self._style: dict = {}

    @property
    def canvas(self) -> canvas.Canvas:
        if self._canvas is None:
            raise RuntimeError("PdfBackend.page_size() must be called before drawing")
        return self._canvas

    def page_size(self, page_format: str, orientation: str) -> tuple[float, float]:
        size = page_size_pt(page_format, orientation)
        self._canvas = canvas.Canvas(self._buffer, pagesize=size)
        return size

    def set_metadata(self, title: str, subject: str, creator: str) -> None:
        self.canvas.setTitle(title)
        self.canvas.setSubject(subject)
        self.canvas.setCreator(creator)

    def set_style(
        self,
        fill_color: str | None = None,
        draw_color: str | None = None,
        line_width: float | None = None,
    ) -> None:
        if fill_color is not None:
            self._style["fill_color"] = fill_color
            self.canvas.setFillColor(colors.toColor(fill_color))
        if draw_color is not None:
            self._style["draw_color"] = draw_color
            self.canvas.setStrokeColor(colors.toColor(draw_color))
        if line_width is not None:
            self._style["line_width"] = line_width
            self.canvas.setLineWidth(line_width)

    def polyline(
        self,
        points: Sequence[tuple[float, float]],
        closed: bool,
        fill: bool,
        stroke: bool,
    ) -> None:
        path = self.canvas.beginPath()
        path.moveTo(*points[0])
        for x, y in points[1:]:
            path.lineTo(x, y)
        if closed:
            path.close()
        self.canvas.drawPath(path, stroke=int(stroke), fill=int(fill))

    def new_page(self) -> None:
        self.canvas.showPage()
        # showPage() resets the graphics state
        self.set_style(**self._style)

    def save(self, path: str | Path) -> list[Path]:
        path = Path(path)
        self.canvas.showPage()
        self.canvas.save()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self._buffer.getvalue())
        logger.info("Wrote %s", path)
        return [path]
