"""
SVG rendering backend.

Each page becomes a standalone SVG document measured in millimeters with
the origin at the top-left corner (``y_axis_down = True``). A single page
is saved to the requested path; several pages are saved as
``<stem>_page1.svg``, ``<stem>_page2.svg``, ...
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from .page_formats import page_size_mm

logger = logging.getLogger(__name__)

DEFAULT_FILL = "none"
DEFAULT_STROKE = "#000000"
DEFAULT_LINE_WIDTH = 0.25  # mm


class SvgBackend:
    """Collects drawing calls per page and writes them as SVG documents."""

    unit = "mm"
    y_axis_down = True
    extension = ".svg"

    def __init__(self):
        self.width = 0.0
        self.height = 0.0
        self.pages: list[list[str]] = []
        self.title = ""
        self.description = ""
        self._fill = DEFAULT_FILL
        self._stroke = DEFAULT_STROKE
        self._line_width = DEFAULT_LINE_WIDTH

    def page_size(self, page_format: str, orientation: str) -> tuple[float, float]:
        self.width, self.height = page_size_mm(page_format, orientation)
        self.pages = [[]]
        return (self.width, self.height)

    def set_metadata(self, title: str, subject: str, creator: str) -> None:
        self.title = title
        self.description = f"{subject}\nCreated by {creator}"

    def set_style(
        self,
        fill_color: str | None = None,
        draw_color: str | None = None,
        line_width: float | None = None,
    ) -> None:
        if fill_color is not None:
            self._fill = fill_color
        if draw_color is not None:
            self._stroke = draw_color
        if line_width is not None:
            self._line_width = line_width

    def polyline(
        self,
        points: Sequence[tuple[float, float]],
        closed: bool,
        fill: bool,
        stroke: bool,
    ) -> None:
        if not self.pages:
            raise RuntimeError("SvgBackend.page_size() must be called before drawing")
        coords = " ".join(f"{x:.3f},{y:.3f}" for x, y in points)
        tag = "polygon" if closed else "polyline"
        fill_attr = self._fill if fill else "none"
        stroke_attr = self._stroke if stroke else "none"
        self.pages[-1].append(
            f'<{tag} points="{coords}" fill={quoteattr(fill_attr)} '
            f'stroke={quoteattr(stroke_attr)} stroke-width="{self._line_width:g}"/>'
        )

    def new_page(self) -> None:
        self.pages.append([])

    def generate_svgs(self) -> list[str]:
        """Return one complete SVG document per page."""
        return [self._generate_page(elements) for elements in self.pages]

    def _generate_page(self, elements: list[str]) -> str:
        svg_parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{self.width:g}mm" height="{self.height:g}mm" '
            f'viewBox="0 0 {self.width:g} {self.height:g}">',
        ]
        if self.title:
            svg_parts.append(f"<title>{escape(self.title)}</title>")
        if self.description:
            svg_parts.append(f"<desc>{escape(self.description)}</desc>")
        svg_parts.append(
            f'<rect x="0" y="0" width="{self.width:g}" height="{self.height:g}" fill="white"/>'
        )
        svg_parts.extend(elements)
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    def save(self, path: str | Path) -> list[Path]:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        documents = self.generate_svgs()

        paths = []
        for i, document in enumerate(documents):
            if len(documents) == 1:
                page_path = path
            else:
                page_path = path.with_name(f"{path.stem}_page{i + 1}{path.suffix or '.svg'}")
            page_path.write_text(document, encoding="utf-8")
            paths.append(page_path)

        logger.info("Wrote %d SVG page(s) to %s", len(paths), path.parent)
        return paths
