"""
DrawingPen: where world geometry finally becomes ink.

A pen is created for every component during the render pass. It carries
the fully composed transformation for that component (its position inside
its ancestors, the piece's place on the page, the model scale, and the page
orientation), so a component only ever draws in its own local coordinates.
"""

from __future__ import annotations

from collections.abc import Iterable

from .context import RenderContext
from .measurement import Frame, MeasurementLike, parse
from .pair import MeasurementPair, PairKind
from .render.backend import RenderingBackend
from .transform import AffineTransformation

POLYGON_STYLES = {
    "stroke": (False, True),
    "fill": (True, False),
    "fill_and_stroke": (True, True),
}


class DrawingPen:
    """
    Args:
        backend: Rendering backend receiving the drawing calls
        transform: Component-local world coordinates -> printed page
        context: Render context of the current kit run
    """

    def __init__(self, backend: RenderingBackend, transform: AffineTransformation, context: RenderContext):
        self.backend = backend
        self.transform = transform
        self.context = context

    def set_style(
        self,
        fill_color: str | None = None,
        draw_color: str | None = None,
        line_width: MeasurementLike | None = None,
    ) -> None:
        """
        Change colors and/or line width for subsequent drawing calls.

        ``line_width`` is a printed length such as ``"0.2 mm"``.
        """
        width = None
        if line_width is not None:
            width = parse(line_width, Frame.PRINTED).in_units(self.context.unit)
        self.backend.set_style(fill_color=fill_color, draw_color=draw_color, line_width=width)

    def polygon(self, points: Iterable[MeasurementPair | tuple], style: str = "stroke") -> None:
        """Draw a closed polygon; ``style`` is "stroke", "fill" or "fill_and_stroke"."""
        if style not in POLYGON_STYLES:
            raise ValueError(f"Invalid polygon style {style!r}; use one of {list(POLYGON_STYLES)}")
        page_points = self._to_page(points, "polygon")
        fill, stroke = POLYGON_STYLES[style]
        self.backend.polyline(page_points, closed=True, fill=fill, stroke=stroke)

    def open_path(self, points: Iterable[MeasurementPair | tuple]) -> None:
        """Stroke an open path through the points."""
        page_points = self._to_page(points, "open_path")
        self.backend.polyline(page_points, closed=False, fill=False, stroke=True)

    def _to_page(self, points: Iterable[MeasurementPair | tuple], caller: str) -> list[tuple[float, float]]:
        points = [p if isinstance(p, MeasurementPair) else MeasurementPair(*p, PairKind.POINT) for p in points]
        if len(points) < 2:
            raise ValueError(f"DrawingPen.{caller} needs at least 2 points")

        unit = self.context.unit
        page_points = []
        for pt in points:
            mapped = self.transform.apply_to_point(pt)
            page_points.append((mapped.x.in_units(unit), mapped.y.in_units(unit)))
        return page_points
