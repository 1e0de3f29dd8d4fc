"""
Rendering backend interface.

The core never draws directly. It asks a backend for the page size once,
then sends it polylines in final page coordinates (in the backend's own
``unit``), a page break between pages, and finally a save request.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class RenderingBackend(Protocol):
    """
    Attributes:
        unit: Length unit of all coordinates and sizes ("mm", "pt", ...)
        y_axis_down: True when Y grows toward the bottom of the page
        extension: File extension of the saved document, including the dot
    """

    unit: str
    y_axis_down: bool
    extension: str

    def page_size(self, page_format: str, orientation: str) -> tuple[float, float]:
        """Return (width, height) of the page in ``unit`` and start page one."""
        ...

    def set_metadata(self, title: str, subject: str, creator: str) -> None:
        ...

    def set_style(
        self,
        fill_color: str | None = None,
        draw_color: str | None = None,
        line_width: float | None = None,
    ) -> None:
        ...

    def polyline(
        self,
        points: Sequence[tuple[float, float]],
        closed: bool,
        fill: bool,
        stroke: bool,
    ) -> None:
        ...

    def new_page(self) -> None:
        ...

    def save(self, path: str | Path) -> list[Path]:
        """Write the document and return the created file paths."""
        ...
