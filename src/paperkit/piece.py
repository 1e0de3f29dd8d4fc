"""
Pieces: top-level components as seen by the page packer.

The placement routine works with bare numbers, so a Piece keeps the
component's extent as plain floats (world meters) next to the component
itself. That keeps bare numbers out of the rest of the library.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import Part
from .measurement import Frame, Measurement
from .pair import MeasurementPair, point


@dataclass
class Piece:
    """
    A top-level component plus its eventual place on a page.

    ``page_index``, ``x`` and ``y`` stay ``None`` until the packer places
    the piece, and are filled in exactly once.
    """

    component: Part
    width: float = field(init=False)
    height: float = field(init=False)
    page_index: int | None = field(default=None, init=False)
    x: float | None = field(default=None, init=False)
    y: float | None = field(default=None, init=False)

    def __post_init__(self):
        extent = self.component.ensure_built().get_extent()
        self.width = extent.width.value
        self.height = extent.height.value
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"{self.component!r} has a non-positive extent {extent}")

    def __repr__(self) -> str:
        return f"Piece({self.component!r})"

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_placed(self) -> bool:
        return self.page_index is not None

    def place(self, page_index: int, x: float, y: float) -> None:
        if self.is_placed:
            raise RuntimeError(f"{self!r} is already placed on page {self.page_index}")
        self.page_index = page_index
        self.x = x
        self.y = y

    @property
    def origin(self) -> MeasurementPair:
        """Lower-left corner on the page, as a world-frame point."""
        if not self.is_placed:
            raise RuntimeError(f"{self!r} has not been packed yet")
        return point(Measurement(self.x, Frame.WORLD), Measurement(self.y, Frame.WORLD))
