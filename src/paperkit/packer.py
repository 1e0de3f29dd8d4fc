"""
Page packer.

Pieces are laid out greedily: sort the candidates largest-area first,
hand them to a placement routine for one empty page, and try whatever did
not fit again on the next page. This is not optimal, but it is simple and
deterministic for a fixed sort key and placement routine.

The placement routine is pluggable. It receives the bin (page) size and the
already-ordered records, and returns which records it placed and where::

    def placement(bin_width, bin_height, records) -> PackResult

The default routine uses rectpack's MaxRects with best-short-side-fit,
without rotation and without re-sorting the records.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import rectpack

from .errors import LayoutError
from .page import Page
from .piece import Piece

logger = logging.getLogger(__name__)

# rectpack is exact with integers; world meters are packed on a 1 µm grid.
GRID = 1_000_000


@dataclass(frozen=True)
class PackRecord:
    """Bare-number footprint of something to place, plus an opaque payload."""

    width: float
    height: float
    datum: Any = None

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Placement:
    """Lower-left corner of a placed record."""

    x: float
    y: float
    datum: Any = None


@dataclass
class PackResult:
    positioned: list[Placement] = field(default_factory=list)
    unpositioned: list[PackRecord] = field(default_factory=list)


PlacementRoutine = Callable[[float, float, Sequence[PackRecord]], PackResult]


def area_descending(record: PackRecord) -> float:
    """Sort key putting the largest area first."""
    return -record.area


def _to_grid(value: float) -> int:
    return max(1, round(value * GRID))


def rectpack_placement(bin_width: float, bin_height: float, records: Sequence[PackRecord]) -> PackResult:
    """Place records on one bin with rectpack, keeping their given order."""
    packer = rectpack.newPacker(
        mode=rectpack.PackingMode.Offline,
        pack_algo=rectpack.MaxRectsBssf,
        sort_algo=rectpack.SORT_NONE,
        rotation=False,
    )
    packer.add_bin(_to_grid(bin_width), _to_grid(bin_height))
    for i, record in enumerate(records):
        packer.add_rect(_to_grid(record.width), _to_grid(record.height), rid=i)
    packer.pack()

    placed = {}
    for abin in packer:
        for rect in abin:
            placed[rect.rid] = (rect.x / GRID, rect.y / GRID)

    result = PackResult()
    for i, record in enumerate(records):
        if i in placed:
            x, y = placed[i]
            result.positioned.append(Placement(x, y, record.datum))
        else:
            result.unpositioned.append(record)
    return result


class PagePacker:
    """
    Distributes records over as many fixed-size pages as needed.

    Args:
        page_width: Page width (bare number, same unit as the records)
        page_height: Page height
        placement: Placement routine for a single page
        sort_key: Ordering applied before each placement call
    """

    def __init__(
        self,
        page_width: float,
        page_height: float,
        placement: PlacementRoutine = rectpack_placement,
        sort_key: Callable[[PackRecord], Any] = area_descending,
    ):
        if page_width <= 0 or page_height <= 0:
            raise ValueError(f"Page size must be positive, got {page_width} x {page_height}")
        self.page_width = page_width
        self.page_height = page_height
        self.placement = placement
        self.sort_key = sort_key

    def pack_page(self, records: Iterable[PackRecord]) -> PackResult:
        """Fill one empty page from ``records``, largest first."""
        ordered = sorted(records, key=self.sort_key)
        return self.placement(self.page_width, self.page_height, ordered)

    def paginate_records(self, records: Iterable[PackRecord]) -> list[list[Placement]]:
        """
        Pack all records, one page per pass.

        Returns:
            One list of placements per page, in page order

        Raises:
            LayoutError: if a pass places nothing, i.e. some record does not
                fit even on an empty page
        """
        remaining = list(records)
        pages = []
        while remaining:
            result = self.pack_page(remaining)
            if not result.positioned:
                too_big = [(r.width, r.height) for r in result.unpositioned]
                raise LayoutError(
                    f"{len(too_big)} piece(s) too big to fit on a "
                    f"{self.page_width:g} x {self.page_height:g} page",
                    details={"sizes": too_big},
                )
            logger.info(
                "Page %d: placed %d, %d left over",
                len(pages) + 1, len(result.positioned), len(result.unpositioned),
            )
            pages.append(result.positioned)
            remaining = result.unpositioned
        return pages

    def paginate(self, pieces: Iterable[Piece]) -> list[Page]:
        """Pack pieces onto pages, filling in each piece's page and position."""
        records = [PackRecord(p.width, p.height, p) for p in pieces]
        pages = []
        for index, placements in enumerate(self.paginate_records(records)):
            page = Page(index)
            for placement in placements:
                piece = placement.datum
                piece.place(index, placement.x, placement.y)
                page.add_positioned_piece(piece)
            pages.append(page)
        return pages
