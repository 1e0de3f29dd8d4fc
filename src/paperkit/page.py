"""Pages of positioned pieces."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .piece import Piece


@dataclass
class Page:
    """An append-only, ordered list of pieces placed on one page."""

    index: int
    pieces: list[Piece] = field(default_factory=list)

    def add_positioned_piece(self, piece: Piece) -> None:
        if piece.page_index != self.index:
            raise ValueError(f"{piece!r} belongs to page {piece.page_index}, not {self.index}")
        self.pieces.append(piece)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)
