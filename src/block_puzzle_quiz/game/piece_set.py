from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .grid import Coordinate, GameGrid
from .layout import Layout, Point
from .pieces import Piece, PieceCatalog


LOGGER = logging.getLogger(__name__)


class OfferingNotExhaustedError(RuntimeError):
    """Raised when regenerating while a piece is still on offer"""


@dataclass
class Slot:
    index: int
    piece: Optional[Piece] = None

    @property
    def empty(self) -> bool:
        return self.piece is None

    def clear(self) -> None:
        self.piece = None


class PieceSet:
    """Fixed number of ordered slots holding the pieces currently on offer"""

    def __init__(self, catalog: PieceCatalog, capacity: int = 3, layout: Optional[Layout] = None) -> None:
        if capacity <= 0:
            raise ValueError(f"Piece set capacity must be positive, got {capacity}")
        self.catalog = catalog
        self.capacity = int(capacity)
        self.layout = layout
        self.slots: List[Slot] = [Slot(i) for i in range(self.capacity)]
        self._ids = itertools.count(1)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces())

    def __len__(self) -> int:
        return len(self.pieces())

    def pieces(self) -> List[Piece]:
        return [slot.piece for slot in self.slots if slot.piece is not None]

    def get(self, index: int) -> Optional[Piece]:
        if 0 <= index < self.capacity:
            return self.slots[index].piece
        return None

    def index_of(self, piece_id: int) -> Optional[int]:
        for slot in self.slots:
            if slot.piece is not None and slot.piece.id == piece_id:
                return slot.index
        return None

    def is_exhausted(self) -> bool:
        return all(slot.empty for slot in self.slots)

    def regenerate_all(self) -> None:
        """Fill every slot with a fresh piece.

        Only valid once every slot is empty; otherwise an in-play piece
        would be discarded, so `OfferingNotExhaustedError` is raised.
        """
        if not self.is_exhausted():
            occupied = [slot.index for slot in self.slots if not slot.empty]
            raise OfferingNotExhaustedError(f"Slots {occupied} still hold pieces")
        homes = self.layout.staging_positions(self.capacity) if self.layout else None
        for slot in self.slots:
            family, shape = self.catalog.random_shape()
            piece = Piece(id=next(self._ids), shape=shape, family=family)
            if homes is not None:
                piece.set_home(*homes[slot.index])
            slot.piece = piece
        LOGGER.debug("New offering: %s", [p.family.name for p in self.pieces()])

    def remove(self, piece_id: int) -> None:
        index = self.index_of(piece_id)
        if index is not None:
            self.slots[index].clear()

    def piece_at(self, point: Point) -> Optional[Piece]:
        if self.layout is None:
            return None
        for piece in self.pieces():
            if self.layout.piece_contains(piece, point):
                return piece
        return None

    def legal_anchors(self, grid: GameGrid, index: int) -> List[Coordinate]:
        piece = self.get(index)
        if piece is None:
            return []
        return grid.valid_anchors(piece.shape)

    def any_has_legal_move(self, grid: GameGrid) -> bool:
        for piece in self.pieces():
            for row in range(grid.size):
                for col in range(grid.size):
                    if grid.can_place(piece.shape, row, col):
                        return True
        return False
