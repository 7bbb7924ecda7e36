from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Set, Tuple

import numpy as np

from .pieces import Shape


Coordinate = Tuple[int, int]


class PlacementError(ValueError):
    """Raised when committing a shape that does not fit the grid"""


@dataclass(frozen=True)
class ClearResult:
    rows: FrozenSet[int] = field(default_factory=frozenset)
    cols: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def lines_cleared(self) -> int:
        return len(self.rows) + len(self.cols)

    def __bool__(self) -> bool:
        return self.lines_cleared > 0

    def cells(self, size: int) -> Set[Coordinate]:
        """Every (row, col) covered by a cleared line; shared cells appear once"""
        covered: Set[Coordinate] = set()
        for row in self.rows:
            covered.update((row, col) for col in range(size))
        for col in self.cols:
            covered.update((row, col) for row in range(size))
        return covered


class GameGrid:
    """Square occupancy grid for block placement.

    Cells are `True` when occupied. The grid is only changed by `commit`
    and `clear_full_lines`.
    """

    def __init__(self, size: int = 8) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = int(size)
        self.cells = np.zeros((self.size, self.size), dtype=bool)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def can_place(self, shape: Shape, row: int, col: int) -> bool:
        for dr, dc in shape.offsets():
            r, c = row + dr, col + dc
            if not self.is_inside(r, c):
                return False
            if self.cells[r, c]:
                return False
        return True

    def commit(self, shape: Shape, row: int, col: int) -> int:
        """Mark the cells of `shape` anchored at (row, col) as occupied.

        The caller must have checked `can_place`; an overlapping or
        out-of-bounds commit raises `PlacementError`. Returns the number of
        cells placed.
        """
        if not self.can_place(shape, row, col):
            raise PlacementError(f"{shape!r} does not fit at row={row}, col={col}")
        cells_placed = 0
        for dr, dc in shape.offsets():
            self.cells[row + dr, col + dc] = True
            cells_placed += 1
        return cells_placed

    def full_lines(self) -> ClearResult:
        rows = frozenset(int(r) for r in np.flatnonzero(np.all(self.cells, axis=1)))
        cols = frozenset(int(c) for c in np.flatnonzero(np.all(self.cells, axis=0)))
        return ClearResult(rows=rows, cols=cols)

    def clear_full_lines(self) -> ClearResult:
        # Rows and columns are both detected before anything is emptied
        result = self.full_lines()
        for row in result.rows:
            self.cells[row, :] = False
        for col in result.cols:
            self.cells[:, col] = False
        return result

    def valid_anchors(self, shape: Shape) -> List[Coordinate]:
        """All (row, col) anchors where `shape` can be placed"""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.can_place(shape, row, col)
        ]

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def filled_ratio(self) -> float:
        return float(self.filled_count()) / float(self.size * self.size)

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.size)
        new_grid.cells = self.cells.copy()
        return new_grid
