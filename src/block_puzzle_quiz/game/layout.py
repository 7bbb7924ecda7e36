from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Tuple

from .pieces import Piece, Shape


Point = Tuple[float, float]


@dataclass
class Layout:
    """Pixel geometry of the play surface.

    The grid is centred horizontally and starts at 20% of the surface
    height; the staging area for offered pieces sits below it, one
    square slot of `piece_extent` cells per piece.
    """

    grid_size: int = 8
    cell_size: int = 40
    spacing: int = 10
    width: int = 640
    height: int = 720
    piece_extent: int = 5

    @property
    def grid_x(self) -> float:
        return (self.width - self.grid_size * self.cell_size) / 2

    @property
    def grid_y(self) -> float:
        return self.height * 0.2

    @property
    def grid_bottom(self) -> float:
        return self.grid_y + self.grid_size * self.cell_size

    @property
    def slot_size(self) -> int:
        """Side of a staging slot, large enough for any offered variant"""
        return self.piece_extent * self.cell_size

    def staging_positions(self, count: int) -> List[Point]:
        """Home positions of `count` pieces laid out below the grid"""
        total_width = count * self.slot_size + (count - 1) * self.spacing
        start_x = (self.width - total_width) / 2
        y = self.grid_bottom + self.spacing
        return [(start_x + i * (self.slot_size + self.spacing), y) for i in range(count)]

    def fitted(self, count: int) -> "Layout":
        """Copy of this layout grown until `count` staging slots fit.

        The grid top stays at 20% of the height, so the height needed is
        solved from grid, staging row and two spacings making up 80%.
        """
        staging_width = count * self.slot_size + (count - 1) * self.spacing
        width = max(self.width, self.grid_size * self.cell_size, staging_width)
        needed = self.grid_size * self.cell_size + 2 * self.spacing + self.slot_size
        height = max(self.height, math.ceil(needed * 1.25))
        return replace(self, width=width, height=height)

    def cell_origin(self, row: int, col: int) -> Point:
        return (self.grid_x + col * self.cell_size, self.grid_y + row * self.cell_size)

    def snap(self, x: float, y: float) -> Tuple[int, int]:
        """Nearest (row, col) anchor for a free pixel position.

        Rounds half up on both axes, whatever direction the piece came from.
        """
        col = math.floor((x - self.grid_x) / self.cell_size + 0.5)
        row = math.floor((y - self.grid_y) / self.cell_size + 0.5)
        return row, col

    def clamp(self, shape: Shape, x: float, y: float) -> Point:
        max_x = self.width - shape.cols * self.cell_size
        max_y = self.height - shape.rows * self.cell_size
        return (max(0.0, min(x, max_x)), max(0.0, min(y, max_y)))

    def piece_contains(self, piece: Piece, point: Point) -> bool:
        """True when `point` lies on one of the piece's filled cells"""
        px, py = point
        shape = piece.shape
        if not (piece.x <= px < piece.x + shape.cols * self.cell_size):
            return False
        if not (piece.y <= py < piece.y + shape.rows * self.cell_size):
            return False
        row = int((py - piece.y) // self.cell_size)
        col = int((px - piece.x) // self.cell_size)
        return bool(shape.cells[row, col])
