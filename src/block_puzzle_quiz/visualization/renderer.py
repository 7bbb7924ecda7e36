from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from block_puzzle_quiz.game.layout import Layout
from block_puzzle_quiz.game.pieces import Piece, ShapeFamily


BACKGROUND = (15, 15, 20)
EMPTY_CELL = (40, 40, 48)
FILLED_CELL = (70, 200, 120)
GRID_LINE = (90, 90, 100)
TEXT = (230, 230, 230)


def _color_for_family(family: ShapeFamily) -> Tuple[int, int, int]:
    palette = (
        (0, 240, 240),
        (240, 240, 0),
        (160, 0, 240),
        (0, 240, 0),
        (240, 0, 0),
        (0, 0, 240),
        (240, 160, 0),
    )
    return palette[int(family) % len(palette)]


class PygameRenderer:
    """Draws engine state onto a pygame surface"""

    def __init__(self, surface: pygame.Surface, layout: Layout, font: Optional[pygame.font.Font] = None) -> None:
        self.surface = surface
        self.layout = layout
        self.font = font

    def _cell_rect(self, x: float, y: float) -> pygame.Rect:
        size = self.layout.cell_size
        return pygame.Rect(int(x), int(y), size - 1, size - 1)

    def clear(self) -> None:
        self.surface.fill(BACKGROUND)

    def draw_grid(self, matrix: np.ndarray) -> None:
        rows, cols = matrix.shape
        for row in range(rows):
            for col in range(cols):
                x, y = self.layout.cell_origin(row, col)
                color = FILLED_CELL if matrix[row, col] else EMPTY_CELL
                pygame.draw.rect(self.surface, color, self._cell_rect(x, y))

    def draw_piece(self, piece: Piece) -> None:
        color = _color_for_family(piece.family)
        size = self.layout.cell_size
        for dr, dc in piece.shape.offsets():
            pygame.draw.rect(self.surface, color, self._cell_rect(piece.x + dc * size, piece.y + dr * size))

    def draw_score(self, value: int) -> None:
        if self.font is None:
            return
        img = self.font.render(str(value), True, TEXT)
        rect = img.get_rect(center=(self.layout.width // 2, int(self.layout.grid_y // 2)))
        self.surface.blit(img, rect)

    def draw_ghost(self, piece: Piece, row: int, col: int, valid: bool) -> None:
        color = (120, 220, 140) if valid else (220, 120, 120)
        for dr, dc in piece.shape.offsets():
            if 0 <= row + dr < self.layout.grid_size and 0 <= col + dc < self.layout.grid_size:
                x, y = self.layout.cell_origin(row + dr, col + dc)
                pygame.draw.rect(self.surface, color, self._cell_rect(x, y), 2)
