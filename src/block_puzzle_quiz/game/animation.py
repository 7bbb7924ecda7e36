from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .grid import ClearResult, GameGrid
from .scheduler import Scheduler


class Animator:
    """Drives line-clear and game-over animations on a display matrix.

    The logical grid is updated atomically by the engine; the animator keeps
    the matrix the renderer shows and changes it one cell per scheduled step.
    While any step is queued `running` is true.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        size: int,
        cell_delay: float = 20,
        game_over_delay: float = 300,
        on_frame: Optional[Callable[[], None]] = None,
    ) -> None:
        self.scheduler = scheduler
        self.size = int(size)
        self.cell_delay = float(cell_delay)
        self.game_over_delay = float(game_over_delay)
        self.on_frame = on_frame
        self.display = np.zeros((self.size, self.size), dtype=bool)
        self.game_over_played = False
        self._grid: Optional[GameGrid] = None
        self._pending = 0

    @property
    def running(self) -> bool:
        return self._pending > 0

    def sync(self, grid: GameGrid) -> None:
        """Show `grid` as it is now and follow it once animations settle"""
        self._grid = grid
        self.display = grid.clone_state()

    def _set_cell(self, row: int, col: int, filled: bool) -> None:
        self.display[row, col] = filled
        self._pending -= 1
        if self._pending == 0 and not self.game_over_played and self._grid is not None:
            self.display = self._grid.clone_state()
        if self.on_frame is not None:
            self.on_frame()

    def _queue(self, delay: float, row: int, col: int, filled: bool, label: str) -> None:
        self._pending += 1
        self.scheduler.schedule(delay, lambda: self._set_cell(row, col, filled), label)

    def play_line_clear(self, result: ClearResult) -> None:
        """Empty each cleared line cell by cell, in index order.

        Rows and columns are queued independently; a cell shared by a row
        and a column is simply emptied twice.
        """
        for row in sorted(result.rows):
            for i in range(self.size):
                self._queue(self.cell_delay * (i + 1), row, i, False, f"clear-row-{row}")
        for col in sorted(result.cols):
            for i in range(self.size):
                self._queue(self.cell_delay * (i + 1), i, col, False, f"clear-col-{col}")

    def play_game_over(self) -> None:
        """Fill the whole board diagonally, ranked by x + y"""
        self.game_over_played = True
        for y in range(self.size):
            for x in range(self.size):
                delay = self.game_over_delay + (x + y) * self.cell_delay
                self._queue(delay, y, x, True, "game-over")
