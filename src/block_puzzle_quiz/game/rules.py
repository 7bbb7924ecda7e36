from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .grid import ClearResult


@dataclass
class ScoringRules:
    points_per_cell: int = 1
    line_clear_points: int = 10
    score_updates: int = 10
    score_duration: float = 200

    def __post_init__(self) -> None:
        if self.points_per_cell < 0 or self.line_clear_points < 0:
            raise ValueError("Scoring rules cannot award negative points")
        if self.score_updates <= 0:
            raise ValueError("score_updates must be positive")

    def placement_points(self, cells_placed: int) -> int:
        return cells_placed * self.points_per_cell

    def clear_points(self, result: ClearResult) -> int:
        # Rows and columns each earn the bonus, even when cleared together
        return self.line_clear_points * (len(result.rows) + len(result.cols))


@dataclass
class GameConfig:
    """Configuration for a block puzzle session"""
    grid_size: int = 8
    pieces_per_set: int = 3
    clear_delay: float = 20
    game_over_delay: float = 300
    quiz_interval: int = 8
    cell_size: int = 40
    spacing: int = 10
    surface_width: int = 640
    surface_height: int = 720
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.pieces_per_set <= 0:
            raise ValueError(f"pieces_per_set must be positive, got {self.pieces_per_set}")
        if self.quiz_interval < 0:
            raise ValueError(f"quiz_interval cannot be negative, got {self.quiz_interval}")
        if self.clear_delay < 0 or self.game_over_delay < 0:
            raise ValueError("Animation delays cannot be negative")
