from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Protocol, Tuple

import numpy as np

from .animation import Animator
from .events import (
    ConfirmSelection,
    Direction,
    DragTo,
    InputEvent,
    Nudge,
    Release,
    SelectAt,
    SelectSlot,
)
from .grid import GameGrid
from .layout import Layout, Point
from .piece_set import PieceSet
from .pieces import Piece, PieceCatalog
from .rules import GameConfig, ScoringRules
from .scheduler import Scheduler
from .score import ScoreTracker


LOGGER = logging.getLogger(__name__)


class Renderer(Protocol):
    def clear(self) -> None: ...

    def draw_grid(self, matrix: np.ndarray) -> None: ...

    def draw_piece(self, piece: Piece) -> None: ...

    def draw_score(self, value: int) -> None: ...


class QuizService(Protocol):
    @property
    def blocking(self) -> bool: ...

    def on_placement_milestone(self) -> None: ...

    def on_game_over(self) -> None: ...


class EngineState(Enum):
    IDLE = "idle"
    SELECTED = "selected"
    DRAGGING = "dragging"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class PlacementResult:
    success: bool
    cells_placed: int = 0
    rows: FrozenSet[int] = field(default_factory=frozenset)
    cols: FrozenSet[int] = field(default_factory=frozenset)
    score_gained: int = 0
    game_over: bool = False

    @property
    def lines_cleared(self) -> int:
        return len(self.rows) + len(self.cols)


REJECTED = PlacementResult(success=False)


@dataclass
class GameSession:
    """Everything owned by one game, from first offering to game over"""

    grid: GameGrid
    pieces: PieceSet
    score: ScoreTracker
    animator: Animator
    placements: int = 0
    lines_cleared: int = 0


class GameEngine:
    """Turn sequence and input state machine of the block puzzle.

    Input events select a piece, move it around and drop it; a drop snaps
    to the nearest cell and either commits the piece or sends it home.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        renderer: Optional[Renderer] = None,
        quiz: Optional[QuizService] = None,
        scheduler: Optional[Scheduler] = None,
        catalog: Optional[PieceCatalog] = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rules = rules if rules is not None else ScoringRules()
        self.renderer = renderer
        self.quiz = quiz
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.rng = random.Random(self.config.random_seed)
        self.catalog = catalog if catalog is not None else PieceCatalog(rng=self.rng)
        extent = max(
            max(shape.rows, shape.cols)
            for family in self.catalog.families
            for shape in self.catalog.variants(family)
        )
        self.layout = Layout(
            grid_size=self.config.grid_size,
            cell_size=self.config.cell_size,
            spacing=self.config.spacing,
            width=self.config.surface_width,
            height=self.config.surface_height,
            piece_extent=extent,
        ).fitted(self.config.pieces_per_set)
        self.state = EngineState.IDLE
        self.selected: Optional[Piece] = None
        self.drag_offset: Point = (0.0, 0.0)
        self.session = self._new_session()
        self.redraw()

    def _new_session(self) -> GameSession:
        grid = GameGrid(self.config.grid_size)
        pieces = PieceSet(self.catalog, self.config.pieces_per_set, self.layout)
        pieces.regenerate_all()
        score = ScoreTracker(
            self.scheduler,
            updates=self.rules.score_updates,
            duration=self.rules.score_duration,
            on_change=lambda _value: self.redraw(),
        )
        animator = Animator(
            self.scheduler,
            grid.size,
            cell_delay=self.config.clear_delay,
            game_over_delay=self.config.game_over_delay,
            on_frame=self.redraw,
        )
        animator.sync(grid)
        return GameSession(grid=grid, pieces=pieces, score=score, animator=animator)

    # Convenience accessors
    @property
    def grid(self) -> GameGrid:
        return self.session.grid

    @property
    def pieces(self) -> PieceSet:
        return self.session.pieces

    @property
    def score(self) -> ScoreTracker:
        return self.session.score

    @property
    def game_over(self) -> bool:
        return self.state is EngineState.GAME_OVER

    @property
    def animation_running(self) -> bool:
        return self.session.animator.running

    @property
    def accepting_input(self) -> bool:
        if self.state is EngineState.GAME_OVER or self.animation_running:
            return False
        return not (self.quiz is not None and self.quiz.blocking)

    def restart(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.selected = None
        self.state = EngineState.IDLE
        self.session = self._new_session()
        LOGGER.info("New game started")
        self.redraw()

    def redraw(self) -> None:
        if self.renderer is None:
            return
        self.renderer.clear()
        self.renderer.draw_grid(self.session.animator.display)
        for piece in self.session.pieces:
            self.renderer.draw_piece(piece)
        self.renderer.draw_score(self.session.score.display)

    def handle(self, event: InputEvent) -> Optional[PlacementResult]:
        if isinstance(event, SelectAt):
            self.select_at(event.point)
        elif isinstance(event, SelectSlot):
            self.select_slot(event.index)
        elif isinstance(event, DragTo):
            self.drag_to(event.point)
        elif isinstance(event, Nudge):
            self.nudge(event.direction)
        elif isinstance(event, Release):
            return self.release()
        elif isinstance(event, ConfirmSelection):
            return self.confirm()
        return None

    def _take(self, piece: Piece) -> None:
        if self.selected is not None and self.selected is not piece:
            self.selected.reset_position()
        self.selected = piece

    def select_at(self, point: Point) -> bool:
        if not self.accepting_input:
            return False
        piece = self.pieces.piece_at(point)
        if piece is None:
            return False
        self._take(piece)
        self.drag_offset = (point[0] - piece.x, point[1] - piece.y)
        self.state = EngineState.DRAGGING
        self.redraw()
        return True

    def select_slot(self, index: int) -> bool:
        if not self.accepting_input:
            return False
        piece = self.pieces.get(index)
        if piece is None:
            return False
        self._take(piece)
        self.state = EngineState.SELECTED
        self.redraw()
        return True

    def drag_to(self, point: Point) -> None:
        if self.state is not EngineState.DRAGGING or self.selected is None:
            return
        piece = self.selected
        x, y = self.layout.clamp(piece.shape, point[0] - self.drag_offset[0], point[1] - self.drag_offset[1])
        piece.move_to(x, y)
        self.redraw()

    def nudge(self, direction: Direction) -> None:
        if self.selected is None or not self.accepting_input:
            return
        piece = self.selected
        dr, dc = direction.delta
        size = self.layout.cell_size
        row, col = self.layout.snap(piece.x + dc * size, piece.y + dr * size)
        x, y = self.layout.clamp(piece.shape, *self.layout.cell_origin(row, col))
        piece.move_to(x, y)
        self.redraw()

    def release(self) -> Optional[PlacementResult]:
        if self.state is not EngineState.DRAGGING:
            return None
        return self._drop()

    def confirm(self) -> Optional[PlacementResult]:
        if self.state not in (EngineState.SELECTED, EngineState.DRAGGING):
            return None
        if not self.accepting_input:
            return None
        return self._drop()

    def _drop(self) -> PlacementResult:
        piece = self.selected
        assert piece is not None
        row, col = self.layout.snap(piece.x, piece.y)
        index = self.pieces.index_of(piece.id)
        result = REJECTED if index is None else self.attempt_placement(index, row, col)
        if not result.success:
            piece.reset_position()
            self.selected = None
            self.state = EngineState.IDLE
            self.redraw()
        return result

    def attempt_placement(self, slot_index: int, row: int, col: int) -> PlacementResult:
        """Place the piece in `slot_index` with its anchor on (row, col).

        Invalid placements leave the session untouched and return a
        rejected result.
        """
        if self.state is EngineState.GAME_OVER:
            return REJECTED
        session = self.session
        piece = session.pieces.get(slot_index)
        if piece is None or not session.grid.can_place(piece.shape, row, col):
            LOGGER.debug("Rejected slot %d at row=%d col=%d", slot_index, row, col)
            return REJECTED

        cells = session.grid.commit(piece.shape, row, col)
        gained = self.rules.placement_points(cells)
        session.score.add_score(gained)

        session.animator.sync(session.grid)
        cleared = session.grid.clear_full_lines()
        if cleared:
            session.animator.play_line_clear(cleared)
            bonus = self.rules.clear_points(cleared)
            session.score.add_score(bonus)
            gained += bonus
            session.lines_cleared += cleared.lines_cleared
            LOGGER.debug("Cleared rows %s and columns %s", sorted(cleared.rows), sorted(cleared.cols))

        session.pieces.remove(piece.id)
        if session.pieces.is_exhausted():
            session.pieces.regenerate_all()

        session.placements += 1
        LOGGER.debug(
            "Placed %s at row=%d col=%d (+%d, placement %d)",
            piece.family.name, row, col, gained, session.placements,
        )
        interval = self.config.quiz_interval
        if interval and session.placements % interval == 0 and self.quiz is not None:
            LOGGER.info("Placement milestone %d reached", session.placements)
            self.quiz.on_placement_milestone()

        if self.selected is piece:
            self.selected = None
            self.state = EngineState.IDLE
        game_over = not session.pieces.any_has_legal_move(session.grid)
        if game_over:
            self._end_game()
        self.redraw()
        return PlacementResult(
            success=True,
            cells_placed=cells,
            rows=cleared.rows,
            cols=cleared.cols,
            score_gained=gained,
            game_over=game_over,
        )

    def _end_game(self) -> None:
        if self.selected is not None:
            self.selected.reset_position()
            self.selected = None
        self.state = EngineState.GAME_OVER
        LOGGER.info(
            "Game over: score=%d placements=%d lines=%d",
            self.session.score.total, self.session.placements, self.session.lines_cleared,
        )
        self.session.animator.play_game_over()
        if self.quiz is not None:
            self.quiz.on_game_over()

    def candidate_anchor(self) -> Optional[Tuple[int, int]]:
        """Snapped anchor of the selected piece, for placement previews"""
        if self.selected is None:
            return None
        return self.layout.snap(self.selected.x, self.selected.y)

    def candidate_valid(self) -> bool:
        anchor = self.candidate_anchor()
        if anchor is None or self.selected is None:
            return False
        return self.grid.can_place(self.selected.shape, *anchor)

    def get_state(self) -> dict:
        session = self.session
        return {
            "grid": session.grid.clone_state(),
            "pieces": [None if slot.empty else slot.piece.family for slot in session.pieces.slots],
            "pieces_remaining": len(session.pieces),
            "score": session.score.total,
            "placements": session.placements,
            "lines_cleared": session.lines_cleared,
            "game_over": self.game_over,
            "filled_ratio": session.grid.filled_ratio(),
        }
