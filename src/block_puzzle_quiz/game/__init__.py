"""Game module for Block Puzzle Quiz.

Exports the placement-and-clear engine and supporting classes:
- GameGrid: Occupancy grid, placement checks and row/column clearing
- Shape, Piece, PieceCatalog, ShapeFamily: Polyomino shapes and sampling
- PieceSet: The slots holding the pieces currently on offer
- ScoreTracker: Exact total plus smoothed visible score
- Scheduler, Animator: Virtual clock and timed animation steps
- GameEngine, GameSession: Turn sequence and input state machine
"""

from .grid import ClearResult, GameGrid, PlacementError
from .pieces import Piece, PieceCatalog, Shape, ShapeFamily
from .piece_set import OfferingNotExhaustedError, PieceSet, Slot
from .score import ScoreTracker
from .scheduler import Scheduler
from .animation import Animator
from .layout import Layout
from .events import ConfirmSelection, Direction, DragTo, Nudge, Release, SelectAt, SelectSlot
from .rules import GameConfig, ScoringRules
from .core import EngineState, GameEngine, GameSession, PlacementResult

__all__ = [
    "ClearResult",
    "GameGrid",
    "PlacementError",
    "Piece",
    "PieceCatalog",
    "Shape",
    "ShapeFamily",
    "OfferingNotExhaustedError",
    "PieceSet",
    "Slot",
    "ScoreTracker",
    "Scheduler",
    "Animator",
    "Layout",
    "ConfirmSelection",
    "Direction",
    "DragTo",
    "Nudge",
    "Release",
    "SelectAt",
    "SelectSlot",
    "GameConfig",
    "ScoringRules",
    "EngineState",
    "GameEngine",
    "GameSession",
    "PlacementResult",
]
