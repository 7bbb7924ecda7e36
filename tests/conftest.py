import os
import random

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from block_puzzle_quiz.game import GameConfig, GameEngine, PieceCatalog, Scheduler, Shape, ShapeFamily


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames = 0
        self.last_grid = None
        self.pieces = []
        self.scores = []

    def clear(self) -> None:
        self.frames += 1
        self.pieces = []

    def draw_grid(self, matrix) -> None:
        self.last_grid = matrix.copy()

    def draw_piece(self, piece) -> None:
        self.pieces.append(piece.id)

    def draw_score(self, value) -> None:
        self.scores.append(value)


class FakeQuiz:
    def __init__(self, blocking: bool = False) -> None:
        self.blocking = blocking
        self.milestones = 0
        self.game_overs = 0

    def on_placement_milestone(self) -> None:
        self.milestones += 1

    def on_game_over(self) -> None:
        self.game_overs += 1


def single_shape_catalog(rows, family=ShapeFamily.MONO, seed=0) -> PieceCatalog:
    return PieceCatalog({family: [Shape(np.array(rows))]}, rng=random.Random(seed))


def make_engine(rows=((1,),), family=ShapeFamily.MONO, **kwargs) -> GameEngine:
    config = kwargs.pop("config", None)
    return GameEngine(
        config if config is not None else GameConfig(random_seed=0),
        scheduler=kwargs.pop("scheduler", Scheduler()),
        catalog=single_shape_catalog([list(r) for r in rows], family),
        **kwargs,
    )


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def quiz() -> FakeQuiz:
    return FakeQuiz()
