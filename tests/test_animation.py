from __future__ import annotations

from block_puzzle_quiz.game.animation import Animator
from block_puzzle_quiz.game.grid import GameGrid
from block_puzzle_quiz.game.scheduler import Scheduler


def _filled_row_grid(row: int) -> GameGrid:
    grid = GameGrid(8)
    grid.cells[row, :] = True
    return grid


def test_row_clear_runs_cell_by_cell() -> None:
    scheduler = Scheduler()
    frames = []
    animator = Animator(scheduler, 8, cell_delay=20, on_frame=lambda: frames.append(1))
    grid = _filled_row_grid(3)
    animator.sync(grid)
    result = grid.clear_full_lines()
    animator.play_line_clear(result)

    assert animator.running
    assert len(scheduler.pending()) == 8
    scheduler.advance(20)
    assert not animator.display[3, 0]
    assert animator.display[3, 1:].all()
    scheduler.advance(60)
    assert not animator.display[3, :4].any()
    assert animator.display[3, 4:].all()
    scheduler.advance(80)
    assert not animator.display.any()
    assert not animator.running
    assert len(frames) == 8


def test_row_and_column_clear_interleave() -> None:
    scheduler = Scheduler()
    animator = Animator(scheduler, 8, cell_delay=20)
    grid = GameGrid(8)
    grid.cells[2, :] = True
    grid.cells[:, 5] = True
    animator.sync(grid)
    animator.play_line_clear(grid.clear_full_lines())

    labels = [step.label for step in scheduler.pending()[:2]]
    assert labels == ["clear-row-2", "clear-col-5"]
    scheduler.advance(20)
    assert not animator.display[2, 0]
    assert not animator.display[0, 5]
    scheduler.run_all()
    assert not animator.display.any()


def test_display_follows_grid_once_settled() -> None:
    scheduler = Scheduler()
    animator = Animator(scheduler, 8)
    grid = _filled_row_grid(0)
    animator.sync(grid)
    animator.play_line_clear(grid.clear_full_lines())
    grid.cells[0, 0] = True  # placed again before the animation finished
    scheduler.run_all()
    assert (animator.display == grid.cells).all()


def test_game_over_fills_diagonally() -> None:
    scheduler = Scheduler()
    animator = Animator(scheduler, 8, cell_delay=20, game_over_delay=300)
    animator.sync(GameGrid(8))
    animator.play_game_over()

    scheduler.advance(299)
    assert not animator.display.any()
    scheduler.advance(1)
    assert animator.display[0, 0]
    assert animator.display.sum() == 1
    scheduler.advance(20)
    assert animator.display[0, 1] and animator.display[1, 0]
    assert animator.display.sum() == 3
    scheduler.run_all()
    assert animator.display.all()
    assert scheduler.now == 300 + 14 * 20
