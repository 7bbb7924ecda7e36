from __future__ import annotations

import pytest

from block_puzzle_quiz.game.scheduler import Scheduler
from block_puzzle_quiz.game.score import ScoreTracker


def test_steps_run_in_due_then_insertion_order() -> None:
    scheduler = Scheduler()
    ran = []
    scheduler.schedule(20, lambda: ran.append("b"))
    scheduler.schedule(10, lambda: ran.append("a"))
    scheduler.schedule(20, lambda: ran.append("c"))
    assert [s.due for s in scheduler.pending()] == [10, 20, 20]

    assert scheduler.advance(15) == 1
    assert ran == ["a"]
    assert scheduler.advance(5) == 2
    assert ran == ["a", "b", "c"]
    assert scheduler.idle
    assert scheduler.now == 20


def test_steps_scheduled_by_steps_run_in_window() -> None:
    scheduler = Scheduler()
    ran = []
    scheduler.schedule(5, lambda: scheduler.schedule(5, lambda: ran.append("inner")))
    scheduler.advance(10)
    assert ran == ["inner"]


def test_run_all_drains_queue() -> None:
    scheduler = Scheduler()
    ran = []
    for delay in (300, 0, 40):
        scheduler.schedule(delay, lambda d=delay: ran.append(d))
    assert scheduler.run_all() == 3
    assert ran == [0, 40, 300]
    assert scheduler.now == 300


def test_negative_delay_rejected() -> None:
    with pytest.raises(ValueError):
        Scheduler().schedule(-1, lambda: None)


def test_score_smoothing_reaches_exact_total() -> None:
    scheduler = Scheduler()
    seen = []
    score = ScoreTracker(scheduler, on_change=seen.append)
    score.add_score(5)
    assert score.total == 5
    assert score.display == 0

    scheduler.advance(0)
    assert score.value == pytest.approx(0.5)
    scheduler.advance(100)
    assert 0 < score.value < 5
    scheduler.advance(100)
    assert score.value == 5
    assert score.display == 5
    assert len(seen) == 10
    assert seen == sorted(seen)


def test_overlapping_increments_add_up() -> None:
    scheduler = Scheduler()
    score = ScoreTracker(scheduler)
    score.add_score(3)
    scheduler.advance(60)
    score.add_score(10)
    score.add_score(10)
    values = []
    while not scheduler.idle:
        scheduler.advance(20)
        values.append(score.value)
    assert values == sorted(values)
    assert score.total == 23
    assert score.value == 23
    assert score.settled


def test_negative_delta_rejected() -> None:
    score = ScoreTracker(Scheduler())
    with pytest.raises(ValueError):
        score.add_score(-1)
    score.add_score(0)
    assert score.total == 0


def test_display_rounds_half_steps_up() -> None:
    scheduler = Scheduler()
    shown = []
    score = ScoreTracker(scheduler, on_change=lambda _value: shown.append(score.display))
    score.add_score(5)
    scheduler.run_all()
    assert shown == [1, 1, 2, 2, 3, 3, 4, 4, 5, 5]
