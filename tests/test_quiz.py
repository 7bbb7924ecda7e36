from __future__ import annotations

import logging
import random

import pytest

from block_puzzle_quiz.game import EngineState
from block_puzzle_quiz.quiz import DEFAULT_QUESTIONS, QuestionBank, QuizService

from conftest import make_engine


def test_bank_ships_default_questions() -> None:
    bank = QuestionBank(rng=random.Random(0))
    assert len(bank) == len(DEFAULT_QUESTIONS) == 3
    assert bank.random_question() in DEFAULT_QUESTIONS


def test_added_question_is_drawn() -> None:
    bank = QuestionBank([], rng=random.Random(0))
    question = bank.add_question("2 + 2?", "4", ["3", "5", "22"])
    assert bank.random_question() is question
    options = bank.shuffled_options(question)
    assert sorted(options) == sorted(["4", "3", "5", "22"])


def test_empty_bank_cannot_draw() -> None:
    with pytest.raises(LookupError):
        QuestionBank([]).random_question()


def test_milestone_opens_prompt_until_answered() -> None:
    quiz = QuizService(QuestionBank(rng=random.Random(4)))
    assert not quiz.blocking
    quiz.on_placement_milestone()
    assert quiz.blocking
    prompt = quiz.prompt
    quiz.on_placement_milestone()  # already open
    assert quiz.prompt is prompt
    assert quiz.asked == 1

    right = prompt.options.index(prompt.question.answer)
    assert quiz.answer(right)
    assert not quiz.blocking
    assert quiz.correct == 1


def test_wrong_answer_is_counted() -> None:
    quiz = QuizService(QuestionBank(rng=random.Random(5)))
    quiz.on_placement_milestone()
    prompt = quiz.prompt
    wrong = next(i for i, opt in enumerate(prompt.options) if opt != prompt.question.answer)
    assert not quiz.answer(wrong)
    assert quiz.incorrect == 1
    assert not quiz.answer(0)  # nothing open


def test_answer_out_of_range() -> None:
    quiz = QuizService()
    quiz.on_placement_milestone()
    with pytest.raises(IndexError):
        quiz.answer(4)
    assert quiz.blocking


def test_service_keeps_the_bank_it_was_given() -> None:
    bank = QuestionBank([])
    assert QuizService(bank).bank is bank
    assert len(QuizService().bank) == 3


def test_empty_bank_milestone_warns(caplog) -> None:
    quiz = QuizService(QuestionBank([]))
    with caplog.at_level(logging.WARNING, logger="block_puzzle_quiz.quiz.service"):
        quiz.on_placement_milestone()
    assert not quiz.blocking
    assert "empty" in caplog.text


def test_game_over_closes_prompt() -> None:
    quiz = QuizService()
    quiz.on_placement_milestone()
    quiz.on_game_over()
    assert not quiz.blocking


def test_engine_pauses_for_quiz() -> None:
    quiz = QuizService(QuestionBank(rng=random.Random(1)))
    engine = make_engine(quiz=quiz)
    for n in range(8):
        slot = next(s.index for s in engine.pieces.slots if not s.empty)
        engine.attempt_placement(slot, n // 4, n % 4)
    assert quiz.blocking
    assert not engine.select_slot(2)
    assert engine.state is EngineState.IDLE

    quiz.answer(0)
    assert engine.select_slot(2)
    assert engine.state is EngineState.SELECTED
