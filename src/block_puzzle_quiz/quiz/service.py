from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .questions import Question, QuestionBank


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizPrompt:
    question: Question
    options: List[str]

    def is_correct(self, index: int) -> bool:
        if not 0 <= index < len(self.options):
            raise IndexError(f"Answer {index} is outside 0..{len(self.options) - 1}")
        return self.options[index] == self.question.answer


class QuizService:
    """Pops a question every placement milestone and blocks play until answered"""

    def __init__(self, bank: Optional[QuestionBank] = None) -> None:
        self.bank = bank if bank is not None else QuestionBank()
        self.prompt: Optional[QuizPrompt] = None
        self.asked = 0
        self.correct = 0
        self.incorrect = 0

    @property
    def blocking(self) -> bool:
        return self.prompt is not None

    def on_placement_milestone(self) -> None:
        if self.prompt is not None:
            return
        if not len(self.bank):
            LOGGER.warning("Quiz milestone reached but the question bank is empty")
            return
        question = self.bank.random_question()
        self.prompt = QuizPrompt(question, self.bank.shuffled_options(question))
        self.asked += 1
        LOGGER.info("Quiz question %d: %s", self.asked, question.prompt)

    def answer(self, index: int) -> bool:
        """Answer the open question with option `index`; closes the prompt"""
        if self.prompt is None:
            return False
        correct = self.prompt.is_correct(index)
        if correct:
            self.correct += 1
        else:
            self.incorrect += 1
        LOGGER.info("Quiz answer %r is %s", self.prompt.options[index], "correct" if correct else "wrong")
        self.prompt = None
        return correct

    def on_game_over(self) -> None:
        self.prompt = None
        LOGGER.info("Quiz results: %d/%d correct", self.correct, self.asked)
