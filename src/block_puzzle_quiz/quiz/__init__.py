"""Trivia quiz that interrupts play at placement milestones."""

from .questions import DEFAULT_QUESTIONS, Question, QuestionBank
from .service import QuizPrompt, QuizService

__all__ = [
    "DEFAULT_QUESTIONS",
    "Question",
    "QuestionBank",
    "QuizPrompt",
    "QuizService",
]
