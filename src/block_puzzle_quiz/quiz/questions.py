from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Question:
    prompt: str
    answer: str
    incorrect: Tuple[str, ...]

    def options(self) -> List[str]:
        return [*self.incorrect, self.answer]


DEFAULT_QUESTIONS: Tuple[Question, ...] = (
    Question(
        "Which part of the brain is primarily responsible for processing emotions?",
        "Amygdala",
        ("Cerebellum", "Hippocampus", "Thalamus"),
    ),
    Question(
        "What is the term for the process by which a conditioned response gradually disappears?",
        "Extinction",
        ("Habituation", "Sensitization", "Spontaneous recovery"),
    ),
    Question(
        "Which psychological perspective focuses on the role of unconscious drives and childhood experiences?",
        "Psychodynamic",
        ("Behavioral", "Cognitive", "Humanistic"),
    ),
)


class QuestionBank:
    def __init__(self, questions: Optional[Iterable[Question]] = None, rng: Optional[random.Random] = None) -> None:
        self.questions: List[Question] = list(DEFAULT_QUESTIONS if questions is None else questions)
        self.rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.questions)

    def add_question(self, prompt: str, answer: str, incorrect: Sequence[str]) -> Question:
        question = Question(prompt, answer, tuple(incorrect))
        self.questions.append(question)
        return question

    def random_question(self) -> Question:
        if not self.questions:
            raise LookupError("Question bank is empty")
        return self.rng.choice(self.questions)

    def shuffled_options(self, question: Question) -> List[str]:
        options = question.options()
        self.rng.shuffle(options)
        return options
