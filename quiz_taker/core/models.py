"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

QuizId = str
QuestionId = str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question; immutable once added to a quiz."""

    id: QuestionId
    text: str
    options: tuple[str, ...]
    correct_answer: str


@dataclass(slots=True)
class Quiz:
    """Named, ordered collection of questions. Questions are append-only."""

    id: QuizId
    name: str
    questions: list[Question] = field(default_factory=list)

    @property
    def question_count(self) -> int:
        return len(self.questions)


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Read-only listing row for a quiz in the catalog."""

    quiz_id: QuizId
    name: str
    question_count: int


@dataclass(frozen=True, slots=True)
class MissedAnswer:
    """Represents a question the user answered incorrectly."""

    question_text: str
    submitted_answer: str
    correct_answer: str


class SessionState(Enum):
    """Lifecycle of one attempt at a quiz."""

    IDLE = auto()
    IN_PROGRESS = auto()
    AWAITING_SUBMIT = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable view of the session used by the UI to render itself."""

    state: SessionState
    quiz_id: QuizId | None
    quiz_name: str | None
    current_question_index: int
    question_count: int
    current_question: Question | None
    score: int
    missed_answers: tuple[MissedAnswer, ...]
    answered_count: int
    percentage: float

    @property
    def completed(self) -> bool:
        return self.state is SessionState.COMPLETED

    @property
    def awaiting_submit(self) -> bool:
        return self.state is SessionState.AWAITING_SUBMIT

    @property
    def can_go_back(self) -> bool:
        return self.state is SessionState.IN_PROGRESS and self.current_question_index > 0
