"""Service for managing one attempt at a quiz and its question state."""

from __future__ import annotations

import random

from quiz_taker.core.errors import InvalidStateError
from quiz_taker.core.models import (
    MissedAnswer,
    Question,
    Quiz,
    SessionSnapshot,
    SessionState,
)


class QuizSession:
    """State machine for taking a single quiz.

    The session keeps a reference to the catalog's quiz object and never
    modifies it. Outcomes are stored per question index so that answering a
    question again after going back replaces the earlier result instead of
    counting twice.
    """

    def __init__(self) -> None:
        self._active_quiz: Quiz | None = None
        self._current_question_index: int = 0
        self._outcomes: dict[int, MissedAnswer | None] = {}
        self._completed: bool = False
        self._awaiting_submit: bool = False

        self._shuffle_rng = random.Random()

    def start_session(self, quiz: Quiz) -> None:
        """Bind ``quiz`` and start a fresh attempt at its first question."""
        self._active_quiz = quiz
        self._reset_progress()

    def stop_session(self) -> None:
        self._active_quiz = None
        self._reset_progress()

    def reset(self) -> None:
        """Start the bound quiz over. Without an active quiz only clears fields."""
        self._reset_progress()

    def _reset_progress(self) -> None:
        self._current_question_index = 0
        self._outcomes = {}
        self._completed = False
        # An empty quiz has nothing to answer and waits for submission right away.
        self._awaiting_submit = self._active_quiz is not None and not self._active_quiz.questions

    # --- State accessors ---

    @property
    def state(self) -> SessionState:
        if self._active_quiz is None:
            return SessionState.IDLE
        if self._completed:
            return SessionState.COMPLETED
        if self._awaiting_submit:
            return SessionState.AWAITING_SUBMIT
        return SessionState.IN_PROGRESS

    @property
    def active_quiz(self) -> Quiz | None:
        return self._active_quiz

    @property
    def current_question_index(self) -> int:
        return self._current_question_index

    @property
    def score(self) -> int:
        return sum(1 for outcome in self._outcomes.values() if outcome is None)

    @property
    def missed_answers(self) -> list[MissedAnswer]:
        return [
            outcome
            for _, outcome in sorted(self._outcomes.items())
            if outcome is not None
        ]

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def awaiting_submit(self) -> bool:
        return self._awaiting_submit

    @property
    def answered_count(self) -> int:
        return len(self._outcomes)

    @property
    def question_count(self) -> int:
        if self._active_quiz is None:
            return 0
        return self._active_quiz.question_count

    @property
    def current_question(self) -> Question | None:
        if self._active_quiz is None or not self._active_quiz.questions:
            return None
        return self._active_quiz.questions[self._current_question_index]

    def get_percentage(self) -> float:
        total = self.question_count
        if not total:
            return 0.0
        return (self.score / total) * 100

    # --- Transitions ---

    def present_options(self, question_index: int | None = None) -> list[str]:
        """Return the question's options in a freshly shuffled order.

        Every call shuffles independently, so two calls for the same question
        may return different orders.
        """
        quiz = self._require_active_quiz()
        index = self._current_question_index if question_index is None else question_index
        if not 0 <= index < quiz.question_count:
            raise IndexError(f"Question index {index} out of range")

        options = list(quiz.questions[index].options)
        self._shuffle_rng.shuffle(options)
        return options

    def submit_answer(self, candidate: str) -> bool:
        """Score ``candidate`` against the current question and advance.

        Returns True when the answer matched the correct answer exactly.
        """
        if self.state is not SessionState.IN_PROGRESS:
            raise InvalidStateError(f"Cannot submit an answer while {self.state.name}.")

        quiz = self._require_active_quiz()
        question = quiz.questions[self._current_question_index]
        is_correct = candidate == question.correct_answer

        if is_correct:
            outcome = None
        else:
            outcome = MissedAnswer(
                question_text=question.text,
                submitted_answer=candidate,
                correct_answer=question.correct_answer,
            )
        # Replaces any outcome recorded before a go_back.
        self._outcomes[self._current_question_index] = outcome

        if self._current_question_index < quiz.question_count - 1:
            self._current_question_index += 1
        else:
            self._awaiting_submit = True
        return is_correct

    def go_back(self) -> bool:
        """Move to the previous question. Returns False when nothing changed."""
        if self.state is not SessionState.IN_PROGRESS or self._current_question_index == 0:
            return False
        self._current_question_index -= 1
        return True

    def finalize(self) -> None:
        if self.state is not SessionState.AWAITING_SUBMIT:
            raise InvalidStateError(f"Cannot finalize a quiz while {self.state.name}.")
        self._completed = True
        self._awaiting_submit = False

    # --- Misc ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    def snapshot(self) -> SessionSnapshot:
        quiz = self._active_quiz
        return SessionSnapshot(
            state=self.state,
            quiz_id=quiz.id if quiz else None,
            quiz_name=quiz.name if quiz else None,
            current_question_index=self._current_question_index,
            question_count=self.question_count,
            current_question=self.current_question,
            score=self.score,
            missed_answers=tuple(self.missed_answers),
            answered_count=self.answered_count,
            percentage=self.get_percentage(),
        )

    def _require_active_quiz(self) -> Quiz:
        if self._active_quiz is None:
            raise InvalidStateError("No quiz is currently active.")
        return self._active_quiz
