"""Service for managing the in-memory collection of quizzes."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from quiz_taker.constants.quiz_constants import MIN_OPTION_COUNT
from quiz_taker.core.errors import InvalidInputError, NotFoundError
from quiz_taker.core.models import Question, QuestionId, Quiz, QuizId, QuizSummary


class QuizCatalog:
    """Append-only store of quizzes and their questions, in insertion order."""

    def __init__(self) -> None:
        self._quizzes: dict[QuizId, Quiz] = {}

    def create_quiz(self, name: str) -> QuizId:
        """Append a new empty quiz and return its identifier."""
        cleaned_name = name.strip()
        if not cleaned_name:
            raise InvalidInputError("Quiz name must not be empty.")

        quiz = Quiz(id=uuid4().hex, name=cleaned_name)
        self._quizzes[quiz.id] = quiz
        return quiz.id

    def add_question(
        self,
        quiz_id: QuizId,
        text: str,
        options: Sequence[str],
        correct_answer: str,
    ) -> QuestionId:
        """Append a question to the given quiz, preserving presentation order."""
        quiz = self.get_quiz(quiz_id)
        question = self._prepare_question(text, options, correct_answer)
        quiz.questions.append(question)
        return question.id

    def list_quizzes(self) -> list[QuizSummary]:
        return [
            QuizSummary(quiz_id=quiz.id, name=quiz.name, question_count=quiz.question_count)
            for quiz in self._quizzes.values()
        ]

    def get_quiz(self, quiz_id: QuizId) -> Quiz:
        quiz = self._quizzes.get(quiz_id)
        if quiz is None:
            raise NotFoundError(f"Quiz {quiz_id!r} not found")
        return quiz

    def has_quizzes(self) -> bool:
        return bool(self._quizzes)

    def get_quiz_count(self) -> int:
        return len(self._quizzes)

    def _prepare_question(
        self,
        text: str,
        options: Sequence[str],
        correct_answer: str,
    ) -> Question:
        """Validate and normalize a question before storage."""
        cleaned_text = text.strip()
        if not cleaned_text:
            raise InvalidInputError("Question text must not be empty.")

        cleaned_options = self._validate_options(options)
        cleaned_answer = correct_answer.strip()
        if cleaned_answer not in cleaned_options:
            raise InvalidInputError("Correct answer must match one of the options.")

        return Question(
            id=uuid4().hex,
            text=cleaned_text,
            options=cleaned_options,
            correct_answer=cleaned_answer,
        )

    @staticmethod
    def _validate_options(options: Sequence[str]) -> tuple[str, ...]:
        if isinstance(options, str):
            raise InvalidInputError("Options must be a sequence of strings.")
        if len(options) < MIN_OPTION_COUNT:
            raise InvalidInputError(f"Each question needs at least {MIN_OPTION_COUNT} options.")
        cleaned = tuple(option.strip() for option in options)
        if any(not option for option in cleaned):
            raise InvalidInputError("Option text cannot be empty.")
        return cleaned
