"""Business logic shared between the UI and the quiz services."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path
from threading import Lock

from quiz_taker.core.models import (
    MissedAnswer,
    QuestionId,
    Quiz,
    QuizId,
    QuizSummary,
    SessionSnapshot,
)
from quiz_taker.core.quiz_importer import load_quizzes_from_file
from quiz_taker.core.services.quiz_catalog import QuizCatalog
from quiz_taker.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade for the quiz services: Catalog and Session.

    The catalog and session are owned by the caller and passed in, so several
    managers never share hidden global state. Every command runs under one
    lock and therefore never observes a half-updated session.
    """

    def __init__(
        self,
        catalog: QuizCatalog | None = None,
        session: QuizSession | None = None,
    ) -> None:
        self._lock = Lock()
        self._catalog = catalog if catalog is not None else QuizCatalog()
        self._session = session if session is not None else QuizSession()

    # --- Catalog Delegation ---

    def create_quiz(self, name: str) -> QuizId:
        with self._lock:
            quiz_id = self._catalog.create_quiz(name)
            logger.info("Created quiz %r (%s)", name.strip(), quiz_id)
            return quiz_id

    def add_question(
        self,
        quiz_id: QuizId,
        text: str,
        options: Sequence[str],
        correct_answer: str,
    ) -> QuestionId:
        with self._lock:
            question_id = self._catalog.add_question(quiz_id, text, options, correct_answer)
            logger.info("Added question %s to quiz %s", question_id, quiz_id)
            return question_id

    def list_quizzes(self) -> list[QuizSummary]:
        with self._lock:
            return self._catalog.list_quizzes()

    def get_quiz(self, quiz_id: QuizId) -> Quiz:
        with self._lock:
            return self._catalog.get_quiz(quiz_id)

    def has_quizzes(self) -> bool:
        with self._lock:
            return self._catalog.has_quizzes()

    def import_quizzes(self, file_path: Path) -> list[QuizId]:
        """Add every quiz defined in ``file_path`` to the catalog.

        The file is parsed completely before anything is added, so a
        malformed file leaves the catalog untouched.
        """
        imported = load_quizzes_from_file(file_path)
        with self._lock:
            quiz_ids: list[QuizId] = []
            for quiz in imported.quizzes:
                quiz_id = self._catalog.create_quiz(quiz.name)
                for question in quiz.questions:
                    self._catalog.add_question(
                        quiz_id, question.text, question.options, question.correct_answer
                    )
                quiz_ids.append(quiz_id)
            logger.info("Imported %d quiz(zes) from %s", len(quiz_ids), file_path)
            return quiz_ids

    # --- Session Delegation ---

    def select_quiz(self, quiz_id: QuizId) -> SessionSnapshot:
        """Start a fresh attempt at the given quiz."""
        with self._lock:
            quiz = self._catalog.get_quiz(quiz_id)
            self._session.start_session(quiz)
            logger.info("Started session for quiz %r", quiz.name)
            return self._session.snapshot()

    def stop_session(self) -> None:
        with self._lock:
            self._session.stop_session()

    def present_options(self, question_index: int | None = None) -> list[str]:
        with self._lock:
            return self._session.present_options(question_index)

    def submit_answer(self, candidate: str) -> bool:
        with self._lock:
            index = self._session.current_question_index
            is_correct = self._session.submit_answer(candidate)
            logger.debug("Question %d answered %s", index + 1, "correctly" if is_correct else "incorrectly")
            return is_correct

    def go_back(self) -> bool:
        with self._lock:
            moved = self._session.go_back()
            if moved:
                logger.debug("Moved back to question %d", self._session.current_question_index + 1)
            return moved

    def finalize(self) -> SessionSnapshot:
        with self._lock:
            self._session.finalize()
            logger.info(
                "Quiz finished with %d of %d correct",
                self._session.score,
                self._session.question_count,
            )
            return self._session.snapshot()

    def retry(self) -> SessionSnapshot:
        with self._lock:
            self._session.reset()
            logger.info("Session reset for another attempt")
            return self._session.snapshot()

    def get_snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._session.snapshot()

    def get_missed_answers(self) -> list[MissedAnswer]:
        with self._lock:
            return self._session.missed_answers

    # --- Settings ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._session.set_shuffle_seed(seed)
