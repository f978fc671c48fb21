"""Tests for the QuizManager facade."""

import logging

import pytest

from quiz_taker.core.errors import InvalidInputError, InvalidStateError, NotFoundError
from quiz_taker.core.models import SessionState
from quiz_taker.core.quiz_importer import QuizImportError
from quiz_taker.core.quiz_manager import QuizManager

QUIZ_FILE = """QUIZ: Capitals

Q: France?
A: Paris
B: Lyon
C: Nice
D: Tours
CORRECT: A

Q: Japan?
A: Osaka
B: Tokyo
C: Kyoto
D: Nara
CORRECT: B

---

QUIZ: Rivers
Q: Longest river in France?
A: Loire
B: Seine
CORRECT: A
"""


class TestCatalogCommands:

    def test_create_and_list(self, manager):
        quiz_id = manager.create_quiz("Capitals")
        manager.add_question(quiz_id, "France?", ["Paris", "Lyon", "Nice", "Tours"], "Paris")
        summaries = manager.list_quizzes()
        assert len(summaries) == 1
        assert summaries[0].quiz_id == quiz_id
        assert summaries[0].question_count == 1
        assert manager.has_quizzes()

    def test_errors_propagate(self, manager):
        with pytest.raises(InvalidInputError):
            manager.create_quiz("")
        with pytest.raises(NotFoundError):
            manager.add_question("nope", "Q?", ["a", "b"], "a")
        with pytest.raises(NotFoundError):
            manager.get_quiz("nope")

    def test_managers_do_not_share_state(self):
        first = QuizManager()
        second = QuizManager()
        first.create_quiz("Only here")
        assert second.list_quizzes() == []


class TestSessionCommands:

    def test_capitals_flow(self, manager, capitals):
        snapshot = manager.select_quiz(capitals.id)
        assert snapshot.state is SessionState.IN_PROGRESS
        assert snapshot.current_question_index == 0

        assert manager.submit_answer("Lyon") is False
        assert manager.submit_answer("Tokyo") is True
        assert manager.get_snapshot().state is SessionState.AWAITING_SUBMIT

        result = manager.finalize()
        assert result.completed
        assert result.score == 1
        assert len(result.missed_answers) == 1
        assert manager.get_missed_answers()[0].correct_answer == "Paris"

    def test_retry_restarts_same_quiz(self, manager, capitals):
        manager.select_quiz(capitals.id)
        manager.submit_answer("Paris")
        manager.submit_answer("Osaka")
        manager.finalize()

        snapshot = manager.retry()
        assert snapshot.state is SessionState.IN_PROGRESS
        assert snapshot.quiz_id == capitals.id
        assert snapshot.score == 0
        assert snapshot.missed_answers == ()

    def test_select_unknown_quiz(self, manager):
        with pytest.raises(NotFoundError):
            manager.select_quiz("missing")
        assert manager.get_snapshot().state is SessionState.IDLE

    def test_go_back_and_options(self, manager, capitals):
        manager.select_quiz(capitals.id)
        assert manager.go_back() is False
        manager.submit_answer("Paris")
        assert sorted(manager.present_options()) == ["Kyoto", "Nara", "Osaka", "Tokyo"]
        assert manager.go_back() is True
        assert manager.get_snapshot().current_question_index == 0

    def test_finalize_in_progress_rejected(self, manager, capitals):
        manager.select_quiz(capitals.id)
        with pytest.raises(InvalidStateError):
            manager.finalize()

    def test_stop_session(self, manager, capitals):
        manager.select_quiz(capitals.id)
        manager.stop_session()
        assert manager.get_snapshot().state is SessionState.IDLE

    def test_shuffle_seed_forwarded(self, manager, capitals):
        manager.select_quiz(capitals.id)
        manager.set_shuffle_seed(3)
        first = manager.present_options()
        manager.set_shuffle_seed(3)
        assert manager.present_options() == first

    def test_logs_session_events(self, manager, capitals, caplog):
        with caplog.at_level(logging.INFO, logger="quiz_taker"):
            manager.select_quiz(capitals.id)
        assert "Started session for quiz 'Capitals'" in caplog.text


class TestImportQuizzes:

    def test_imports_every_quiz(self, manager, tmp_path):
        quiz_file = tmp_path / "capitals.txt"
        quiz_file.write_text(QUIZ_FILE, encoding="utf-8")

        quiz_ids = manager.import_quizzes(quiz_file)

        assert [s.name for s in manager.list_quizzes()] == ["Capitals", "Rivers"]
        capitals = manager.get_quiz(quiz_ids[0])
        assert [q.correct_answer for q in capitals.questions] == ["Paris", "Tokyo"]
        rivers = manager.get_quiz(quiz_ids[1])
        assert rivers.questions[0].options == ("Loire", "Seine")

    def test_malformed_file_leaves_catalog_empty(self, manager, tmp_path):
        quiz_file = tmp_path / "broken.txt"
        quiz_file.write_text(QUIZ_FILE + "\nQ: Missing options\nCORRECT: A\n", encoding="utf-8")
        with pytest.raises(QuizImportError):
            manager.import_quizzes(quiz_file)
        assert manager.list_quizzes() == []

    def test_missing_file(self, manager, tmp_path):
        with pytest.raises(OSError):
            manager.import_quizzes(tmp_path / "absent.txt")
