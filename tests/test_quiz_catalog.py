"""Tests for the in-memory quiz catalog."""

import pytest

from quiz_taker.core.errors import InvalidInputError, NotFoundError
from quiz_taker.core.models import QuizSummary


class TestCreateQuiz:

    def test_new_quiz_is_empty(self, catalog):
        quiz_id = catalog.create_quiz("Capitals")
        quiz = catalog.get_quiz(quiz_id)
        assert quiz.name == "Capitals"
        assert quiz.questions == []
        assert quiz.question_count == 0

    def test_identifiers_are_unique(self, catalog):
        first = catalog.create_quiz("Same")
        second = catalog.create_quiz("Same")
        assert first != second
        assert catalog.get_quiz_count() == 2

    def test_name_is_stripped(self, catalog):
        quiz_id = catalog.create_quiz("  History  ")
        assert catalog.get_quiz(quiz_id).name == "History"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, catalog, name):
        with pytest.raises(InvalidInputError):
            catalog.create_quiz(name)
        assert not catalog.has_quizzes()


class TestAddQuestion:

    def test_questions_keep_insertion_order(self, capitals):
        assert [q.text for q in capitals.questions] == ["France?", "Japan?"]
        assert capitals.questions[1].options == ("Osaka", "Tokyo", "Kyoto", "Nara")
        assert capitals.questions[1].correct_answer == "Tokyo"

    def test_returns_question_id(self, catalog):
        quiz_id = catalog.create_quiz("Q")
        question_id = catalog.add_question(quiz_id, "Pick a", ["a", "b"], "a")
        assert catalog.get_quiz(quiz_id).questions[0].id == question_id

    def test_unknown_quiz_leaves_catalog_unchanged(self, catalog, capitals):
        before = catalog.list_quizzes()
        with pytest.raises(NotFoundError):
            catalog.add_question("missing", "Spain?", ["Madrid", "Bilbao"], "Madrid")
        assert catalog.list_quizzes() == before
        assert capitals.question_count == 2

    def test_not_found_is_a_lookup_error(self, catalog):
        with pytest.raises(LookupError):
            catalog.get_quiz("missing")

    def test_question_is_immutable(self, capitals):
        with pytest.raises(AttributeError):
            capitals.questions[0].text = "Changed"

    def test_whitespace_is_trimmed(self, catalog):
        quiz_id = catalog.create_quiz("Trim")
        catalog.add_question(quiz_id, " 2 + 2? ", [" 4 ", "5"], "4 ")
        question = catalog.get_quiz(quiz_id).questions[0]
        assert question.text == "2 + 2?"
        assert question.options == ("4", "5")
        assert question.correct_answer == "4"

    @pytest.mark.parametrize(
        "text, options, correct",
        [
            ("", ["a", "b"], "a"),
            ("Question?", ["a"], "a"),
            ("Question?", ["a", ""], "a"),
            ("Question?", "ab", "a"),
            ("Question?", ["a", "b"], "c"),
        ],
    )
    def test_invalid_question_rejected(self, catalog, text, options, correct):
        quiz_id = catalog.create_quiz("Invalid")
        with pytest.raises(InvalidInputError):
            catalog.add_question(quiz_id, text, options, correct)
        assert catalog.get_quiz(quiz_id).questions == []


class TestListQuizzes:

    def test_listing_preserves_insertion_order(self, catalog, capitals):
        other_id = catalog.create_quiz("Rivers")
        assert catalog.list_quizzes() == [
            QuizSummary(quiz_id=capitals.id, name="Capitals", question_count=2),
            QuizSummary(quiz_id=other_id, name="Rivers", question_count=0),
        ]

    def test_empty_catalog(self, catalog):
        assert catalog.list_quizzes() == []
        assert not catalog.has_quizzes()
