import pytest

from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.core.services.quiz_catalog import QuizCatalog
from quiz_taker.core.services.quiz_session import QuizSession

CAPITALS = [
    ("France?", ["Paris", "Lyon", "Nice", "Tours"], "Paris"),
    ("Japan?", ["Osaka", "Tokyo", "Kyoto", "Nara"], "Tokyo"),
]


@pytest.fixture
def catalog():
    return QuizCatalog()


@pytest.fixture
def session():
    return QuizSession()


@pytest.fixture
def capitals(catalog):
    """The two-question 'Capitals' quiz, already stored in the catalog."""
    quiz_id = catalog.create_quiz("Capitals")
    for text, options, correct in CAPITALS:
        catalog.add_question(quiz_id, text, options, correct)
    return catalog.get_quiz(quiz_id)


@pytest.fixture
def manager(catalog, session):
    return QuizManager(catalog=catalog, session=session)


@pytest.fixture
def make_quiz(catalog):
    """Build a quiz with ``count`` questions whose correct answer is always 'right'."""

    def _make(count, name="Generated"):
        quiz_id = catalog.create_quiz(name)
        for number in range(count):
            catalog.add_question(
                quiz_id,
                f"Question {number + 1}?",
                ["right", "wrong", "also wrong", "nope"],
                "right",
            )
        return catalog.get_quiz(quiz_id)

    return _make
