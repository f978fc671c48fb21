"""Tests for the quiz session state machine."""

from collections import Counter

import pytest

from quiz_taker.core.errors import InvalidStateError
from quiz_taker.core.models import MissedAnswer, SessionState


def _assert_answer_bookkeeping(session):
    assert session.score + len(session.missed_answers) == session.answered_count


class TestCapitalsScenario:

    def test_full_attempt(self, session, capitals):
        session.start_session(capitals)
        assert session.state is SessionState.IN_PROGRESS
        assert session.current_question_index == 0

        assert session.submit_answer("Lyon") is False
        assert session.score == 0
        assert session.missed_answers == [MissedAnswer("France?", "Lyon", "Paris")]
        assert session.current_question_index == 1
        assert session.state is SessionState.IN_PROGRESS

        assert session.submit_answer("Tokyo") is True
        assert session.score == 1
        assert session.current_question_index == 1
        assert session.state is SessionState.AWAITING_SUBMIT
        assert session.awaiting_submit
        assert not session.completed

        session.finalize()
        assert session.state is SessionState.COMPLETED
        assert session.completed
        assert not session.awaiting_submit
        assert session.score == 1
        assert len(session.missed_answers) == 1
        assert session.get_percentage() == 50.0

    def test_comparison_is_case_sensitive(self, session, capitals):
        session.start_session(capitals)
        assert session.submit_answer("paris") is False
        assert session.missed_answers[0].submitted_answer == "paris"


class TestStartSession:

    def test_idle_before_start(self, session):
        assert session.state is SessionState.IDLE
        assert session.active_quiz is None
        assert session.current_question is None

    def test_binds_catalog_object_not_copy(self, session, capitals):
        session.start_session(capitals)
        assert session.active_quiz is capitals

    def test_restart_clears_previous_attempt(self, session, capitals, make_quiz):
        session.start_session(capitals)
        session.submit_answer("Lyon")
        other = make_quiz(3)
        session.start_session(other)
        assert session.active_quiz is other
        assert session.current_question_index == 0
        assert session.score == 0
        assert session.missed_answers == []
        assert session.state is SessionState.IN_PROGRESS

    def test_single_question_quiz(self, session, make_quiz):
        session.start_session(make_quiz(1))
        assert session.state is SessionState.IN_PROGRESS
        session.submit_answer("right")
        assert session.state is SessionState.AWAITING_SUBMIT
        assert session.current_question_index == 0

    def test_empty_quiz_awaits_submit_immediately(self, session, make_quiz):
        session.start_session(make_quiz(0))
        assert session.state is SessionState.AWAITING_SUBMIT
        assert session.current_question is None
        session.finalize()
        assert session.state is SessionState.COMPLETED
        assert session.score == 0
        assert session.get_percentage() == 0.0


class TestSubmitAnswer:

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_every_index_visited_once(self, session, make_quiz, count):
        session.start_session(make_quiz(count))
        visited = []
        for step in range(count):
            assert session.state is SessionState.IN_PROGRESS
            visited.append(session.current_question_index)
            session.submit_answer("right" if step % 2 else "wrong")
            _assert_answer_bookkeeping(session)
        assert visited == list(range(count))
        assert session.state is SessionState.AWAITING_SUBMIT
        assert session.answered_count == count

    def test_rejected_while_awaiting_submit(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Paris")
        session.submit_answer("Tokyo")
        with pytest.raises(InvalidStateError):
            session.submit_answer("Tokyo")
        assert session.score == 2

    def test_rejected_when_idle(self, session):
        with pytest.raises(InvalidStateError):
            session.submit_answer("Paris")

    def test_rejected_after_completion(self, session, make_quiz):
        session.start_session(make_quiz(1))
        session.submit_answer("right")
        session.finalize()
        with pytest.raises(InvalidStateError):
            session.submit_answer("right")


class TestGoBack:

    def test_noop_at_first_question(self, session, capitals):
        session.start_session(capitals)
        before = session.snapshot()
        assert session.go_back() is False
        assert session.snapshot() == before

    def test_moves_to_previous_question(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Paris")
        assert session.go_back() is True
        assert session.current_question_index == 0
        assert session.current_question.text == "France?"

    def test_noop_while_awaiting_submit(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Paris")
        session.submit_answer("Tokyo")
        assert session.go_back() is False
        assert session.current_question_index == 1

    def test_noop_when_idle(self, session):
        assert session.go_back() is False

    def test_going_back_keeps_recorded_outcome(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Lyon")
        session.go_back()
        assert len(session.missed_answers) == 1
        assert session.score == 0

    def test_reanswering_replaces_earlier_outcome(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Lyon")
        session.go_back()
        session.submit_answer("Paris")
        assert session.score == 1
        assert session.missed_answers == []
        assert session.answered_count == 1
        assert session.current_question_index == 1
        _assert_answer_bookkeeping(session)

    def test_missed_answers_stay_in_question_order(self, session, make_quiz):
        session.start_session(make_quiz(3))
        session.submit_answer("right")
        session.submit_answer("wrong")
        session.go_back()
        session.go_back()
        session.submit_answer("nope")
        assert [m.question_text for m in session.missed_answers] == ["Question 1?", "Question 2?"]
        assert session.answered_count <= session.current_question_index + 1


class TestFinalize:

    def test_rejected_while_in_progress(self, session, capitals):
        session.start_session(capitals)
        with pytest.raises(InvalidStateError):
            session.finalize()
        assert session.state is SessionState.IN_PROGRESS

    def test_rejected_when_idle(self, session):
        with pytest.raises(InvalidStateError):
            session.finalize()

    def test_rejected_twice(self, session, make_quiz):
        session.start_session(make_quiz(1))
        session.submit_answer("right")
        session.finalize()
        with pytest.raises(InvalidStateError):
            session.finalize()


class TestReset:

    def test_reset_after_completion(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Lyon")
        session.submit_answer("Tokyo")
        session.finalize()

        session.reset()
        assert session.current_question_index == 0
        assert session.score == 0
        assert session.missed_answers == []
        assert not session.completed
        assert not session.awaiting_submit
        assert session.active_quiz is capitals
        assert session.state is SessionState.IN_PROGRESS

    def test_reset_does_not_touch_catalog(self, session, catalog, capitals):
        before = catalog.list_quizzes()
        session.start_session(capitals)
        session.submit_answer("Lyon")
        session.reset()
        assert catalog.list_quizzes() == before
        assert [q.text for q in capitals.questions] == ["France?", "Japan?"]

    def test_reset_mid_attempt_reinitializes(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Paris")
        session.reset()
        assert session.current_question_index == 0
        assert session.answered_count == 0

    def test_reset_when_idle_stays_idle(self, session):
        session.reset()
        assert session.state is SessionState.IDLE

    def test_stop_session_returns_to_idle(self, session, capitals):
        session.start_session(capitals)
        session.stop_session()
        assert session.state is SessionState.IDLE
        assert session.active_quiz is None


class TestPresentOptions:

    def test_returns_permutation_every_call(self, session, capitals):
        session.start_session(capitals)
        for _ in range(20):
            options = session.present_options()
            assert Counter(options) == Counter(["Paris", "Lyon", "Nice", "Tours"])

    def test_explicit_index(self, session, capitals):
        session.start_session(capitals)
        assert sorted(session.present_options(1)) == sorted(["Osaka", "Tokyo", "Kyoto", "Nara"])

    def test_does_not_mutate_state(self, session, capitals):
        session.start_session(capitals)
        before = session.snapshot()
        session.present_options()
        assert session.snapshot() == before
        assert capitals.questions[0].options == ("Paris", "Lyon", "Nice", "Tours")

    def test_order_is_not_cached(self, session, capitals):
        session.start_session(capitals)
        orders = {tuple(session.present_options()) for _ in range(50)}
        assert len(orders) > 1

    def test_seed_makes_order_reproducible(self, session, capitals):
        session.start_session(capitals)
        session.set_shuffle_seed(7)
        first = [session.present_options() for _ in range(3)]
        session.set_shuffle_seed(7)
        second = [session.present_options() for _ in range(3)]
        assert first == second

    def test_out_of_range_index(self, session, capitals):
        session.start_session(capitals)
        with pytest.raises(IndexError):
            session.present_options(2)

    def test_requires_active_quiz(self, session):
        with pytest.raises(InvalidStateError):
            session.present_options()


class TestSnapshot:

    def test_snapshot_reflects_progress(self, session, capitals):
        session.start_session(capitals)
        session.submit_answer("Lyon")
        snapshot = session.snapshot()
        assert snapshot.state is SessionState.IN_PROGRESS
        assert snapshot.quiz_id == capitals.id
        assert snapshot.quiz_name == "Capitals"
        assert snapshot.current_question.text == "Japan?"
        assert snapshot.question_count == 2
        assert snapshot.answered_count == 1
        assert snapshot.missed_answers == (MissedAnswer("France?", "Lyon", "Paris"),)
        assert snapshot.can_go_back

    def test_idle_snapshot(self, session):
        snapshot = session.snapshot()
        assert snapshot.state is SessionState.IDLE
        assert snapshot.quiz_id is None
        assert snapshot.question_count == 0
        assert not snapshot.can_go_back
