import pytest

from conftest import make_quiz, make_result
from quizhost.db import Base
from quizhost.errors import StoreError, ValidationError


def test_leaderboard_orders_by_score_then_time(result_store):
    result_store.submit(make_result(participantName="A", score=5, totalTimeSpentSeconds=20))
    result_store.submit(make_result(participantName="B", score=8, totalTimeSpentSeconds=15))
    result_store.submit(make_result(participantName="C", score=8, totalTimeSpentSeconds=10))

    board = result_store.list_for_quiz("q1")
    assert [(r.score, r.total_time_spent_seconds) for r in board] == [(8, 10), (8, 15), (5, 20)]
    assert [r.participant_name for r in board] == ["C", "B", "A"]


def test_equal_score_and_time_keep_submission_order(result_store):
    for name in ["first", "second", "third"]:
        result_store.submit(make_result(participantName=name, score=6, totalTimeSpentSeconds=30))

    assert [r.participant_name for r in result_store.list_for_quiz("q1")] == ["first", "second", "third"]


def test_submit_assigns_increasing_ids(result_store):
    ids = [result_store.submit(make_result()) for _ in range(3)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_zero_score_is_accepted(result_store):
    result_store.submit(make_result(score=0))
    [stored] = result_store.list_for_quiz("q1")
    assert stored.score == 0


def test_missing_time_defaults_to_zero(result_store):
    result = make_result()
    del result["totalTimeSpentSeconds"]
    result_store.submit(result)

    [stored] = result_store.list_for_quiz("q1")
    assert stored.total_time_spent_seconds == 0


def test_null_time_defaults_to_zero(result_store):
    result_store.submit(make_result(totalTimeSpentSeconds=None))
    assert result_store.list_for_quiz("q1")[0].total_time_spent_seconds == 0


def test_legacy_total_time_spent_name(result_store):
    result = make_result()
    del result["totalTimeSpentSeconds"]
    result["totalTimeSpent"] = 42
    result_store.submit(result)

    assert result_store.list_for_quiz("q1")[0].total_time_spent_seconds == 42


@pytest.mark.parametrize("overrides", [
    {"participantName": ""},
    {"quizId": ""},
    {"completedAt": ""},
    {"score": -1},
    {"score": None},
    {"totalQuestions": 0},
    {"totalTimeSpentSeconds": -5},
    {"score": 10**20, "totalQuestions": 10**20},
    {"totalTimeSpentSeconds": 2**63},
    {"score": True},
    {"totalQuestions": "10"},
    {"score": 7.0},
])
def test_invalid_result_rejected(result_store, overrides):
    with pytest.raises(ValidationError):
        result_store.submit(make_result(**overrides))
    assert result_store.list_for_quiz("q1") == []


@pytest.mark.parametrize("field", ["participantName", "quizId", "score", "totalQuestions", "completedAt"])
def test_required_fields(result_store, field):
    result = make_result()
    del result[field]
    with pytest.raises(ValidationError):
        result_store.submit(result)


def test_retakes_add_rows(result_store):
    result_store.submit(make_result(score=3))
    result_store.submit(make_result(score=9))

    assert [r.score for r in result_store.list_for_quiz("q1")] == [9, 3]


def test_results_filtered_by_quiz(result_store):
    result_store.submit(make_result(quizId="q1", participantName="one"))
    result_store.submit(make_result(quizId="q2", participantName="two"))

    assert [r.participant_name for r in result_store.list_for_quiz("q2")] == ["two"]


def test_unknown_quiz_has_empty_leaderboard(result_store):
    assert result_store.list_for_quiz("nobody-played-this") == []


def test_results_do_not_require_quiz_and_survive_its_deletion(quiz_store, result_store):
    result_store.submit(make_result(quizId="never-created"))
    assert len(result_store.list_for_quiz("never-created")) == 1

    quiz_store.create(make_quiz("q1"))
    result_store.submit(make_result(quizId="q1"))
    quiz_store.delete("q1")

    assert len(result_store.list_for_quiz("q1")) == 1


def test_largest_storable_values_round_trip(result_store):
    biggest = 2**63 - 1
    result_store.submit(make_result(score=biggest, totalQuestions=biggest, totalTimeSpentSeconds=biggest))

    [stored] = result_store.list_for_quiz("q1")
    assert (stored.score, stored.total_questions, stored.total_time_spent_seconds) == (biggest, biggest, biggest)


def test_database_failures_become_store_errors(database, result_store):
    Base.metadata.drop_all(bind=database.engine)

    with pytest.raises(StoreError, match="^Failed to submit result$"):
        result_store.submit(make_result())
    with pytest.raises(StoreError, match="^Failed to fetch results$"):
        result_store.list_for_quiz("q1")
