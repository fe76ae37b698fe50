import pytest
from datetime import datetime, timedelta, timezone

from scheduler.domain.errors import InvalidQuality
from scheduler.domain.records import ScheduleRecord
from scheduler.domain.stats import count_by_state, summarize_session

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def test_empty_session_has_zero_accuracy():
    stats = summarize_session([])
    assert stats.cards_reviewed == 0
    assert stats.correct_answers == 0
    assert stats.accuracy == 0.0
    assert stats.accuracy_rate == 0.0


def test_session_counts_quality_three_as_correct():
    stats = summarize_session([1, 3, 5, 2])
    assert stats.cards_reviewed == 4
    assert stats.correct_answers == 2
    assert stats.accuracy == pytest.approx(0.5)
    assert stats.accuracy_rate == pytest.approx(50.0)


def test_session_accepts_any_iterable():
    stats = summarize_session(q for q in (3, 3, 3))
    assert stats.accuracy == 1.0


def test_session_rejects_invalid_quality():
    with pytest.raises(InvalidQuality):
        summarize_session([3, 0])


def test_count_by_state():
    def rec(card_id, reps, next_at):
        return ScheduleRecord(
            learner_id="l", card_id=card_id, interval_days=1, repetitions=reps,
            last_reviewed_at=next_at - timedelta(days=1), next_review_at=next_at,
        )

    records = [
        ScheduleRecord.new("l", "new"),
        rec("learning-due", 0, T0 - timedelta(hours=1)),
        rec("learning", 1, T0 + timedelta(days=1)),
        rec("review-due", 4, T0),
    ]

    assert count_by_state(records, T0) == {
        "new": 1, "learning": 2, "review": 1, "due": 2,
    }
