import pytest
import requests
import uuid
import logging
from datetime import datetime, timedelta, timezone

BASE_URL = "http://127.0.0.1:8000"
logger = logging.getLogger(__name__)

def post_review(learner_id, card_id, quality):
    """Helper for POST /reviews"""
    payload = {
        "learner_id": str(learner_id),
        "card_id": str(card_id),
        "quality": quality,
    }
    r = requests.post(f"{BASE_URL}/reviews", json=payload)
    data = r.json()
    logger.info(
        "POST /reviews quality=%s → status=%s interval=%s repetitions=%s",
        quality,
        r.status_code,
        data.get("interval_days"),
        data.get("repetitions"),
    )
    return r


def get_due(learner_id, as_of):
    """Helper for GET /learners/{id}/due-cards"""
    r = requests.get(f"{BASE_URL}/learners/{learner_id}/due-cards", params={"as_of": as_of.isoformat()})
    data = r.json()
    logger.info(
        "GET /due-cards as_of=%s → status=%s card_count=%s",
        as_of.isoformat(),
        r.status_code,
        len(data["card_ids"]),
    )
    return r


@pytest.mark.integration
def test_first_and_second_review_live():
    """1 day after the first acceptable review, 6 days after the second"""
    learner_id, card_id = uuid.uuid4(), uuid.uuid4()

    r1 = post_review(learner_id, card_id, 4)
    assert r1.status_code == 201
    assert r1.json()["interval_days"] == 1

    r2 = post_review(learner_id, card_id, 4)
    assert r2.json()["interval_days"] == 6
    assert r2.json()["repetitions"] == 2
    logger.info("✓ Passed: 1 day then 6 days")


@pytest.mark.integration
def test_lapse_live():
    learner_id, card_id = uuid.uuid4(), uuid.uuid4()
    for q in (5, 5, 5):
        post_review(learner_id, card_id, q)

    d = post_review(learner_id, card_id, 2).json()
    assert d["repetitions"] == 0
    assert d["interval_days"] == 1
    logger.info("✓ Passed: lapse resets the card")


@pytest.mark.integration
def test_invalid_quality_live():
    r = post_review(uuid.uuid4(), uuid.uuid4(), 6)
    assert r.status_code == 400


@pytest.mark.integration
def test_due_cards_includes_and_excludes_live():
    """Due-cards should include due items and exclude future ones"""
    learner_id, card_soon, card_later = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()

    post_review(learner_id, card_soon, 1)
    post_review(learner_id, card_later, 5)
    post_review(learner_id, card_later, 5)

    now = datetime.now(timezone.utc)
    assert get_due(learner_id, now + timedelta(days=2)).json()["card_ids"] == [str(card_soon)]
    assert get_due(learner_id, now + timedelta(days=10)).json()["card_ids"] == [
        str(card_soon), str(card_later),
    ]
    assert get_due(learner_id, now - timedelta(days=1)).json()["card_ids"] == []

    logger.info("✓ Passed: due-cards includes/excludes correctly")
