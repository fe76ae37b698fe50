import structlog

from ..data.repos import DjangoScheduleStore
from ..domain.logic import order_schedules, select_due, update, validate_quality
from ..utils.time import now as default_clock
from ..utils.time import scheduler_timezone, to_local_iso

logger = structlog.get_logger()


def submit_review(learner_id, card_id, quality, store=None, clock=None):
    """
    Apply one review and persist the result. Either the new record is stored
    and returned, or an error propagates and the prior record is untouched.
    """
    if store is None:
        store = DjangoScheduleStore()
    clock = clock or default_clock

    logger.info("review_received",
        learner_id=str(learner_id),
        card_id=str(card_id),
        quality=quality,
    )
    # Reject before touching the store
    quality = validate_quality(quality)

    # Serialize schedule update per (learner, card)
    with store.locked(learner_id, card_id):
        prior = store.get_schedule(learner_id, card_id)
        record = update(
            prior, quality, clock(),
            learner_id=learner_id, card_id=card_id, tz=scheduler_timezone(),
        )
        store.put_schedule(record)

    logger.info("review_scheduled",
        learner_id=str(learner_id),
        card_id=str(card_id),
        first_review=prior is None,
        ease_factor=record.ease_factor,
        interval_days=record.interval_days,
        repetitions=record.repetitions,
        next_review_utc=record.next_review_at.isoformat(),
        next_review_local=to_local_iso(record.next_review_at),
    )
    return record


def get_due_cards(learner_id, as_of=None, store=None, clock=None):
    if store is None:
        store = DjangoScheduleStore()
    as_of = as_of or (clock or default_clock)()

    due = select_due(store.list_schedules(learner_id), as_of)
    logger.info("due_cards_selected",
        learner_id=str(learner_id),
        as_of_utc=as_of.isoformat(),
        card_count=len(due),
    )
    return due


def list_schedules(learner_id, store=None):
    if store is None:
        store = DjangoScheduleStore()
    return order_schedules(store.list_schedules(learner_id))
