from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Tuple

from .enums import Quality
from .errors import InvalidQuality, ScheduleOverflow
from .records import ScheduleRecord
from ..config import (
    ACCEPTABLE_QUALITY,
    FIRST_INTERVAL_DAYS,
    LAPSE_INTERVAL_DAYS,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    SECOND_INTERVAL_DAYS,
)
from ..utils.time import add_calendar_days


def validate_quality(quality) -> Quality:
    # bool is an int subclass but never a rating
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQuality(quality)
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidQuality(quality)
    return Quality(quality)


def round_half_up(value: float) -> int:
    # round() is banker's rounding: round(12.5) == 12
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def next_ease_factor(ease_factor: float, quality: int) -> float:
    miss = 5 - quality
    new_ease = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(new_ease, MIN_EASE_FACTOR)


def next_interval(quality: int, interval_days: int, ease_factor: float,
                  repetitions: int) -> Tuple[int, int]:
    """Return (interval_days, repetitions) after a review of ``quality``."""
    if quality < ACCEPTABLE_QUALITY:
        return LAPSE_INTERVAL_DAYS, 0

    if repetitions == 0:
        interval = FIRST_INTERVAL_DAYS
    elif repetitions == 1:
        interval = SECOND_INTERVAL_DAYS
    else:
        interval = round_half_up(interval_days * ease_factor)
    return interval, repetitions + 1


def update(record: Optional[ScheduleRecord], quality: int, now, learner_id=None,
           card_id=None, tz=None) -> ScheduleRecord:
    """
    Apply one review to ``record`` and return the new record.

    ``record`` is None for the first review of a card, in which case
    ``learner_id`` and ``card_id`` identify the new record. Day arithmetic
    follows the wall clock of ``tz`` (the zone of ``now`` when omitted).
    """
    quality = validate_quality(quality)
    if record is None:
        record = ScheduleRecord.new(learner_id, card_id)

    # both computed from the values before this review
    interval, repetitions = next_interval(
        quality, record.interval_days, record.ease_factor, record.repetitions
    )
    ease = next_ease_factor(record.ease_factor, quality)
    try:
        next_review_at = add_calendar_days(now, interval, tz)
    except OverflowError as exc:
        raise ScheduleOverflow(interval) from exc

    return replace(
        record,
        ease_factor=ease,
        interval_days=interval,
        repetitions=repetitions,
        last_reviewed_at=now,
        next_review_at=next_review_at,
    )


def _due_order(record: ScheduleRecord):
    return (record.next_review_at, record.card_id)


def select_due(records: Iterable[ScheduleRecord], as_of) -> List[ScheduleRecord]:
    """Records due at ``as_of`` (inclusive), earliest first, ties by card_id."""
    return sorted((r for r in records if r.is_due(as_of)), key=_due_order)


def order_schedules(records: Iterable[ScheduleRecord]) -> List[ScheduleRecord]:
    """All records in due order; never-reviewed records go last."""
    records = list(records)
    scheduled = [r for r in records if r.next_review_at is not None]
    unscheduled = [r for r in records if r.next_review_at is None]
    return sorted(scheduled, key=_due_order) + sorted(unscheduled, key=lambda r: r.card_id)
