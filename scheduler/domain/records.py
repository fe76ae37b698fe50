from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..config import DEFAULT_EASE_FACTOR, MIN_EASE_FACTOR, REVIEW_REPETITIONS
from .enums import CardState
from .errors import InvalidScheduleRecord


@dataclass(frozen=True)
class ScheduleRecord:
    """
    Scheduling state of one card for one learner.

    Records are values: the engine never mutates one, it returns a new record
    for the store to persist under (learner_id, card_id).
    """

    learner_id: Any
    card_id: Any
    ease_factor: float = DEFAULT_EASE_FACTOR
    interval_days: int = 0
    repetitions: int = 0
    last_reviewed_at: Optional[datetime] = None
    next_review_at: Optional[datetime] = None

    def __post_init__(self):
        if self.ease_factor < MIN_EASE_FACTOR:
            raise InvalidScheduleRecord(
                f"ease_factor {self.ease_factor} is below {MIN_EASE_FACTOR}"
            )
        if self.interval_days < 0 or self.repetitions < 0:
            raise InvalidScheduleRecord("interval_days and repetitions must be non-negative")

        if self.last_reviewed_at is None:
            if self.next_review_at is not None or self.interval_days or self.repetitions:
                raise InvalidScheduleRecord("a record that was never reviewed has no schedule")
            return

        if self.interval_days < 1:
            raise InvalidScheduleRecord("a reviewed record needs an interval of at least 1 day")
        if self.next_review_at is None or self.next_review_at <= self.last_reviewed_at:
            raise InvalidScheduleRecord("next_review_at must come after last_reviewed_at")

    @classmethod
    def new(cls, learner_id, card_id):
        return cls(learner_id=learner_id, card_id=card_id)

    @property
    def key(self):
        return (self.learner_id, self.card_id)

    @property
    def state(self) -> CardState:
        if self.last_reviewed_at is None:
            return CardState.NEW
        if self.repetitions < REVIEW_REPETITIONS:
            return CardState.LEARNING
        return CardState.REVIEW

    def is_due(self, as_of: datetime) -> bool:
        return self.next_review_at is not None and self.next_review_at <= as_of
