from contextlib import contextmanager

from django.db import DatabaseError, transaction

from ..domain.errors import StoreUnavailable
from ..domain.records import ScheduleRecord
from .models import CardSchedule


def _to_record(row):
    return ScheduleRecord(
        learner_id=row.learner_id,
        card_id=row.card_id,
        ease_factor=row.ease_factor,
        interval_days=row.interval_days,
        repetitions=row.repetitions,
        last_reviewed_at=row.last_reviewed_at,
        next_review_at=row.next_review_at,
    )


class DjangoScheduleStore:
    """ScheduleStore backed by the CardSchedule table."""

    @contextmanager
    def locked(self, learner_id, card_id):
        """
        Lock the schedule row for update to avoid races between two reviews
        of the same card. A placeholder row is created for a first review;
        it only survives if the block completes.
        """
        try:
            with transaction.atomic():
                row, _ = CardSchedule.objects.get_or_create(
                    learner_id=learner_id, card_id=card_id
                )
                CardSchedule.objects.select_for_update().get(pk=row.pk)
                yield
        except DatabaseError as exc:
            raise StoreUnavailable(str(exc)) from exc

    def get_schedule(self, learner_id, card_id):
        try:
            row = (CardSchedule.objects
                   .filter(learner_id=learner_id, card_id=card_id,
                           last_reviewed_at__isnull=False)
                   .first())
        except DatabaseError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return _to_record(row) if row else None

    def put_schedule(self, record):
        try:
            CardSchedule.objects.update_or_create(
                learner_id=record.learner_id,
                card_id=record.card_id,
                defaults={
                    "ease_factor": record.ease_factor,
                    "interval_days": record.interval_days,
                    "repetitions": record.repetitions,
                    "last_reviewed_at": record.last_reviewed_at,
                    "next_review_at": record.next_review_at,
                },
            )
        except DatabaseError as exc:
            raise StoreUnavailable(str(exc)) from exc

    def list_schedules(self, learner_id):
        try:
            rows = list(CardSchedule.objects.filter(
                learner_id=learner_id, last_reviewed_at__isnull=False
            ))
        except DatabaseError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return [_to_record(row) for row in rows]
