from django.db import models

from ..config import DEFAULT_EASE_FACTOR


class CardSchedule(models.Model):
    learner_id = models.UUIDField()
    card_id = models.UUIDField()
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    interval_days = models.PositiveIntegerField(default=0)
    repetitions = models.PositiveIntegerField(default=0)
    last_reviewed_at = models.DateTimeField(null=True, blank=True)  # UTC
    next_review_at = models.DateTimeField(null=True, blank=True)    # UTC

    class Meta:
        app_label = "scheduler"
        unique_together = (("learner_id", "card_id"),)
        indexes = [
            models.Index(fields=["learner_id", "next_review_at"], name="schedule_learner_due_idx"),
        ]

    def __str__(self):
        return f"{self.learner_id}/{self.card_id} due {self.next_review_at}"
