from rest_framework import serializers

from ..config import MAX_QUALITY, MIN_QUALITY
from ..domain.enums import QUALITY_LABELS, Quality
from ..utils.time import to_local_iso


class ReviewInSerializer(serializers.Serializer):
    learner_id = serializers.UUIDField()
    card_id = serializers.UUIDField()
    quality = serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY)


class DueQuerySerializer(serializers.Serializer):
    as_of = serializers.DateTimeField(required=False)  # ISO-8601


class SessionSummaryInSerializer(serializers.Serializer):
    qualities = serializers.ListField(
        child=serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY),
        allow_empty=True,
    )


class ScheduleRecordSerializer(serializers.Serializer):
    """Read-only rendering of a ScheduleRecord."""

    learner_id = serializers.UUIDField()
    card_id = serializers.UUIDField()
    ease_factor = serializers.FloatField()
    interval_days = serializers.IntegerField()
    repetitions = serializers.IntegerField()
    last_reviewed_at = serializers.DateTimeField()
    next_review_at = serializers.DateTimeField()
    next_review_local = serializers.SerializerMethodField()
    state = serializers.SerializerMethodField()

    def get_next_review_local(self, record):
        return to_local_iso(record.next_review_at)

    def get_state(self, record):
        return record.state.value


class SessionStatsSerializer(serializers.Serializer):
    cards_reviewed = serializers.IntegerField()
    correct_answers = serializers.IntegerField()
    accuracy = serializers.FloatField()
    accuracy_rate = serializers.FloatField()


def quality_label(quality):
    return QUALITY_LABELS[Quality(quality)]
