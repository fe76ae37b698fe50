from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..domain.errors import (
    InvalidQuality,
    InvalidScheduleRecord,
    ScheduleOverflow,
    StoreUnavailable,
)
from ..domain.stats import count_by_state, summarize_session
from ..services.reviews import get_due_cards, list_schedules, submit_review
from ..utils.time import now, to_local_iso
from .serializers import (
    DueQuerySerializer,
    ReviewInSerializer,
    ScheduleRecordSerializer,
    SessionStatsSerializer,
    SessionSummaryInSerializer,
    quality_label,
)

base_logger = structlog.get_logger()


def store_unavailable_response(logger, exc):
    logger.error("store_unavailable", error=str(exc))
    return Response(
        {"error": "Schedule store unavailable"},
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


def invalid_record_response(logger, exc):
    logger.error("invalid_schedule_record", error=str(exc))
    return Response(
        {"error": "Stored schedule is invalid"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class ReviewView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        learner_id = s.validated_data["learner_id"]
        card_id = s.validated_data["card_id"]
        quality = s.validated_data["quality"]

        try:
            record = submit_review(learner_id, card_id, quality)
        except InvalidQuality as exc:
            return Response({"quality": [str(exc)]}, status=status.HTTP_400_BAD_REQUEST)
        except ScheduleOverflow as exc:
            logger.warning("schedule_overflow", card_id=str(card_id), interval_days=exc.interval_days)
            return Response(
                {"error": str(exc)}, status=status.HTTP_422_UNPROCESSABLE_ENTITY
            )
        except StoreUnavailable as exc:
            return store_unavailable_response(logger, exc)
        except InvalidScheduleRecord as exc:
            return invalid_record_response(logger, exc)

        logger.info(
            "review_api_response",
            learner_id=str(learner_id),
            card_id=str(card_id),
            quality=quality,
            interval_days=record.interval_days,
            next_review_utc=record.next_review_at.isoformat(),
            next_review_local=to_local_iso(record.next_review_at),
            status=status.HTTP_201_CREATED,
        )

        data = ScheduleRecordSerializer(record).data
        data["quality"] = quality
        data["quality_label"] = quality_label(quality)
        return Response(data, status=status.HTTP_201_CREATED)


class DueCardsView(views.APIView):
    def get(self, request, learner_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        as_of = qs.validated_data.get("as_of") or now()

        try:
            due = get_due_cards(learner_id, as_of)
        except StoreUnavailable as exc:
            return store_unavailable_response(logger, exc)
        except InvalidScheduleRecord as exc:
            return invalid_record_response(logger, exc)

        logger.info(
            "due_cards_api_response",
            learner_id=str(learner_id),
            as_of_utc=as_of.isoformat(),
            as_of_local=to_local_iso(as_of),
            card_count=len(due),
        )

        return Response(
            {
                "learner_id": str(learner_id),
                "as_of_utc": as_of.isoformat(),
                "as_of_local": to_local_iso(as_of),
                "card_ids": [str(r.card_id) for r in due],
                "cards": ScheduleRecordSerializer(due, many=True).data,
            }
        )


class SchedulesView(views.APIView):
    def get(self, request, learner_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        try:
            records = list_schedules(learner_id)
        except StoreUnavailable as exc:
            return store_unavailable_response(logger, exc)
        except InvalidScheduleRecord as exc:
            return invalid_record_response(logger, exc)

        counts = count_by_state(records, now())
        logger.info("schedules_api_response", learner_id=str(learner_id), **counts)

        return Response(
            {
                "learner_id": str(learner_id),
                "counts": counts,
                "schedules": ScheduleRecordSerializer(records, many=True).data,
            }
        )


class SessionSummaryView(views.APIView):
    def post(self, request):
        s = SessionSummaryInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        stats = summarize_session(s.validated_data["qualities"])
        return Response(SessionStatsSerializer(stats).data)
