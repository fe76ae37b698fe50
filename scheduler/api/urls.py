from django.urls import path
from .views import DueCardsView, ReviewView, SchedulesView, SessionSummaryView

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("learners/<uuid:learner_id>/due-cards", DueCardsView.as_view(), name="due-cards"),
    path("learners/<uuid:learner_id>/schedules", SchedulesView.as_view(), name="schedules"),
    path("sessions/summary", SessionSummaryView.as_view(), name="session-summary"),
]
