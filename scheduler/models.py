from .data.models import CardSchedule  # noqa: F401
