from ..config import MAX_QUALITY, MIN_QUALITY


class SchedulerError(Exception):
    """Base class for errors raised by the scheduler."""


class InvalidQuality(SchedulerError):
    def __init__(self, quality):
        self.quality = quality
        super().__init__(
            f"quality must be an integer between {MIN_QUALITY} and {MAX_QUALITY}, "
            f"got {quality!r}"
        )


class InvalidScheduleRecord(SchedulerError):
    pass


class StoreUnavailable(SchedulerError):
    """The schedule store could not be reached. Never retried by the engine."""


class ScheduleOverflow(SchedulerError):
    """The next review date falls outside the representable datetime range."""

    def __init__(self, interval_days):
        self.interval_days = interval_days
        super().__init__(f"an interval of {interval_days} days cannot be scheduled")
