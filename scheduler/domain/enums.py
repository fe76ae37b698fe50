from enum import Enum, IntEnum

from ..config import ACCEPTABLE_QUALITY


class Quality(IntEnum):
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4
    PERFECT = 5

    @property
    def is_acceptable(self):
        return self >= ACCEPTABLE_QUALITY


QUALITY_LABELS = {
    Quality.AGAIN: "Again",
    Quality.HARD: "Hard",
    Quality.GOOD: "Good",
    Quality.EASY: "Easy",
    Quality.PERFECT: "Perfect",
}


class CardState(str, Enum):
    NEW = "new"
    LEARNING = "learning"
    REVIEW = "review"
