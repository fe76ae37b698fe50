from dataclasses import dataclass
from typing import Iterable

from .enums import CardState
from .logic import validate_quality


@dataclass(frozen=True)
class SessionStats:
    cards_reviewed: int
    correct_answers: int

    @property
    def accuracy(self) -> float:
        if self.cards_reviewed == 0:
            return 0.0
        return self.correct_answers / self.cards_reviewed

    @property
    def accuracy_rate(self) -> float:
        """Accuracy as a percentage, the form study sessions are stored in."""
        return self.accuracy * 100


def summarize_session(qualities: Iterable[int]) -> SessionStats:
    reviewed = correct = 0
    for q in qualities:
        reviewed += 1
        if validate_quality(q).is_acceptable:
            correct += 1
    return SessionStats(cards_reviewed=reviewed, correct_answers=correct)


def count_by_state(records, as_of) -> dict:
    counts = {state.value: 0 for state in CardState}
    counts["due"] = 0
    for record in records:
        counts[record.state.value] += 1
        if record.is_due(as_of):
            counts["due"] += 1
    return counts
