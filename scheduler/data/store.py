import threading
import weakref
from contextlib import contextmanager
from typing import Dict, List, Optional, Protocol

from ..domain.records import ScheduleRecord


class ScheduleStore(Protocol):
    def locked(self, learner_id, card_id):
        """Context manager serializing updates to one (learner, card) key."""

    def get_schedule(self, learner_id, card_id) -> Optional[ScheduleRecord]: ...

    def put_schedule(self, record: ScheduleRecord) -> None: ...

    def list_schedules(self, learner_id) -> List[ScheduleRecord]: ...


class InMemoryScheduleStore:
    def __init__(self, records=()):
        self._records: Dict[tuple, ScheduleRecord] = {r.key: r for r in records}
        # entries drop out once no caller holds the lock
        self._locks = weakref.WeakValueDictionary()
        self._guard = threading.Lock()

    @contextmanager
    def locked(self, learner_id, card_id):
        with self._guard:
            lock = self._locks.setdefault((learner_id, card_id), threading.Lock())
        with lock:
            yield

    def get_schedule(self, learner_id, card_id):
        return self._records.get((learner_id, card_id))

    def put_schedule(self, record):
        self._records[record.key] = record

    def list_schedules(self, learner_id):
        return [r for (lid, _), r in list(self._records.items()) if lid == learner_id]
