"""In-memory keyed collections for every roadmap entity.

Each collection owns its own lock; reads and merges happen under it, so the
store can be shared by handlers running on the event loop and in the
threadpool alike. Entities are frozen dataclasses and are replaced on update.
"""
import dataclasses
import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from roadmap.models import LearningNote, Level, Schedule, Task, UserStats

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")

CompletionListener = Callable[[Task, Task], None]
RemovalListener = Callable[[Task], None]

# Task fields whose change affects level progress.
_PROGRESS_FIELDS = frozenset({"is_completed", "level_id"})

# Never taken from caller-supplied changes.
_GENERATED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _strip_generated(changes: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in changes.items() if k not in _GENERATED_FIELDS}


class Collection(Generic[EntityT]):
    """A keyed collection with a default ordering.

    Sorting is stable over insertion order, which is what callers rely on
    to break ties between equal sort keys.
    """

    def __init__(
        self,
        model: type[EntityT],
        sort_key: Callable[[EntityT], Any],
        *,
        newest_first: bool = False,
    ) -> None:
        self._model = model
        self._sort_key = sort_key
        self._newest_first = newest_first
        self._items: dict[str, EntityT] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _sorted(self, items: Iterable[EntityT]) -> list[EntityT]:
        return sorted(items, key=self._sort_key, reverse=self._newest_first)

    def list(self) -> list[EntityT]:
        with self._lock:
            items = list(self._items.values())
        return self._sorted(items)

    def get(self, entity_id: str) -> EntityT | None:
        with self._lock:
            return self._items.get(entity_id)

    def create(self, **fields: Any) -> EntityT:
        with self._lock:
            entity_id = str(uuid.uuid4())
            while entity_id in self._items:
                entity_id = str(uuid.uuid4())
            entity = self._model(
                id=entity_id, created_at=utcnow(), **_strip_generated(fields),
            )
            self._items[entity_id] = entity
        return entity

    def _merge(
        self, entity_id: str, changes: dict[str, Any],
    ) -> tuple[EntityT, EntityT] | None:
        with self._lock:
            current = self._items.get(entity_id)
            if current is None:
                return None
            updated = dataclasses.replace(current, **_strip_generated(changes))
            self._items[entity_id] = updated
        return current, updated

    def update(self, entity_id: str, changes: dict[str, Any]) -> EntityT | None:
        merged = self._merge(entity_id, changes)
        if merged is None:
            return None
        return merged[1]

    def _remove(self, entity_id: str) -> EntityT | None:
        with self._lock:
            return self._items.pop(entity_id, None)

    def delete(self, entity_id: str) -> bool:
        return self._remove(entity_id) is not None


class TaskCollection(Collection[Task]):
    """Tasks ordered by ``order``, with post-commit progress listeners.

    Completion listeners get (previous, updated) after an update that touches
    ``is_completed`` or ``level_id``; removal listeners get the deleted task.
    """

    def __init__(self) -> None:
        super().__init__(Task, lambda task: task.order)
        self._listeners: list[CompletionListener] = []
        self._removal_listeners: list[RemovalListener] = []

    def add_completion_listener(self, listener: CompletionListener) -> None:
        self._listeners.append(listener)

    def add_removal_listener(self, listener: RemovalListener) -> None:
        self._removal_listeners.append(listener)

    def by_level(self, level_id: str) -> list[Task]:
        with self._lock:
            items = [t for t in self._items.values() if t.level_id == level_id]
        return self._sorted(items)

    def update(self, entity_id: str, changes: dict[str, Any]) -> Task | None:
        merged = self._merge(entity_id, changes)
        if merged is None:
            return None
        previous, updated = merged
        # Listeners run after the lock is released.
        if _PROGRESS_FIELDS & changes.keys():
            for listener in self._listeners:
                listener(previous, updated)
        return updated

    def delete(self, entity_id: str) -> bool:
        removed = self._remove(entity_id)
        if removed is None:
            return False
        for listener in self._removal_listeners:
            listener(removed)
        return True


class ScheduleCollection(Collection[Schedule]):
    def __init__(self) -> None:
        super().__init__(Schedule, lambda schedule: schedule.target_date)

    def in_range(self, start: datetime, end: datetime) -> list[Schedule]:
        """Schedules with ``start <= target_date <= end``, earliest first."""
        with self._lock:
            items = [
                s for s in self._items.values() if start <= s.target_date <= end
            ]
        return self._sorted(items)


class UserStatsSlot:
    """Holds the single UserStats record, created on first write."""

    def __init__(self) -> None:
        self._stats: UserStats | None = None
        self._lock = threading.Lock()

    def get(self) -> UserStats | None:
        with self._lock:
            return self._stats

    def update(self, changes: dict[str, Any]) -> UserStats:
        with self._lock:
            if self._stats is None:
                self._stats = UserStats(id=str(uuid.uuid4()), updated_at=utcnow())
                logger.debug("Created user stats record %s", self._stats.id)
            self._stats = dataclasses.replace(
                self._stats, **_strip_generated(changes), updated_at=utcnow(),
            )
            return self._stats


class MemoryStore:
    def __init__(self) -> None:
        self.levels: Collection[Level] = Collection(
            Level, lambda level: level.level_number,
        )
        self.tasks = TaskCollection()
        self.schedules = ScheduleCollection()
        self.learning_notes: Collection[LearningNote] = Collection(
            LearningNote, lambda note: note.created_at, newest_first=True,
        )
        self.user_stats = UserStatsSlot()
