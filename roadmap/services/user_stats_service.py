from roadmap.models import UserStats
from roadmap.schemas.user_stats import UserStatsUpdate
from roadmap.store import MemoryStore


def get_user_stats(store: MemoryStore) -> UserStats | None:
    return store.user_stats.get()


def update_user_stats(store: MemoryStore, data: UserStatsUpdate) -> UserStats:
    """Merge onto the stats record, creating it with zeroed counters if absent."""
    return store.user_stats.update(data.changes())
