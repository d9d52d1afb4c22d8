from roadmap.core.seed_roadmap import seed_roadmap
from roadmap.services.progress_service import register_progress_listeners
from roadmap.store import MemoryStore


def build_store(*, seed: bool, track_user_stats: bool) -> MemoryStore:
    store = MemoryStore()
    register_progress_listeners(store, track_user_stats=track_user_stats)
    if seed:
        seed_roadmap(store)
    return store
