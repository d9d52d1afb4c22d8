import pytest
from fastapi.testclient import TestClient

from roadmap.core.bootstrap import build_store
from roadmap.main import app
from roadmap.store import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    return build_store(seed=False, track_user_stats=True)


@pytest.fixture
def client(store):
    with TestClient(app) as test_client:
        # Lifespan installs a seeded store; tests start from an empty one.
        app.state.store = store
        yield test_client


@pytest.fixture
def level(store):
    return store.levels.create(level_number=1, title="Basics")


@pytest.fixture
def make_tasks(store):
    def _make(level_id: str, count: int, completed: int = 0):
        return [
            store.tasks.create(
                level_id=level_id,
                title=f"Task {i + 1}",
                order=i,
                is_completed=i < completed,
            )
            for i in range(count)
        ]

    return _make
