from fastapi import HTTPException, status

from roadmap.models import Task
from roadmap.schemas.task import TaskCreate, TaskUpdate
from roadmap.store import MemoryStore


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Task not found",
    )


def list_tasks(store: MemoryStore, level_id: str | None = None) -> list[Task]:
    if level_id:
        return store.tasks.by_level(level_id)
    return store.tasks.list()


def get_task(store: MemoryStore, task_id: str) -> Task:
    task = store.tasks.get(task_id)
    if task is None:
        raise _not_found()
    return task


def create_task(store: MemoryStore, data: TaskCreate) -> Task:
    return store.tasks.create(**data.model_dump())


def update_task(store: MemoryStore, task_id: str, data: TaskUpdate) -> Task:
    """Merge the supplied fields onto a task.

    Changing ``isCompleted`` re-derives the owning level's progress through
    the store's completion listeners.
    """
    task = store.tasks.update(task_id, data.changes())
    if task is None:
        raise _not_found()
    return task


def delete_task(store: MemoryStore, task_id: str) -> None:
    if not store.tasks.delete(task_id):
        raise _not_found()
