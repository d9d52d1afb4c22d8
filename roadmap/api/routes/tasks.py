from fastapi import APIRouter, Depends, Query, status

from roadmap.api.deps import get_store
from roadmap.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from roadmap.services.task_service import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)
from roadmap.store import MemoryStore

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks_endpoint(
    level_id: str | None = Query(None, alias="levelId"),
    store: MemoryStore = Depends(get_store),
):
    return list_tasks(store, level_id)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task_endpoint(
    task_id: str,
    store: MemoryStore = Depends(get_store),
):
    return get_task(store, task_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task_endpoint(
    data: TaskCreate,
    store: MemoryStore = Depends(get_store),
):
    return create_task(store, data)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task_endpoint(
    task_id: str,
    data: TaskUpdate,
    store: MemoryStore = Depends(get_store),
):
    return update_task(store, task_id, data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task_endpoint(
    task_id: str,
    store: MemoryStore = Depends(get_store),
):
    delete_task(store, task_id)
