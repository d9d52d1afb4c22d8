from fastapi import APIRouter, Depends

from roadmap.api.deps import get_store
from roadmap.schemas.user_stats import UserStatsResponse, UserStatsUpdate
from roadmap.services.user_stats_service import (
    get_user_stats,
    update_user_stats,
)
from roadmap.store import MemoryStore

router = APIRouter(prefix="/user-stats", tags=["user-stats"])


@router.get("", response_model=UserStatsResponse | None)
async def get_user_stats_endpoint(store: MemoryStore = Depends(get_store)):
    return get_user_stats(store)


@router.patch("", response_model=UserStatsResponse)
async def update_user_stats_endpoint(
    data: UserStatsUpdate,
    store: MemoryStore = Depends(get_store),
):
    return update_user_stats(store, data)
