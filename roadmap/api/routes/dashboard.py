from fastapi import APIRouter, Depends

from roadmap.api.deps import get_store
from roadmap.schemas.dashboard import DashboardResponse
from roadmap.services.dashboard_service import get_dashboard_data
from roadmap.store import MemoryStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(store: MemoryStore = Depends(get_store)):
    return get_dashboard_data(store)
