from fastapi import APIRouter

from roadmap.api.routes.calendar import router as calendar_router
from roadmap.api.routes.dashboard import router as dashboard_router
from roadmap.api.routes.learning_notes import router as learning_notes_router
from roadmap.api.routes.levels import router as levels_router
from roadmap.api.routes.schedules import router as schedules_router
from roadmap.api.routes.tasks import router as tasks_router
from roadmap.api.routes.user_stats import router as user_stats_router

api_router = APIRouter(prefix="/api")
api_router.include_router(levels_router)
api_router.include_router(tasks_router)
api_router.include_router(schedules_router)
api_router.include_router(learning_notes_router)
api_router.include_router(user_stats_router)
api_router.include_router(dashboard_router)
api_router.include_router(calendar_router)
