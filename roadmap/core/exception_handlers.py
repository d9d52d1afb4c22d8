import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Keyed by router tag.
VALIDATION_MESSAGES = {
    "levels": "Invalid level data",
    "tasks": "Invalid task data",
    "schedules": "Invalid schedule data",
    "learning-notes": "Invalid learning note data",
    "user-stats": "Invalid user stats data",
    "calendar": "Invalid calendar month",
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _validation_message(request: Request) -> str:
    route = request.scope.get("route")
    for tag in getattr(route, "tags", None) or []:
        if tag in VALIDATION_MESSAGES:
            return VALIDATION_MESSAGES[tag]
    return "Invalid request data"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": _validation_message(request)},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
