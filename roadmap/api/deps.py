from fastapi import Request

from roadmap.store import MemoryStore


async def get_store(request: Request) -> MemoryStore:
    return request.app.state.store
