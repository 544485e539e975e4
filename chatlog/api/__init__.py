"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    chats_router,
    health_router,
    messages_router,
    prompts_router,
    sessions_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(prompts_router)
api_router.include_router(messages_router)
api_router.include_router(sessions_router)
api_router.include_router(chats_router)

__all__ = ["api_router"]
