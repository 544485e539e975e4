"""API routers."""

from .health import router as health_router
from .messages import router as messages_router
from .prompts import router as prompts_router
from .sessions import chats_router, router as sessions_router

__all__ = [
    "chats_router",
    "health_router",
    "messages_router",
    "prompts_router",
    "sessions_router",
]
