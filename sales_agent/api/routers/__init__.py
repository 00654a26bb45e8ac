"""API routers."""

from .agent import router as agent_router
from .guidelines import router as guidelines_router
from .health import router as health_router
from .messages import router as messages_router
from .sessions import router as sessions_router

__all__ = [
    "agent_router",
    "guidelines_router",
    "health_router",
    "messages_router",
    "sessions_router",
]
