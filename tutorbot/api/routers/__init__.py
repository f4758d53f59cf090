"""
API routers.

All routers are mounted under /api/v1 by tutorbot.api.main.
"""

from tutorbot.api.routers.chat import router as chat_router
from tutorbot.api.routers.conversations import router as conversations_router
from tutorbot.api.routers.documents import router as documents_router
from tutorbot.api.routers.health import router as health_router
from tutorbot.api.routers.modules import router as modules_router
from tutorbot.api.routers.settings import admin_router
from tutorbot.api.routers.settings import router as settings_router

__all__ = [
    "admin_router",
    "chat_router",
    "conversations_router",
    "documents_router",
    "health_router",
    "modules_router",
    "settings_router",
]
