"""API routers."""

from routes.system import router as system_router
from routes.voice import router as voice_router

__all__ = ["system_router", "voice_router"]
