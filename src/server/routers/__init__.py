"""API routers."""

from server.routers.sort import router

__all__ = ["router"]
