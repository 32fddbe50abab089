"""API routers."""

from server.routers.tags import router as tags_router

__all__ = ["tags_router"]
