"""API routers for the reels service."""

from .reels import router as reels_router

__all__ = ["reels_router"]
