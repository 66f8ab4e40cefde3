"""Versioned API router for v1.

Composes the endpoint routers; each declares its own prefix and tags.
``inkwell.main`` mounts ``api_v1`` under ``/api/v1``.
"""
from __future__ import annotations

from typing import Final

from fastapi import APIRouter

from .endpoints import auth_router, comments_router, posts_router, users_router

api_v1: Final[APIRouter] = APIRouter()
api_v1.include_router(auth_router)
api_v1.include_router(users_router)
api_v1.include_router(posts_router)
api_v1.include_router(comments_router)

__all__ = ["api_v1"]
