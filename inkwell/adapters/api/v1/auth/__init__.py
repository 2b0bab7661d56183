from __future__ import annotations

"""Authentication router package – bundles registration and login endpoints."""

from fastapi import APIRouter

from .routes import login as login_route
from .routes import register as register_route

router = APIRouter(prefix="/auth", tags=["auth"])

router.include_router(register_route.router, prefix="/register")
router.include_router(login_route.router, prefix="/login")

__all__ = ["router"]
