"""HTTP interface: API router factory."""

from fastapi import APIRouter

from bank_dashboard.interfaces.http.routers import dashboard


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
    return router


__all__ = [
    "create_api_router",
]
