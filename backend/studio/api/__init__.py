from fastapi import APIRouter

from studio.api import availability, crew, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(availability.router)
api_router.include_router(crew.router)

__all__ = ["api_router"]
