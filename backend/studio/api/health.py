"""Health check endpoints."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    """Return service health and the configured assignment store."""
    return {"status": "ok", "store": request.app.state.settings.STORE_BACKEND}
