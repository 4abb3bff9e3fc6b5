"""Request-scoped dependencies shared by the routers."""

from fastapi import Path, Request

from studio.core.logging import firm_id_ctx
from studio.services.availability import AvailabilityService


def get_availability_service(request: Request) -> AvailabilityService:
    return request.app.state.availability


def get_timezone(request: Request) -> str:
    return request.app.state.settings.TZ


async def firm_scope(firm_id: str = Path(min_length=1)) -> str:
    """Resolve the firm from the path and tag this request's logs with it."""
    firm_id_ctx.set(firm_id)
    return firm_id
