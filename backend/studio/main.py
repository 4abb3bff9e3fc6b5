"""Application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import api_router
from .core.config import Settings, settings as default_settings
from .core.logging import RequestIDMiddleware, init_logging
from .domain.errors import DomainError, ErrorCode
from .services.availability import AvailabilityService
from .stores import AssignmentStore, InMemoryAssignmentStore, SupabaseAssignmentStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_FIRM_ID: 400,
    ErrorCode.STORE_UNAVAILABLE: 503,
}


def build_store(settings: Settings) -> AssignmentStore:
    """Create the assignment store selected by ``STORE_BACKEND``."""
    if settings.STORE_BACKEND == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise RuntimeError("SUPABASE_URL and SUPABASE_KEY are required")
        return SupabaseAssignmentStore(
            settings.SUPABASE_URL,
            settings.SUPABASE_KEY,
            timeout=settings.STORE_TIMEOUT,
            tz=settings.TZ,
        )
    if settings.STORE_BACKEND != "memory":
        raise RuntimeError(f"Unknown STORE_BACKEND {settings.STORE_BACKEND!r}")
    return InMemoryAssignmentStore()


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("Request failed with %s", exc.code.value)
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.code, 400),
        content={"code": exc.code.value, "message": exc.message},
    )


def create_app(
    store: AssignmentStore | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Studio Availability")
    app.state.settings = settings
    app.state.store = store or build_store(settings)
    app.state.availability = AvailabilityService(app.state.store)
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.include_router(api_router)
    logger.info("Using %s assignment store", type(app.state.store).__name__)
    return app


app = create_app()
