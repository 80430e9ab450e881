"""HTTP routes that run the service flows."""

import logging

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..core.config import AppSettings
from ..models.exceptions import UncheckedError
from ..services import PropagationService


logger = logging.getLogger(__name__)


class FlowResponse(BaseModel):
    """Response payload for a flow that completed normally."""

    flow: str = Field(..., min_length=1)
    outcome: str = Field(..., min_length=1)


class ErrorResponse(BaseModel):
    """Response payload for an unhandled failure reaching the API boundary."""

    error: str = Field(..., min_length=1)
    message: str


class HealthResponse(BaseModel):
    """Response payload for the health probe."""

    status: str = "ok"
    app_name: str


def build_router(settings: AppSettings, service: PropagationService) -> APIRouter:
    """Build the API router around an injected service instance."""
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        """Report that the application is running."""
        return HealthResponse(app_name=settings.app_name)

    @router.get("/flows/catch", response_model=FlowResponse)
    def run_catch_flow() -> FlowResponse:
        """Run the flow whose failure is handled inside the service."""
        service.call_catch()
        return FlowResponse(flow="catch", outcome="handled")

    @router.get("/flows/throw", response_model=FlowResponse)
    def run_throw_flow() -> FlowResponse:
        """Run the flow whose failure propagates to the exception handler."""
        service.call_throw()
        return FlowResponse(flow="throw", outcome="completed")

    return router


def register_exception_handlers(app: FastAPI) -> None:
    """Map `UncheckedError` reaching the API boundary to HTTP 500."""

    @app.exception_handler(UncheckedError)
    async def _handle_unchecked_error(request: Request, exc: UncheckedError) -> JSONResponse:
        logger.exception(
            "Unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        payload = ErrorResponse(error=type(exc).__name__, message=exc.message)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload.model_dump())
