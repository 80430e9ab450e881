"""API layer exports."""

from .router import ErrorResponse, FlowResponse, HealthResponse, build_router, register_exception_handlers

__all__ = [
    "ErrorResponse",
    "FlowResponse",
    "HealthResponse",
    "build_router",
    "register_exception_handlers",
]
