"""Application entrypoint for the propagation FastAPI app."""

from typing import Optional

from fastapi import FastAPI
import uvicorn

from .api import build_router, register_exception_handlers
from .core import AppSettings, get_logger, load_settings, setup_logging
from .services import PropagationService


logger = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None, service: Optional[PropagationService] = None) -> FastAPI:
    """Create and configure a FastAPI application instance."""
    settings = settings if settings is not None else load_settings()
    setup_logging(settings.log_level)
    service = service if service is not None else PropagationService()

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.include_router(build_router(settings, service))
    register_exception_handlers(app)
    app.state.settings = settings

    logger.info("Application initialized: %s", settings.app_name)
    return app


def run() -> None:
    """Start the ASGI server for local development."""
    settings = load_settings()
    try:
        uvicorn.run(
            "propagation.main:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
        )
    except Exception:
        logger.exception("Failed to start uvicorn server.")
        raise


if __name__ == "__main__":
    run()
