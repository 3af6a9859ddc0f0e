"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blackbird.api.responses import Utf8JSONResponse
from blackbird.api.sessions import request_message
from blackbird.api.sessions import router as sessions_router
from blackbird.app_logging import configure_logging
from blackbird.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = app.state.container.settings
        logger.info(
            "Starting Blackbird session directory on %s:%s (%s)",
            settings.host,
            settings.port,
            settings.environment,
        )
        yield
        logger.info("Blackbird session directory stopped")

    app = FastAPI(lifespan=lifespan, default_response_class=Utf8JSONResponse)
    app.state.container = container

    app.include_router(sessions_router)

    @app.exception_handler(RequestValidationError)
    async def decoding_error(
        request: Request, exc: RequestValidationError
    ) -> Utf8JSONResponse:
        errors = [_describe_validation_error(error) for error in exc.errors()]
        logger.warning(request_message(request, f"decoding error: {errors}"))
        return Utf8JSONResponse(
            {"errors": errors}, status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> Utf8JSONResponse:
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            logger.warning(request_message(request, "operation not supported"))
            return Utf8JSONResponse({}, status_code=status.HTTP_501_NOT_IMPLEMENTED)
        return Utf8JSONResponse(
            {"errors": [str(exc.detail)]},
            status_code=exc.status_code,
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> Utf8JSONResponse:
        logger.exception(request_message(request, f"handling error: {exc}"))
        return Utf8JSONResponse(
            {"errors": ["internal server error"]},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _describe_validation_error(error: dict[str, object]) -> str:
    location = error.get("loc", ())
    path = ".".join(str(part) for part in location if isinstance(part, str | int))
    return f"{path}: {error.get('msg', 'invalid value')}"
