"""Application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import api_router
from .core.config import settings
from .core.errors import ConfigValidationError, InvalidInputError
from .core.logging import RequestIDMiddleware, init_logging

logger = logging.getLogger(__name__)


async def invalid_input_handler(
    request: Request, exc: InvalidInputError
) -> JSONResponse:
    """Map engine input rejections to 422 with the offending field."""
    logger.warning(
        exc.message,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=422,
        content={
            "type": "invalid_input",
            "message": exc.message,
            "field": exc.field,
        },
    )


async def config_validation_handler(
    request: Request, exc: ConfigValidationError
) -> JSONResponse:
    logger.warning(
        exc.message,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=422,
        content={
            "type": "invalid_config",
            "message": exc.message,
            "errors": exc.errors,
        },
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Meeting Equity Scheduler")
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(ConfigValidationError, config_validation_handler)
    app.include_router(api_router)
    return app


app = create_app()
