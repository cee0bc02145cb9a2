"""JSON logging for the HTTP layer and holiday client, with request IDs."""

from __future__ import annotations

import json
import logging
import uuid
from contextvars import ContextVar

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

# Structured fields callers may pass through ``extra=``.
EXTRA_FIELDS = ("path", "method", "participants", "country_code", "year", "attempt")


class RequestIDFilter(logging.Filter):
    """Attach request ID from context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.request_id = request_id_ctx.get()
        return True


class JsonFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        log_record = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if getattr(record, "request_id", None):
            log_record["request_id"] = record.request_id
        for key in EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_record[key] = value
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def init_logging(level: str) -> None:
    """Initialize application logging."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIDFilter())
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
    logging.getLogger("httpx").setLevel(logging.WARNING)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that manages request IDs."""

    async def dispatch(
        self, request: Request, call_next
    ):  # type: ignore[override]
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response
