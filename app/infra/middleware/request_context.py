"""
Request context middleware for structured logging.
"""

from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.infra.config.logging_config import bind_context, clear_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id/path/method for every log line of a request.

    The id is taken from an incoming X-Request-ID header when present and is
    echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_context(
            request_id=request_id, path=request.url.path, method=request.method
        )
        log = get_logger("http")
        started = time.perf_counter()

        log.info(
            "request.start",
            client_ip=request.client.host if request.client else None,
        )
        try:
            response = await call_next(request)
        except Exception as exc:  # pragma: no cover
            log.exception("request.error", error=str(exc))
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            log.info(
                "request.end",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            return response
        finally:
            clear_context()
