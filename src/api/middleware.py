"""Request-scoped middleware: request ids and access logging."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.responses import Response

from ..monitoring import reset_request_id, set_request_id
from .errors import internal_error_response

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger("itinerary.access")


def install_request_context(app: FastAPI) -> None:
    """Register the request-id and access-log middleware on ``app``.

    Unhandled exceptions from the routes are turned into the generic
    internal error body here, after the traceback is logged.
    """

    @app.middleware("http")
    async def request_context(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = set_request_id(request_id)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "Unhandled error while serving request",
                    extra={"method": request.method, "path": request.url.path},
                )
                response = internal_error_response()

            fields = {
                "method": request.method,
                "path": request.url.path,
                "remote_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent", ""),
                "status": response.status_code,
                "latency_ms": round((time.perf_counter() - start) * 1000, 3),
            }
            if response.status_code >= 500:
                logger.error("Request failed", extra=fields)
            else:
                logger.info("Request completed", extra=fields)

            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            reset_request_id(token)
