"""Request/response middleware.

Assigns each request an id, times it, and logs both ends. Response bodies
pass through untouched: the generation endpoint returns the provider's
object exactly as decoded.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..core.structured_logging import request_id_var

logger = logging.getLogger(__name__)


class RequestResponseMiddleware(BaseHTTPMiddleware):
    """Request id, timing headers and access logging."""

    def __init__(self, app: ASGIApp, log_requests: bool = True, log_responses: bool = True):
        super().__init__(app)
        self.log_requests = log_requests
        self.log_responses = log_responses

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        start_time = time.time()

        try:
            if self.log_requests:
                logger.info(
                    f"Incoming request: {request.method} {request.url.path}",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "remote_addr": self._get_client_ip(request),
                        "content_length": request.headers.get("content-length", 0),
                    },
                )

            response = await call_next(request)

            processing_time_ms = int((time.time() - start_time) * 1000)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Processing-Time"] = f"{processing_time_ms}ms"

            if self.log_responses:
                self._log_response(request, response, processing_time_ms)
            return response
        finally:
            request_id_var.reset(token)

    def _log_response(self, request: Request, response: Response, processing_time_ms: int):
        if response.status_code >= 500:
            log_level = logging.ERROR
            log_message = f"Server error response: {response.status_code}"
        elif response.status_code >= 400:
            log_level = logging.WARNING
            log_message = f"Client error response: {response.status_code}"
        else:
            log_level = logging.INFO
            log_message = f"Successful response: {response.status_code}"

        logger.log(
            log_level,
            f"{log_message} for {request.method} {request.url.path} ({processing_time_ms}ms)",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "processing_time_ms": processing_time_ms,
            },
        )

    def _get_client_ip(self, request: Request) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host
        return "unknown"


def cors_origins(configured: Optional[str], is_production: bool) -> List[str]:
    """Allowed UI origins: the configured list, else "*" outside production."""
    origins = [o.strip() for o in (configured or "").split(",") if o.strip()]
    if not origins:
        origins = [] if is_production else ["*"]
    return origins
