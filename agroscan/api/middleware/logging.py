# 📄 File: agroscan/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to AgroScan: what was asked for,
# how it was answered and how long it took.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns or propagates a request id, exposes it to
# log records through a context variable, logs method/path/status/duration and adds
# X-Request-ID and X-Response-Time response headers.
# 🔗 Dependencies:
# FastAPI, starlette, agroscan.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# agroscan.main (middleware registration)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from agroscan.shared.utils.logging import request_id_var, user_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request id correlation (incoming header honoured)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.excluded_paths = {"/health", "/api/v1/health", "/favicon.ico"}

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        request_token = request_id_var.set(request_id)
        user_token = user_id_var.set("")

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            processing_time = time.perf_counter() - start_time
            logger.error(
                f"{request.method} {request.url.path} failed after {processing_time:.3f}s",
                extra={"event_type": "http_error", "duration": processing_time},
            )
            raise
        finally:
            request_id_var.reset(request_token)
            user_id_var.reset(user_token)

        processing_time = time.perf_counter() - start_time
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{processing_time:.3f}s"

        if request.url.path not in self.excluded_paths:
            self._log_response(request, response, processing_time)
        return response

    def _log_response(self, request: Request, response: Response, processing_time: float) -> None:
        extra = {
            "event_type": "http_response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration": round(processing_time, 4),
            "client_ip": request.client.host if request.client else None,
        }
        message = f"{request.method} {request.url.path} -> {response.status_code} ({processing_time:.3f}s)"

        if response.status_code >= 500:
            logger.error(message, extra=extra)
        elif processing_time > self.slow_request_threshold:
            logger.warning(f"Slow request: {message}", extra=extra)
        else:
            logger.info(message, extra=extra)
