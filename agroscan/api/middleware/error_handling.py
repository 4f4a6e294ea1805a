# 📄 File: agroscan/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any unexpected error in AgroScan and answers with a short, polite
# message instead of leaking technical details, while writing the full story to the logs.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware: any exception escaping the routers and the
# AgroScanException handler is logged with traceback and converted to a generic
# 500 JSON body carrying the request id.
# 🔗 Dependencies:
# FastAPI, starlette, agroscan.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# agroscan.main (middleware registration)

import logging
from datetime import datetime, timezone

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from agroscan.shared.utils.logging import request_id_var

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal server error occurred"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the AgroScan API

    Typed application errors are rendered by the exception handler
    registered in agroscan.main; this middleware only sees what is left.
    The client never receives the exception text.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._handle_exception(request, exc)

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", None) or request_id_var.get("") or None

        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
            exc_info=exc,
        )

        response = JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": GENERIC_ERROR_MESSAGE,
                    "details": {},
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": request_id,
                }
            },
        )
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response
