# =============================================================================
# georules_logger/middleware.py - FastAPI Request Logging
# =============================================================================
# Logs every HTTP request handled by a FastAPI app as two structured events:
#
#   "Incoming request."   event=http.request   method, path
#   "Request completed."  event=http.response  method, path, status, duration (ms)
#
# Usage:
#   app = FastAPI()
#   install_request_logging(app)
# =============================================================================

import logging
import time

from fastapi import FastAPI, Request

from georules_logger.factory import get_logger


def install_request_logging(app: FastAPI, logger: logging.Logger | None = None) -> None:
    """
    Register the request logging middleware on a FastAPI app.

    Args:
        app: The FastAPI application
        logger: Logger to write to (defaults to the process logger)
    """
    logger = logger or get_logger()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        method = request.method
        path = request.url.path
        start = time.perf_counter()

        logger.info(
            "Incoming request.",
            extra={"event": "http.request", "method": method, "path": path},
        )

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed.",
                extra={
                    "event": "http.error",
                    "method": method,
                    "path": path,
                    "duration": round((time.perf_counter() - start) * 1000),
                },
            )
            raise

        logger.info(
            "Request completed.",
            extra={
                "event": "http.response",
                "method": method,
                "path": path,
                "status": response.status_code,
                "duration": round((time.perf_counter() - start) * 1000),
            },
        )
        return response
