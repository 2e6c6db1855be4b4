"""Request/response logging middleware."""
import logging
import time
from starlette.requests import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.middleware.logging")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        # path only: query strings and headers may carry credentials
        logger.info(f"{request.method} {request.url.path}")
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"Response status: {response.status_code} ({elapsed_ms:.1f} ms)")
        return response
