import time
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from .config import settings
from .exceptions import create_error_response

logger = logging.getLogger(__name__)

class SecurityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response

class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Request: {request.method} {request.url.path} from {client_host}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(f"Response: {response.status_code} for {request.method} {request.url.path} in {duration:.3f}s")

        return response

class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Last stop for anything the handlers let through (AI provider, storage, database)."""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(e)}", exc_info=True)

            message = f"Internal server error: {str(e)}" if settings.DEBUG else "Internal server error"
            return JSONResponse(
                status_code=500,
                content=create_error_response(message, 500)
            )

class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Hard cap on request size using Content-Length when available
        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                size = int(content_length)
            except ValueError:
                # Malformed header; the upload handler still checks the file size
                size = 0
            if size > settings.MAX_REQUEST_SIZE:
                return JSONResponse(
                    status_code=413,
                    content=create_error_response("Request entity too large", 413)
                )
        return await call_next(request)
