"""
Centralized Error Handling and Logging
Structured error logs with request context, sensitive-field redaction and a
trace id that is echoed back to the client.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
from contextvars import ContextVar

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

# Context variables for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)


class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    # Security settings
    SANITIZE_SENSITIVE_FIELDS = True
    SENSITIVE_FIELD_PATTERNS = [
        'password', 'token', 'secret', 'authorization',
        'cookie', 'credential', 'api_key'
    ]

    # Logging settings
    LOG_REQUEST_BODIES = True
    MAX_BODY_LOG_SIZE = 5000

    # Error response settings
    INCLUDE_TRACE_ID = True

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Union[Dict, str, Any]) -> Any:
        """Recursively redact sensitive data before it reaches the logs"""
        if not cls.SANITIZE_SENSITIVE_FIELDS:
            return data

        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(str(key)) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        elif isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        else:
            return data

    @classmethod
    def sanitize_body(cls, body: Optional[bytes]) -> Any:
        """Decode a captured request body and redact it"""
        if not body:
            return None
        try:
            text = body.decode('utf-8')
        except UnicodeDecodeError:
            return "DECODE_ERROR"
        try:
            return cls.sanitize_data(json.loads(text))
        except ValueError:
            return cls.sanitize_data(text)


class ApiError(Exception):
    """An error response raised by a route.

    Only the body fields that are set are rendered, so each branch keeps its
    own shape: 400/404 carry ``message``, 500 carries ``error`` and ``details``.
    """

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        error: Optional[str] = None,
        details: Optional[Any] = None,
        error_type: Optional[str] = None,
    ):
        super().__init__(message or error or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message
        self.error = error
        self.details = details
        self.error_type = error_type

    def to_content(self) -> Dict[str, Any]:
        content = {}
        if self.error is not None:
            content["error"] = self.error
        if self.message is not None:
            content["message"] = self.message
        if self.details is not None:
            content["details"] = self.details
        if self.error_type is not None:
            content["error_type"] = self.error_type
        return content


class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context, return its trace id"""

        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent", "unknown")
            }
            if ErrorHandlingConfig.LOG_REQUEST_BODIES:
                captured = getattr(request.state, 'captured_body', None)
                log_entry["request"]["body"] = ErrorHandlingConfig.sanitize_body(captured)

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
                "module": getattr(exception, '__module__', 'unknown')
            }

            if include_traceback:
                log_entry["exception"]["traceback"] = traceback.format_exc()

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        logger.error(json.dumps(log_entry, indent=2, default=str))

        return trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to capture request context and add request IDs"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)

        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES and request.method in ("POST", "PUT", "PATCH"):
            body = await request.body()

        request.state.captured_body = body
        request.state.trace_id = trace_id

        response = await call_next(request)
        # Trace ID lets clients correlate a response with the server logs
        response.headers["X-Trace-ID"] = trace_id
        return response


# Global Exception Handlers
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render route-level errors, logging server-side failures"""
    content = exc.to_content()

    if exc.status_code >= 500:
        trace_id = StructuredLogger.log_error(
            f"http_{exc.status_code}",
            exc.error or exc.message or "Server error",
            request=request,
            exception=exc,
            extra_context={"details": exc.details, "error_type": exc.error_type},
            include_traceback=False
        )
        if ErrorHandlingConfig.INCLUDE_TRACE_ID:
            content["trace_id"] = trace_id
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message or exc.error}")

    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP exceptions (unknown routes, wrong methods)"""
    response_content = {
        "error": f"HTTP {exc.status_code}",
        "message": exc.detail,
    }
    return JSONResponse(
        status_code=exc.status_code,
        content=response_content,
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle FastAPI request validation errors (HTTP 422)"""

    validation_details = []
    for error in exc.errors():
        validation_details.append({
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown")
        })

    trace_id = StructuredLogger.log_error(
        "validation_error_422",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        exception=exc,
        extra_context={"validation_errors": validation_details},
        include_traceback=False
    )

    response_content = {
        "error": "Validation Error",
        "message": "Request validation failed",
        "details": validation_details,
    }

    if ErrorHandlingConfig.INCLUDE_TRACE_ID:
        response_content["trace_id"] = trace_id

    return JSONResponse(status_code=422, content=response_content)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internals"""

    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc,
        include_traceback=True
    )

    response_content = {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
    }

    if ErrorHandlingConfig.INCLUDE_TRACE_ID:
        response_content["trace_id"] = trace_id

    return JSONResponse(status_code=500, content=response_content)


def setup_error_handling(app):
    """Setup error handling for a FastAPI app"""

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")
