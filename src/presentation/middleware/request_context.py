"""Request context middleware for tracing."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


def request_id_for(request: Request) -> Optional[str]:
    """
    Request ID for a request, also outside the middleware's scope.

    Handlers for unclassified errors run after the context variable
    has been reset, so the ID is read back from the request state.
    """
    return get_request_id() or getattr(request.state, "request_id", None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that sets up request context.

    Takes the request ID from the incoming header or generates one,
    binds it (with the service name) to every log line written while
    the request is handled, and echoes it in the response headers.
    """

    HEADER_NAME = "X-Request-ID"

    def __init__(self, app, service: str):
        super().__init__(app)
        self.service = service

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())

        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            service=self.service,
        )

        try:
            response = await call_next(request)
            response.headers[self.HEADER_NAME] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "service")
            request_id_var.reset(token)
