"""Central translation of exceptions into HTTP responses.

Errors are rendered as RFC 7807 problem documents with an additional
``description`` member carrying the exception message. Missing sessions are
the exception: API clients get a bare 401 and browsers are sent to the login
page.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from http import HTTPStatus

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from iam.ports.exceptions import (
    ConcurrencyConflictError,
    ConstraintViolationError,
    InsufficientGrantError,
    NotAuthenticatedError,
)
from infrastructure.observability import DefaultRequestErrorProbe, RequestErrorProbe

PROBLEM_MEDIA_TYPE = "application/problem+json"
NO_DETAILS = "No details available."
LOGIN_PATH = "/login"

# exception type -> (status, detail)
PROBLEM_MAPPINGS: dict[type[Exception], tuple[int, str]] = {
    ValueError: (400, "Invalid request."),
    InsufficientGrantError: (403, "Access denied."),
    ConstraintViolationError: (409, "Constraint violation."),
    ConcurrencyConflictError: (409, "Concurrency conflict."),
}

ExceptionHandler = Callable[[Request, Exception], Awaitable[Response]]


def problem_response(status: int, detail: str, description: str | None) -> JSONResponse:
    """Build an ``application/problem+json`` response."""
    return JSONResponse(
        status_code=status,
        media_type=PROBLEM_MEDIA_TYPE,
        content={
            "type": "about:blank",
            "title": HTTPStatus(status).phrase,
            "status": status,
            "detail": detail,
            "description": description or NO_DETAILS,
        },
    )


def _prefers_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def _mapped_handler(
    status: int, detail: str, probe: RequestErrorProbe
) -> ExceptionHandler:
    async def handler(request: Request, exc: Exception) -> Response:
        probe.request_rejected(request.url.path, status=status, error=str(exc))
        return problem_response(status, detail, str(exc))

    return handler


def register_exception_handlers(
    app: FastAPI, probe: RequestErrorProbe | None = None
) -> None:
    """Install the application's exception handlers on ``app``.

    Handlers are resolved by exception class hierarchy, so the most specific
    mapping wins and anything unmapped ends as a 500 problem.
    """
    probe = probe or DefaultRequestErrorProbe()

    async def not_authenticated(request: Request, exc: Exception) -> Response:
        if _prefers_html(request):
            return RedirectResponse(url=LOGIN_PATH)
        return Response(status_code=401)

    async def unhandled(request: Request, exc: Exception) -> Response:
        probe.unhandled_exception(request.url.path, error=exc)
        return problem_response(500, "Unknown internal error.", str(exc))

    app.add_exception_handler(NotAuthenticatedError, not_authenticated)
    for exc_type, (status, detail) in PROBLEM_MAPPINGS.items():
        app.add_exception_handler(exc_type, _mapped_handler(status, detail, probe))
    app.add_exception_handler(Exception, unhandled)
