"""Problem-details error responses for the Lockstep mock server.

Every failure is rendered as ``{type, title, status, detail, instance}``,
the same envelope the real API returns, so the SDK's error path can be
exercised end to end.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lockstep_sdk.schemas.common import ErrorResult
from mock_servers.lockstep_mock.db import SearchlightError

logger = logging.getLogger(__name__)

_PROBLEM_TYPES = {
    400: "https://tools.ietf.org/html/rfc7231#section-6.5.1",
    401: "https://tools.ietf.org/html/rfc7235#section-3.1",
    404: "https://tools.ietf.org/html/rfc7231#section-6.5.4",
}


class ProblemError(Exception):
    """Raised by routes to return a problem-details response."""

    def __init__(self, status: int, title: str, detail: str = "") -> None:
        self.status = status
        self.title = title
        self.detail = detail
        super().__init__(f"{status} {title}: {detail}")


def not_found(label: str, record_id: object) -> ProblemError:
    return ProblemError(404, "Record not found", f"{label} with id '{record_id}' not found")


def problem_response(
    request: Request,
    status: int,
    title: str,
    detail: str = "",
    errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    error = ErrorResult(
        type=_PROBLEM_TYPES.get(status, "about:blank"),
        title=title,
        status=status,
        detail=detail or None,
        instance=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=status,
        content=error.model_dump(mode="json", exclude_none=True),
        media_type="application/problem+json",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register problem-details handlers on the FastAPI app."""

    @app.exception_handler(ProblemError)
    async def _problem_handler(request: Request, exc: ProblemError) -> JSONResponse:
        logger.info("Mock problem %s on %s: %s", exc.status, request.url.path, exc.detail)
        return problem_response(request, exc.status, exc.title, exc.detail)

    @app.exception_handler(SearchlightError)
    async def _searchlight_handler(request: Request, exc: SearchlightError) -> JSONResponse:
        return problem_response(request, 400, "Invalid query", str(exc))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors: dict[str, list[str]] = {}
        for err in exc.errors():
            field = ".".join(str(part) for part in err.get("loc", ()) if part != "body") or "body"
            errors.setdefault(field, []).append(err.get("msg", "Invalid value"))
        return problem_response(
            request, 400, "One or more validation errors occurred.", errors=errors
        )
