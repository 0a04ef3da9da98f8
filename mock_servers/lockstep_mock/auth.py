"""Authentication middleware for the Lockstep mock server.

The real API accepts either a Lockstep Platform API key (``Api-Key``
header) or a JWT (``Authorization: Bearer <token>``). The mock accepts any
non-empty value of either.
"""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from mock_servers.lockstep_mock.errors import problem_response

# Paths that don't require auth
PUBLIC_PATHS = {"/", "/health", "/docs", "/openapi.json", "/redoc"}
PUBLIC_PREFIXES = ("/docs", "/api/v1/profiles/companies")


class LockstepAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES):
            return await call_next(request)

        if request.headers.get("Api-Key", "").strip():
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer ") and auth_header[len("Bearer "):].strip():
            return await call_next(request)

        return problem_response(
            request,
            401,
            "Unauthorized",
            "Provide an 'Api-Key' header or 'Authorization: Bearer <token>'.",
        )
