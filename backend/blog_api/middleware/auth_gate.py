"""
Blog API Backend - Authorization Gate Middleware
=================================================

What:  Rejects requests that do not carry a Bearer-style Authorization header.
How:   Checks header presence and the "Bearer " prefix (case-insensitive),
       short-circuits with 401 on failure, otherwise delegates.
Who:   Applied to every request via Starlette middleware.
When:  After ErrorBoundary, before AccessLog.

This is FORMAT validation only. The token after the prefix is never checked
against any credential store: "Bearer anything" is accepted. Do not treat a
request that passed this gate as authenticated.

Outcomes:
    Header absent            → 401 {"error": "Unauthorized: Missing token."}
    Prefix is not "Bearer "  → 401 {"error": "Unauthorized: Invalid token format."}
    Otherwise                → request.state.bearer_token set, call_next
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger("blog_api.auth")

BEARER_PREFIX = "bearer "


class AuthGateMiddleware(BaseHTTPMiddleware):
    """
    Format-only bearer token gate.

    Excluded paths:
        - /health: liveness probes carry no credentials
        - /docs, /redoc, /openapi.json: API documentation stays reachable
    """

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        header = request.headers.get("Authorization")

        if header is None:
            logger.warning("Missing authorization token")
            return JSONResponse(
                status_code=401,
                content={"error": "Unauthorized: Missing token."},
            )

        if header[: len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
            logger.warning("Invalid token format")
            return JSONResponse(
                status_code=401,
                content={"error": "Unauthorized: Invalid token format."},
            )

        logger.info("Valid token provided")
        request.state.bearer_token = header[len(BEARER_PREFIX):]
        return await call_next(request)
