"""
Blog API Backend - Error Boundary Middleware
=============================================

What:  Converts any exception escaping the downstream chain into a generic
       500 JSON response.
How:   Wraps call_next in try/except Exception; logs the fault message and
       answers {"error": "Internal server error."}.
Who:   Applied to every request via Starlette middleware.
When:  Outermost stage (first to run, last to see the outcome).

Contract:
    - Exactly one ERROR log line per caught fault
    - The response never contains exception text, type names or tracebacks
    - No retry: the request fails once and is done

Faults handled by registered exception handlers (BlogNotFoundError → 404)
never reach this stage.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger("blog_api.errors")

INTERNAL_ERROR_BODY = {"error": "Internal server error."}


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Last line of defence: nothing raised downstream escapes this stage."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("Unhandled exception: %s", exc)
            return JSONResponse(
                status_code=500,
                content=INTERNAL_ERROR_BODY,
                media_type="application/json",
            )
