"""
Blog API Backend - Access Log Middleware
=========================================

What:  One INFO line per request with method, path and final status code.
How:   Captures method and path on arrival, awaits the downstream chain,
       then logs the status of the response it got back.
Who:   Applied to every request via Starlette middleware.
When:  Innermost stage, directly around route dispatch.

Log Format:
    HTTP GET /blogs/1 - Response: 404

Requests rejected by AuthGate never reach this stage, and requests whose
handler raised an unhandled fault propagate past it to ErrorBoundary, so
neither produces an access line.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("blog_api.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs `HTTP <METHOD> <PATH> - Response: <STATUS>` after each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        path = request.url.path

        # Skip logging for health checks (probe noise)
        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        logger.info("HTTP %s %s - Response: %d", method, path, response.status_code)

        return response
