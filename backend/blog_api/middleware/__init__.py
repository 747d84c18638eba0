# Middleware package init
"""
Blog API Backend - Middleware Package
======================================

What:  The request-processing pipeline wrapped around every route.

Middleware Chain (order matters!):
    Request → [ErrorBoundary] → [AuthGate] → [AccessLog] → Route Handler

    1. ErrorBoundary: turns any escaping exception into a generic 500
    2. AuthGate: 401 unless Authorization starts with "Bearer "
    3. AccessLog: logs method, path and the final status code

    The order is reversed for responses:
    Response ← [ErrorBoundary] ← [AuthGate] ← [AccessLog] ← Route Handler

    Starlette runs middleware in REVERSE order of add_middleware() calls;
    see register_pipeline() in main.py.
"""

from blog_api.middleware.access_log import AccessLogMiddleware
from blog_api.middleware.auth_gate import AuthGateMiddleware
from blog_api.middleware.error_boundary import ErrorBoundaryMiddleware

__all__ = [
    "AccessLogMiddleware",
    "AuthGateMiddleware",
    "ErrorBoundaryMiddleware",
]
