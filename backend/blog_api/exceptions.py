"""
Blog API Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the blog service.
How:   Each exception class carries a message and optional context dict.
       Exceptions with a registered handler (main.py) become structured
       responses; the rest escalate to the ErrorBoundary middleware.
Who:   Raised by the store and the request-body decoder.

Exception Hierarchy:
    BlogApiError (base)
    ├── BlogNotFoundError      → 404 Not Found (empty body, handled in main.py)
    └── MalformedPayloadError  → no handler; ErrorBoundary turns it into 500

Authentication failures are not exceptions: the AuthGate middleware writes
the 401 response itself and never escalates.
"""

from typing import Any, Dict, Optional


class BlogApiError(Exception):
    """
    Base exception for all Blog API errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BlogNotFoundError(BlogApiError):
    """
    Raised when a blog id falls outside the current store bounds.

    HTTP:    404 Not Found with an empty body.

    Positional ids shift after a delete, so an id that was valid a moment
    ago may legitimately raise this error.
    """

    def __init__(
        self,
        blog_id: int,
        size: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["blog_id"] = blog_id
        ctx["store_size"] = size
        super().__init__(
            message=f"Blog with ID '{blog_id}' was not found",
            context=ctx,
        )
        self.blog_id = blog_id


class MalformedPayloadError(BlogApiError):
    """
    Raised when a create/update body cannot be decoded into a Blog.

    What:    Invalid JSON, a missing `title`/`body`, or a non-string value.
    HTTP:    500 Internal Server Error, via the ErrorBoundary middleware.
    """

    def __init__(
        self,
        message: str = "Request body is not a valid blog payload",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
