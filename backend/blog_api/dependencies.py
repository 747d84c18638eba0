"""
Blog API Backend - Request Dependencies
========================================

What:  FastAPI dependencies shared by the blog route handlers.
How:   Injected into route handlers via FastAPI's Depends() system.

    get_store          → the application's BlogStore (app.state.store)
    read_blog_payload  → request body decoded into a Blog, or MalformedPayloadError
"""

from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from blog_api.exceptions import MalformedPayloadError
from blog_api.schemas.blog import Blog
from blog_api.services.blog_store import BlogStore


def get_store(request: Request) -> BlogStore:
    """
    FastAPI dependency that provides the application's blog store.

    The store is created by create_app() and lives on app.state, so every
    app instance (one per test, one in production) owns its own store.

    Example usage in a route:
        @router.get("/blogs")
        async def list_blogs(store: BlogStore = Depends(get_store)):
            return store.list_all()
    """
    return request.app.state.store


async def read_blog_payload(request: Request) -> Blog:
    """
    Decode the raw request body into a Blog.

    A body that is not JSON, lacks `title` or `body`, or carries non-string
    values raises MalformedPayloadError. No exception handler is registered
    for it: it escalates to ErrorBoundaryMiddleware and the client gets 500.
    """
    raw = await request.body()
    try:
        return Blog.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise MalformedPayloadError(
            message=f"Malformed blog payload: {exc.error_count()} validation error(s)",
            context={"errors": exc.errors(include_url=False)},
        ) from exc
