"""
Blog API Backend - Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract.
How:   Route handlers return these models; FastAPI serializes them and
       generates the OpenAPI document from them.
Who:   Used by the store, route handlers and the request-body decoder.
"""

from pydantic import BaseModel, Field


class Blog(BaseModel):
    """
    A single blog post.

    No identity field: a blog is addressed by its current index in the store.
    Both fields are required on input and must be JSON strings.
    """
    title: str = Field(description="Blog title")
    body: str = Field(description="Blog body text")


class ErrorResponse(BaseModel):
    """
    What:  Shape of every JSON error body returned by the API.
    Example: {"error": "Unauthorized: Missing token."}
    """
    error: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness probes."""
    status: str = Field(description="Always 'healthy' while the process serves requests")
    version: str = Field(description="Application version")
    blog_count: int = Field(description="Number of blogs currently in the store")
    uptime_seconds: float = Field(description="Seconds since the process started")
