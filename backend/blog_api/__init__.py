"""
Blog API Backend - Application Package Initializer
===================================================

What: Marks the `blog_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:

    ┌─────────────────────────────────────┐
    │   Middleware (Request Pipeline)     │  ← ErrorBoundary, AuthGate, AccessLog
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (BlogStore)        │  ← Positional in-memory state
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic API contracts
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
