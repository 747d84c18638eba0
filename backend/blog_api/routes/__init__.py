# Routes package init
"""
Blog API Backend - API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - blogs.py:   GET/POST /blogs, GET/PUT/DELETE /blogs/{id}
    - health.py:  GET /health (service health check, no auth)

Routes should be THIN: extract inputs, call the store, set status and
headers. Bounds checks and positional identity live in BlogStore.
"""
