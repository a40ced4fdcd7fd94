"""API Layer — middleware, error handlers, response helpers and routes.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All endpoints return structured JSON responses
"""
