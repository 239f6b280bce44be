"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (SSE stream excepted)

Design Decisions:
    - Thin routes delegate to the interactors on app.state (functional core, imperative shell)
"""
