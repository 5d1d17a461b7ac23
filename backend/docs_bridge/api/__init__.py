"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the {success, data | errorKind, message} envelope

Design Decisions:
    - Thin routes delegate to ToolDispatch
"""
