"""Services Layer — tool handlers, tool definitions and tool dispatch.

Invariants:
    - Handlers split by concern: read, write, format
    - Registry built from explicit imports (no auto-discovery)
"""
