"""Pydantic Schemas — request and tool-argument validation at the system boundary.

Invariants:
    - Schemas validate at system boundary (HTTP bodies, tool argument bags)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - tool_args: one model per tool; tool_call: transport envelopes
"""
