"""Core Layer — pure document logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Renderers, locators and request builders are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
