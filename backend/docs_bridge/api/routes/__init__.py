"""Route Modules — one file per transport concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain tool logic (delegate to ToolDispatch)
"""
