"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - GET path ids are typed UUID (framework rejects malformed ids with 400);
      POST path ids are plain strings validated by the pipeline (422)
"""
