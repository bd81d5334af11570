"""Infrastructure Layer: store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every store error leaves this layer as a QueryFailure (core/errors.py)
"""
