"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Every row returned by the store passes through a schema before leaving the API,
      so ids are checked for UUID shape and booleans/dates are typed on every dialect
    - Request payloads are NOT parsed here; they go through core/normalize + core/validation

Design Decisions:
    - Aliases reproduce the public field names (adminUserId, boardId, isAdmin, ...);
      populate_by_name lets schemas be built straight from snake_case rows
"""
