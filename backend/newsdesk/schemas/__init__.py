"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Request schemas validate at the system boundary; their failures become
      RequestValidationError and are classified by api/error_handlers.py
    - Response schemas read straight from ORM rows (from_attributes=True)
    - Response envelopes name the collection key the client expects
      ({"articles": [...]}, {"article": {...}}, {"createdComment": {...}})
"""
