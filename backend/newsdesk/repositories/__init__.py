"""Repositories — one async data-access function per entity operation.

Invariants:
    - Each function issues exactly one parameterized statement
    - Each statement runs inside translate_store_errors(), so callers only
      ever see NewsdeskError subclasses or unclassified exceptions
    - Repositories never raise not-found errors; they return None / [] / False
      and let the route decide which message applies
"""
