"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure imports core/ errors but never api/ routes
    - All store calls pass through DatabaseSessionManager sessions
"""
