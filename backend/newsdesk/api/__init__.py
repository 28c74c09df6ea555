"""API Layer — FastAPI routes, path parameter types and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are JSON envelopes; error bodies are {"message": str}
"""
