"""Core Layer — pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, repositories/, infrastructure/, or db/
    - Errors are defined here; the shell decides how to render them
"""
