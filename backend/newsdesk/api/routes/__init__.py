"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes call repositories and raise NewsdeskError; they never build
      error responses themselves
    - Unmatched paths and methods are left to the 404/405 error handler
"""
