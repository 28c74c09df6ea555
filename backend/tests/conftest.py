"""Root conftest — shared test configuration."""

import os

# Ensure importing newsdesk.main never points at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
