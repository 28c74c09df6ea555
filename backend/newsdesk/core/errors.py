"""Error Hierarchy — typed error kinds for every Newsdesk failure mode.

Invariants:
    - Every error carries an ErrorKind; the kind alone decides status and message
    - to_response() always produces {"message": str}
    - 500-level messages never include internal details

Design Decisions:
    - ERROR_RESPONSES is the single kind → (category, status, message) table;
      handlers never pick a status code themselves
    - Store error codes are translated into kinds at the data-access boundary,
      so nothing above the repositories inspects driver-specific codes
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and routing."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE_CONSTRAINT = "store_constraint"
    INTERNAL = "internal"


class ErrorKind(str, Enum):
    """Every failure the API can render."""
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_REQUIRED_DATA = "MISSING_REQUIRED_DATA"
    INVALID_SORT_QUERY = "INVALID_SORT_QUERY"
    INVALID_ORDER_QUERY = "INVALID_ORDER_QUERY"
    ARTICLE_NOT_FOUND = "ARTICLE_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RELATED_RESOURCE_MISSING = "RELATED_RESOURCE_MISSING"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class ErrorResponseSpec:
    category: ErrorCategory
    http_status: int
    message: str


ERROR_RESPONSES: dict[ErrorKind, ErrorResponseSpec] = {
    ErrorKind.INVALID_INPUT: ErrorResponseSpec(
        ErrorCategory.VALIDATION, 400, "Invalid input",
    ),
    ErrorKind.MISSING_REQUIRED_DATA: ErrorResponseSpec(
        ErrorCategory.VALIDATION, 400, "Missing required data",
    ),
    ErrorKind.INVALID_SORT_QUERY: ErrorResponseSpec(
        ErrorCategory.VALIDATION, 400, "Invalid sort query",
    ),
    ErrorKind.INVALID_ORDER_QUERY: ErrorResponseSpec(
        ErrorCategory.VALIDATION, 400, "Invalid order query",
    ),
    ErrorKind.ARTICLE_NOT_FOUND: ErrorResponseSpec(
        ErrorCategory.RESOURCE_NOT_FOUND, 404,
        "No resource found for article_id: {article_id}",
    ),
    ErrorKind.RESOURCE_NOT_FOUND: ErrorResponseSpec(
        ErrorCategory.RESOURCE_NOT_FOUND, 404, "Resource not found",
    ),
    ErrorKind.RELATED_RESOURCE_MISSING: ErrorResponseSpec(
        ErrorCategory.RESOURCE_NOT_FOUND, 404, "Related resource does not exist",
    ),
    ErrorKind.PATH_NOT_FOUND: ErrorResponseSpec(
        ErrorCategory.RESOURCE_NOT_FOUND, 404, "Path not found",
    ),
    ErrorKind.INTERNAL: ErrorResponseSpec(
        ErrorCategory.INTERNAL, 500, "Internal server error",
    ),
}


# ─── Store error code table ─────────────────────────────────────

# PostgreSQL SQLSTATE codes
STORE_ERROR_CODES: dict[str, ErrorKind] = {
    "22P02": ErrorKind.INVALID_INPUT,             # invalid_text_representation
    "22003": ErrorKind.INVALID_INPUT,             # numeric_value_out_of_range
    "23502": ErrorKind.MISSING_REQUIRED_DATA,     # not_null_violation
    "23503": ErrorKind.RELATED_RESOURCE_MISSING,  # foreign_key_violation
}

# sqlite3 extended result names (Python 3.11+)
SQLITE_ERROR_NAMES: dict[str, ErrorKind] = {
    "SQLITE_CONSTRAINT_NOTNULL": ErrorKind.MISSING_REQUIRED_DATA,
    "SQLITE_CONSTRAINT_FOREIGNKEY": ErrorKind.RELATED_RESOURCE_MISSING,
}

SQLITE_ERROR_MESSAGES: tuple[tuple[str, ErrorKind], ...] = (
    ("NOT NULL constraint failed", ErrorKind.MISSING_REQUIRED_DATA),
    ("FOREIGN KEY constraint failed", ErrorKind.RELATED_RESOURCE_MISSING),
)


class NewsdeskError(Exception):
    """Base exception for all Newsdesk errors."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        entry = ERROR_RESPONSES[kind]
        self.kind = kind
        self.message = message or entry.message
        self.category = entry.category
        self.http_status = entry.http_status
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.kind.value

    def to_response(self) -> dict:
        """Convert to the public error envelope."""
        return {"message": self.message}


# ─── Validation Errors (400) ────────────────────────────────────

class RequestValidationFailure(NewsdeskError):
    """Path, query or body input rejected before reaching the store."""
    def __init__(self, missing: bool):
        super().__init__(
            ErrorKind.MISSING_REQUIRED_DATA if missing else ErrorKind.INVALID_INPUT,
        )


class InvalidSortQueryError(NewsdeskError):
    def __init__(self, sort_by: str):
        super().__init__(ErrorKind.INVALID_SORT_QUERY)
        self.sort_by = sort_by


class InvalidOrderQueryError(NewsdeskError):
    def __init__(self, order: str):
        super().__init__(ErrorKind.INVALID_ORDER_QUERY)
        self.order = order


# ─── Not Found Errors (404) ─────────────────────────────────────

class ArticleNotFoundError(NewsdeskError):
    """A well-formed article_id with no matching row."""
    def __init__(self, article_id: int):
        super().__init__(
            ErrorKind.ARTICLE_NOT_FOUND,
            ERROR_RESPONSES[ErrorKind.ARTICLE_NOT_FOUND].message.format(
                article_id=article_id,
            ),
        )
        self.article_id = article_id


class ResourceNotFoundError(NewsdeskError):
    def __init__(self, resource_type: str, resource_id: int):
        super().__init__(ErrorKind.RESOURCE_NOT_FOUND)
        self.resource_type = resource_type
        self.resource_id = resource_id


class PathNotFoundError(NewsdeskError):
    def __init__(self, method: str, path: str):
        super().__init__(ErrorKind.PATH_NOT_FOUND)
        self.method = method
        self.path = path


# ─── Store Errors ───────────────────────────────────────────────

class StoreConstraintError(NewsdeskError):
    """Driver error the store raised and the code table recognised.

    Status and message come from the kind; category stays STORE_CONSTRAINT
    so log lines show the failure originated in the store.
    """
    def __init__(self, kind: ErrorKind, operation: str, store_code: str | None = None):
        super().__init__(kind)
        self.category = ErrorCategory.STORE_CONSTRAINT
        self.operation = operation
        self.store_code = store_code
