"""
Category registry for canonical errors.

Single source of truth for per-category metadata: HTTP status, problem title,
default message, bound context type and the ``type`` URI fragment. Every
lookup elsewhere in the package goes through this table.
"""

from __future__ import annotations

from dataclasses import dataclass

from canonical_errors.context_models import (
    DebugInfo,
    ErrorInfo,
    PreconditionFailure,
    QuotaFailure,
    RequestInfo,
    ResourceInfo,
    RetryInfo,
    Validation,
)
from canonical_errors.error_enums import ErrorCategory
from canonical_errors.exceptions import InvalidProblemTypeError, UnknownCategoryError

# Preserved verbatim for wire compatibility.
GTS_TYPE_PREFIX = "gts.cf.core.errors.err.v1~cf.core.errors."
GTS_TYPE_SUFFIX = ".v1~"


@dataclass(frozen=True)
class CategoryMetadata:
    """
    Static metadata for one canonical error category.

    Attributes:
        category: The category this entry describes
        status: HTTP status code used in the problem document
        title: Human-readable problem title
        context_type: Context model every error of this category carries
        default_message: Fixed default message, or None when the message is
            derived from the context at construction time
        display_name: Name used in ``str(error)`` and in the error schema
    """

    category: ErrorCategory
    status: int
    title: str
    context_type: type
    default_message: str | None
    display_name: str

    def __post_init__(self) -> None:
        if not 100 <= self.status <= 599:
            msg = f"status must be a valid HTTP status code, got {self.status}"
            raise ValueError(msg)
        if not self.title:
            msg = "title cannot be empty"
            raise ValueError(msg)

    @property
    def type_uri(self) -> str:
        return f"{GTS_TYPE_PREFIX}{self.category.value}{GTS_TYPE_SUFFIX}"


def _entry(
    category: ErrorCategory,
    status: int,
    title: str,
    context_type: type,
    default_message: str | None,
    display_name: str | None = None,
) -> CategoryMetadata:
    return CategoryMetadata(
        category=category,
        status=status,
        title=title,
        context_type=context_type,
        default_message=default_message,
        display_name=display_name or category.value,
    )


CATEGORY_REGISTRY: dict[ErrorCategory, CategoryMetadata] = {
    entry.category: entry
    for entry in (
        _entry(
            ErrorCategory.CANCELLED,
            499,
            "Cancelled",
            RequestInfo,
            "Operation cancelled by the client",
        ),
        _entry(ErrorCategory.UNKNOWN, 500, "Unknown", DebugInfo, None),
        _entry(ErrorCategory.INVALID_ARGUMENT, 400, "Invalid Argument", Validation, None),
        _entry(
            ErrorCategory.DEADLINE_EXCEEDED,
            504,
            "Deadline Exceeded",
            RequestInfo,
            "Operation did not complete within the allowed time",
        ),
        _entry(ErrorCategory.NOT_FOUND, 404, "Not Found", ResourceInfo, "Resource not found"),
        _entry(ErrorCategory.ALREADY_EXISTS, 409, "Already Exists", ResourceInfo, None),
        _entry(
            ErrorCategory.PERMISSION_DENIED,
            403,
            "Permission Denied",
            ErrorInfo,
            "You do not have permission to perform this operation",
        ),
        _entry(
            ErrorCategory.RESOURCE_EXHAUSTED,
            429,
            "Resource Exhausted",
            QuotaFailure,
            "Quota exceeded",
        ),
        _entry(
            ErrorCategory.FAILED_PRECONDITION,
            400,
            "Failed Precondition",
            PreconditionFailure,
            "Operation precondition not met",
        ),
        _entry(
            ErrorCategory.ABORTED,
            409,
            "Aborted",
            ErrorInfo,
            "Operation aborted due to concurrency conflict",
        ),
        _entry(ErrorCategory.OUT_OF_RANGE, 400, "Out of Range", Validation, None),
        _entry(
            ErrorCategory.UNIMPLEMENTED,
            501,
            "Unimplemented",
            ErrorInfo,
            "This operation is not implemented",
        ),
        _entry(
            ErrorCategory.INTERNAL,
            500,
            "Internal",
            DebugInfo,
            "An internal error occurred. Please retry later.",
        ),
        _entry(
            ErrorCategory.SERVICE_UNAVAILABLE,
            503,
            "Unavailable",
            RetryInfo,
            "Service temporarily unavailable",
            display_name="unavailable",
        ),
        _entry(ErrorCategory.DATA_LOSS, 500, "Data Loss", ResourceInfo, None),
        _entry(
            ErrorCategory.UNAUTHENTICATED,
            401,
            "Unauthenticated",
            ErrorInfo,
            "Authentication required",
        ),
    )
}


def get_category_metadata(category: ErrorCategory) -> CategoryMetadata:
    """Return the registry entry for ``category``."""
    return CATEGORY_REGISTRY[category]


def list_categories() -> list[ErrorCategory]:
    """Return all categories in registry order."""
    return list(CATEGORY_REGISTRY)


def type_uri(category: ErrorCategory) -> str:
    """Build the problem ``type`` URI for ``category``."""
    return CATEGORY_REGISTRY[category].type_uri


def parse_type_uri(problem_type: str) -> str:
    """
    Strip the fixed prefix and suffix from a problem ``type`` URI.

    Example:
        ``gts.cf.core.errors.err.v1~cf.core.errors.not_found.v1~`` -> ``not_found``

    Raises:
        InvalidProblemTypeError: If either the prefix or the suffix is missing
    """
    if not problem_type.startswith(GTS_TYPE_PREFIX):
        raise InvalidProblemTypeError(problem_type)
    remainder = problem_type[len(GTS_TYPE_PREFIX) :]
    if not remainder.endswith(GTS_TYPE_SUFFIX):
        raise InvalidProblemTypeError(problem_type)
    return remainder[: -len(GTS_TYPE_SUFFIX)]


def lookup_category(name: str) -> ErrorCategory:
    """
    Resolve a category name taken from a ``type`` URI.

    Raises:
        UnknownCategoryError: If ``name`` is not one of the 16 categories
    """
    try:
        return ErrorCategory(name)
    except ValueError:
        raise UnknownCategoryError(name) from None


def category_from_type_uri(problem_type: str) -> ErrorCategory:
    return lookup_category(parse_type_uri(problem_type))
