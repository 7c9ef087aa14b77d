"""
Canonical error taxonomy and its RFC 9457 problem-document mapping.
"""

from .canonical_error import (
    AbortedError,
    AlreadyExistsError,
    CancelledError,
    CanonicalError,
    DataLossError,
    DeadlineExceededError,
    FailedPreconditionError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
    PermissionDeniedError,
    ResourceExhaustedError,
    ServiceUnavailableError,
    UnauthenticatedError,
    UnimplementedError,
    UnknownError,
)
from .categories import (
    CATEGORY_REGISTRY,
    GTS_TYPE_PREFIX,
    GTS_TYPE_SUFFIX,
    CategoryMetadata,
    get_category_metadata,
    list_categories,
    parse_type_uri,
    type_uri,
)
from .context_models import (
    ConstraintValidation,
    DebugInfo,
    ErrorInfo,
    FieldViolation,
    FieldViolationList,
    FormatValidation,
    PreconditionFailure,
    PreconditionViolation,
    QuotaFailure,
    QuotaViolation,
    RequestInfo,
    ResourceInfo,
    RetryInfo,
    Validation,
)
from .error_enums import ErrorCategory
from .exceptions import (
    ContextDeserializationError,
    InvalidProblemTypeError,
    ProblemConversionError,
    UnknownCategoryError,
)
from .problem import Problem, problem_for_settings
from .resource_errors import ResourceErrors

__all__ = [
    "CATEGORY_REGISTRY",
    "GTS_TYPE_PREFIX",
    "GTS_TYPE_SUFFIX",
    "AbortedError",
    "AlreadyExistsError",
    "CancelledError",
    "CanonicalError",
    "CategoryMetadata",
    "ConstraintValidation",
    "ContextDeserializationError",
    "DataLossError",
    "DeadlineExceededError",
    "DebugInfo",
    "ErrorCategory",
    "ErrorInfo",
    "FailedPreconditionError",
    "FieldViolation",
    "FieldViolationList",
    "FormatValidation",
    "InternalError",
    "InvalidArgumentError",
    "InvalidProblemTypeError",
    "NotFoundError",
    "OutOfRangeError",
    "PermissionDeniedError",
    "PreconditionFailure",
    "PreconditionViolation",
    "Problem",
    "ProblemConversionError",
    "QuotaFailure",
    "QuotaViolation",
    "RequestInfo",
    "ResourceErrors",
    "ResourceExhaustedError",
    "ResourceInfo",
    "RetryInfo",
    "ServiceUnavailableError",
    "UnauthenticatedError",
    "UnimplementedError",
    "UnknownCategoryError",
    "UnknownError",
    "Validation",
    "get_category_metadata",
    "list_categories",
    "parse_type_uri",
    "problem_for_settings",
    "type_uri",
]
