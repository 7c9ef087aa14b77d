"""
canonical_errors.error_enums - The closed set of canonical error categories.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """
    Canonical error categories, modelled on RPC status codes.

    The value of each member is the fragment used inside the problem ``type``
    URI. Member order is part of the contract (registry and schema order).
    """

    CANCELLED = "cancelled"
    UNKNOWN = "unknown"
    INVALID_ARGUMENT = "invalid_argument"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    FAILED_PRECONDITION = "failed_precondition"
    ABORTED = "aborted"
    OUT_OF_RANGE = "out_of_range"
    UNIMPLEMENTED = "unimplemented"
    INTERNAL = "internal"
    SERVICE_UNAVAILABLE = "service_unavailable"
    DATA_LOSS = "data_loss"
    UNAUTHENTICATED = "unauthenticated"
