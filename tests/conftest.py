"""
Pytest Configuration

Shared fixtures for the canonical error test suite: one representative
error per category and a resource-type tag used across tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from canonical_errors import (
    CanonicalError,
    DebugInfo,
    ErrorCategory,
    ErrorInfo,
    FieldViolation,
    PreconditionFailure,
    PreconditionViolation,
    QuotaFailure,
    QuotaViolation,
    RequestInfo,
    ResourceInfo,
    RetryInfo,
    Validation,
)
from canonical_errors.config import get_settings

USER_RESOURCE_TYPE = "gts.cf.core.users.user.v1"


def build_all_category_errors() -> list[CanonicalError]:
    """One error per category, in registry order."""
    email_violation = FieldViolation(field="email", description="is required", reason="REQUIRED")
    quota_violation = QuotaViolation(subject="requests_per_minute", description="Limit 100/min")
    precondition_violation = PreconditionViolation(
        precondition_type="STATE", subject="tenant", description="Tenant must be active"
    )
    user = ResourceInfo(resource_type=USER_RESOURCE_TYPE, resource_name="user-123")
    file_info = ResourceInfo(resource_type="gts.cf.core.files.file.v1", resource_name="file-9")

    return [
        CanonicalError.cancelled(RequestInfo(request_id="req-1")),
        CanonicalError.unknown("something went wrong"),
        CanonicalError.invalid_argument(Validation.fields([email_violation])),
        CanonicalError.deadline_exceeded(RequestInfo(request_id="req-2")),
        CanonicalError.not_found(user),
        CanonicalError.already_exists(user.with_description("User already exists")),
        CanonicalError.permission_denied(
            ErrorInfo(reason="CROSS_TENANT_ACCESS", domain="auth").with_metadata(
                "tenant_id", "tenant-a"
            )
        ),
        CanonicalError.resource_exhausted(QuotaFailure(violations=[quota_violation])),
        CanonicalError.failed_precondition(
            PreconditionFailure(violations=[precondition_violation])
        ),
        CanonicalError.aborted(ErrorInfo(reason="OPTIMISTIC_LOCK_FAILURE", domain="db")),
        CanonicalError.out_of_range(Validation.constraint("page must be between 1 and 50")),
        CanonicalError.unimplemented(ErrorInfo(reason="NOT_IMPLEMENTED", domain="api")),
        CanonicalError.internal(DebugInfo(detail="null pointer in handler")),
        CanonicalError.service_unavailable(RetryInfo.after_seconds(30)),
        CanonicalError.data_loss(file_info.with_description("Data loss detected")),
        CanonicalError.unauthenticated(ErrorInfo(reason="TOKEN_EXPIRED", domain="auth")),
    ]


@pytest.fixture
def all_category_errors() -> list[CanonicalError]:
    """Provide one error per category."""
    return build_all_category_errors()


@pytest.fixture
def errors_by_category() -> dict[ErrorCategory, CanonicalError]:
    """Provide one error per category, keyed by category."""
    return {err.category: err for err in build_all_category_errors()}


@pytest.fixture
def user_resource_type() -> str:
    """Provide consistent resource-type tag for testing."""
    return USER_RESOURCE_TYPE


@pytest.fixture
def debug_info() -> DebugInfo:
    """Provide a debug payload with a single stack entry."""
    return DebugInfo(detail="SELECT * FROM users WHERE id = $1 returned 0 rows").with_stack(
        ["users::repo::find_by_id (src/repo.py:42)"]
    )


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Settings are cached; isolate tests that change the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
