"""
Per-resource constructor families.

``ResourceErrors`` binds a resource-type tag once and exposes one constructor
per canonical category, each returning an error tagged with that resource
type. It is a convenience layer only: every error it builds is exactly what
the matching ``CanonicalError`` constructor plus ``with_resource_type`` would
produce.

Example:
    >>> users = ResourceErrors("gts.cf.core.users.user.v1")
    >>> err = users.not_found("user-123")
    >>> err.resource_type
    'gts.cf.core.users.user.v1'
"""

from __future__ import annotations

from dataclasses import dataclass

from canonical_errors.canonical_error import CanonicalError
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


@dataclass(frozen=True)
class ResourceErrors:
    """Constructor family bound to one resource-type tag."""

    resource_type: str

    def __post_init__(self) -> None:
        if not self.resource_type:
            msg = "resource_type cannot be empty"
            raise ValueError(msg)

    def _resource_info(self, resource_name: str, description: str) -> ResourceInfo:
        return ResourceInfo(
            resource_type=self.resource_type,
            resource_name=resource_name,
            description=description,
        )

    def _tag(self, err: CanonicalError) -> CanonicalError:
        return err.with_resource_type(self.resource_type)

    # --- ResourceInfo categories: take only the resource name ---

    def not_found(self, resource_name: str) -> CanonicalError:
        info = self._resource_info(resource_name, "Resource not found")
        return self._tag(CanonicalError.not_found(info))

    def already_exists(self, resource_name: str) -> CanonicalError:
        info = self._resource_info(resource_name, "Resource already exists")
        return self._tag(CanonicalError.already_exists(info))

    def data_loss(self, resource_name: str) -> CanonicalError:
        info = self._resource_info(resource_name, "Data loss detected")
        return self._tag(CanonicalError.data_loss(info))

    # --- All other categories: forward the context and tag ---

    def cancelled(self, ctx: RequestInfo) -> CanonicalError:
        return self._tag(CanonicalError.cancelled(ctx))

    def unknown(self, detail: str) -> CanonicalError:
        return self._tag(CanonicalError.unknown(detail))

    def invalid_argument(self, ctx: Validation) -> CanonicalError:
        return self._tag(CanonicalError.invalid_argument(ctx))

    def deadline_exceeded(self, ctx: RequestInfo) -> CanonicalError:
        return self._tag(CanonicalError.deadline_exceeded(ctx))

    def permission_denied(self, ctx: ErrorInfo) -> CanonicalError:
        return self._tag(CanonicalError.permission_denied(ctx))

    def resource_exhausted(self, ctx: QuotaFailure) -> CanonicalError:
        return self._tag(CanonicalError.resource_exhausted(ctx))

    def failed_precondition(self, ctx: PreconditionFailure) -> CanonicalError:
        return self._tag(CanonicalError.failed_precondition(ctx))

    def aborted(self, ctx: ErrorInfo) -> CanonicalError:
        return self._tag(CanonicalError.aborted(ctx))

    def out_of_range(self, ctx: Validation) -> CanonicalError:
        return self._tag(CanonicalError.out_of_range(ctx))

    def unimplemented(self, ctx: ErrorInfo) -> CanonicalError:
        return self._tag(CanonicalError.unimplemented(ctx))

    def internal(self, ctx: DebugInfo) -> CanonicalError:
        return self._tag(CanonicalError.internal(ctx))

    def service_unavailable(self, ctx: RetryInfo) -> CanonicalError:
        return self._tag(CanonicalError.service_unavailable(ctx))

    def unauthenticated(self, ctx: ErrorInfo) -> CanonicalError:
        return self._tag(CanonicalError.unauthenticated(ctx))
