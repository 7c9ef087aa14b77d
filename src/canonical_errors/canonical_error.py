"""
The canonical error: a closed family of 16 raisable error categories.

``CanonicalError`` is the common base; every category is a sealed subclass
whose context type is fixed by the category registry. Errors are values:
builders (``with_message``, ``with_resource_type``, ``with_debug_info``)
return a new error and leave the receiver untouched. Contexts are copied on
construction, so mutating a context object after building an error never
changes that error or any error derived from it.

Example:
    >>> err = CanonicalError.not_found(
    ...     ResourceInfo(resource_type="gts.cf.core.users.user.v1", resource_name="user-123")
    ... ).with_message("User not found")
    >>> str(err)
    'not_found: User not found'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from canonical_errors.categories import CategoryMetadata, get_category_metadata
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

if TYPE_CHECKING:
    from canonical_errors.problem import Problem

_ERROR_CLASSES: dict[ErrorCategory, type[CanonicalError]] = {}


class CanonicalError(Exception):
    """
    Base class of all canonical errors.

    Not instantiated directly: use a category subclass or one of the
    constructor helpers (``CanonicalError.not_found(...)`` etc.).
    """

    category: ClassVar[ErrorCategory]

    __match_args__ = ("context", "message")

    def __init_subclass__(cls, *, category: ErrorCategory | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if category is not None:
            cls.category = category
            _ERROR_CLASSES[category] = cls

    def __init__(
        self,
        context: Any,
        message: str | None = None,
        resource_type: str | None = None,
        debug_info: DebugInfo | None = None,
    ) -> None:
        if not hasattr(type(self), "category"):
            msg = "CanonicalError must be created through a category subclass"
            raise TypeError(msg)
        expected = self.metadata().context_type
        if not isinstance(context, expected):
            msg = (
                f"{self.category.value} requires a {expected.__name__} context, "
                f"got {type(context).__name__}"
            )
            raise TypeError(msg)
        if message is None:
            message = self._default_message(context)
        # Each error owns its context; nested lists and dicts are not shared.
        self._context = context.model_copy(deep=True)
        self._message = message
        self._resource_type = resource_type
        self._debug_info = debug_info.model_copy(deep=True) if debug_info is not None else None
        super().__init__(message)

    @classmethod
    def metadata(cls) -> CategoryMetadata:
        return get_category_metadata(cls.category)

    @classmethod
    def _default_message(cls, context: Any) -> str:
        default = cls.metadata().default_message
        if default is None:
            msg = f"{cls.__name__} must derive its default message from the context"
            raise NotImplementedError(msg)
        return default

    # --- Accessors ---

    @property
    def context(self) -> Any:
        return self._context

    @property
    def message(self) -> str:
        return self._message

    @property
    def resource_type(self) -> str | None:
        return self._resource_type

    @property
    def debug_info(self) -> DebugInfo | None:
        return self._debug_info

    @property
    def status_code(self) -> int:
        return self.metadata().status

    @property
    def title(self) -> str:
        return self.metadata().title

    @property
    def gts_type(self) -> str:
        return self.metadata().type_uri

    @property
    def category_name(self) -> str:
        return self.metadata().display_name

    # --- Builders ---

    def _evolve(self, **changes: Any) -> CanonicalError:
        state: dict[str, Any] = {
            "context": self._context,
            "message": self._message,
            "resource_type": self._resource_type,
            "debug_info": self._debug_info,
        }
        state.update(changes)
        return type(self)(**state)

    def with_message(self, message: str) -> CanonicalError:
        return self._evolve(message=message)

    def with_resource_type(self, resource_type: str) -> CanonicalError:
        return self._evolve(resource_type=resource_type)

    def with_debug_info(self, debug_info: DebugInfo) -> CanonicalError:
        return self._evolve(debug_info=debug_info)

    # --- Problem conversion ---

    def to_problem(self, debug: bool = False) -> Problem:
        """Convert to a problem document; identical to ``Problem.from_error``."""
        from canonical_errors.problem import Problem

        return Problem.from_error_debug(self) if debug else Problem.from_error(self)

    @classmethod
    def from_problem(cls, problem: Problem) -> CanonicalError:
        """
        Rebuild a canonical error from a problem document.

        Raises:
            ProblemConversionError: If the document cannot be converted
        """
        return problem.to_canonical_error()

    @staticmethod
    def error_class_for(category: ErrorCategory) -> type[CanonicalError]:
        return _ERROR_CLASSES[category]

    def __str__(self) -> str:
        return f"{self.category_name}: {self._message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(context={self._context!r}, message={self._message!r}, "
            f"resource_type={self._resource_type!r}, debug_info={self._debug_info!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (self._context, self._message, self._resource_type, self._debug_info),
        )

    # --- Constructors (one per category) ---

    @staticmethod
    def cancelled(ctx: RequestInfo) -> CanonicalError:
        return CancelledError(ctx)

    @staticmethod
    def unknown(detail: str) -> CanonicalError:
        return UnknownError(DebugInfo(detail=detail))

    @staticmethod
    def invalid_argument(ctx: Validation) -> CanonicalError:
        return InvalidArgumentError(ctx)

    @staticmethod
    def deadline_exceeded(ctx: RequestInfo) -> CanonicalError:
        return DeadlineExceededError(ctx)

    @staticmethod
    def not_found(ctx: ResourceInfo) -> CanonicalError:
        return NotFoundError(ctx)

    @staticmethod
    def already_exists(ctx: ResourceInfo) -> CanonicalError:
        return AlreadyExistsError(ctx)

    @staticmethod
    def permission_denied(ctx: ErrorInfo) -> CanonicalError:
        return PermissionDeniedError(ctx)

    @staticmethod
    def resource_exhausted(ctx: QuotaFailure) -> CanonicalError:
        return ResourceExhaustedError(ctx)

    @staticmethod
    def failed_precondition(ctx: PreconditionFailure) -> CanonicalError:
        return FailedPreconditionError(ctx)

    @staticmethod
    def aborted(ctx: ErrorInfo) -> CanonicalError:
        return AbortedError(ctx)

    @staticmethod
    def out_of_range(ctx: Validation) -> CanonicalError:
        return OutOfRangeError(ctx)

    @staticmethod
    def unimplemented(ctx: ErrorInfo) -> CanonicalError:
        return UnimplementedError(ctx)

    @staticmethod
    def internal(ctx: DebugInfo) -> CanonicalError:
        return InternalError(ctx)

    @staticmethod
    def service_unavailable(ctx: RetryInfo) -> CanonicalError:
        return ServiceUnavailableError(ctx)

    @staticmethod
    def data_loss(ctx: ResourceInfo) -> CanonicalError:
        return DataLossError(ctx)

    @staticmethod
    def unauthenticated(ctx: ErrorInfo) -> CanonicalError:
        return UnauthenticatedError(ctx)


class CancelledError(CanonicalError, category=ErrorCategory.CANCELLED):
    """The operation was cancelled, typically by the caller."""


class UnknownError(CanonicalError, category=ErrorCategory.UNKNOWN):
    """Unknown error; the message is the caller-supplied detail."""

    @classmethod
    def _default_message(cls, context: DebugInfo) -> str:
        return context.detail


class InvalidArgumentError(CanonicalError, category=ErrorCategory.INVALID_ARGUMENT):
    """The client specified an invalid argument."""

    @classmethod
    def _default_message(cls, context: Validation) -> str:
        return context.embedded_message() or "Request validation failed"


class DeadlineExceededError(CanonicalError, category=ErrorCategory.DEADLINE_EXCEEDED):
    pass


class NotFoundError(CanonicalError, category=ErrorCategory.NOT_FOUND):
    pass


class AlreadyExistsError(CanonicalError, category=ErrorCategory.ALREADY_EXISTS):
    """The resource the client tried to create already exists."""

    @classmethod
    def _default_message(cls, context: ResourceInfo) -> str:
        return context.description


class PermissionDeniedError(CanonicalError, category=ErrorCategory.PERMISSION_DENIED):
    pass


class ResourceExhaustedError(CanonicalError, category=ErrorCategory.RESOURCE_EXHAUSTED):
    pass


class FailedPreconditionError(CanonicalError, category=ErrorCategory.FAILED_PRECONDITION):
    pass


class AbortedError(CanonicalError, category=ErrorCategory.ABORTED):
    """Aborted, typically because of a concurrency conflict."""


class OutOfRangeError(CanonicalError, category=ErrorCategory.OUT_OF_RANGE):
    @classmethod
    def _default_message(cls, context: Validation) -> str:
        return context.embedded_message() or "Value out of range"


class UnimplementedError(CanonicalError, category=ErrorCategory.UNIMPLEMENTED):
    pass


class InternalError(CanonicalError, category=ErrorCategory.INTERNAL):
    pass


class ServiceUnavailableError(CanonicalError, category=ErrorCategory.SERVICE_UNAVAILABLE):
    """The service is temporarily unavailable; see ``RetryInfo``."""


class DataLossError(CanonicalError, category=ErrorCategory.DATA_LOSS):
    """Unrecoverable data loss or corruption."""

    @classmethod
    def _default_message(cls, context: ResourceInfo) -> str:
        return context.description


class UnauthenticatedError(CanonicalError, category=ErrorCategory.UNAUTHENTICATED):
    pass
