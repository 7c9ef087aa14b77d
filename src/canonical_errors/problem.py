"""
Problem document (RFC 9457 shaped) and its conversion to and from
``CanonicalError``.

The problem is what crosses the wire:

    {
      "type": "gts.cf.core.errors.err.v1~cf.core.errors.not_found.v1~",
      "title": "Not Found",
      "status": 404,
      "detail": "Resource not found",
      "context": {"resource_type": "...", "resource_name": "...", "description": "..."}
    }

``instance``, ``trace_id`` and ``debug`` are omitted entirely when absent.
Both conversion directions are pure; nothing here logs or reads configuration
except ``problem_for_settings``.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)

from canonical_errors.canonical_error import CanonicalError
from canonical_errors.categories import category_from_type_uri
from canonical_errors.config import Settings, get_settings
from canonical_errors.context_models import DebugInfo
from canonical_errors.error_enums import ErrorCategory
from canonical_errors.exceptions import ContextDeserializationError

_OPTIONAL_FIELDS = ("instance", "trace_id", "debug")


class Problem(BaseModel):
    """Flat, transport-shaped representation of a canonical error."""

    model_config = ConfigDict(frozen=True)

    type: str
    title: str
    status: int
    detail: str
    instance: str | None = None
    trace_id: str | None = None
    context: Any
    debug: Any = None

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in _OPTIONAL_FIELDS:
            if data.get(key) is None:
                data.pop(key, None)
        return data

    # --- CanonicalError -> Problem ---

    @classmethod
    def from_error(cls, err: CanonicalError) -> Problem:
        """Production conversion. Debug info is always omitted."""
        return cls._build(err, include_debug=False)

    @classmethod
    def from_error_debug(cls, err: CanonicalError) -> Problem:
        """Debug conversion. Adds a top-level ``debug`` key when the error carries one."""
        return cls._build(err, include_debug=True)

    @classmethod
    def _build(cls, err: CanonicalError, include_debug: bool) -> Problem:
        context = err.context.to_wire()
        if err.resource_type is not None:
            context["resource_type"] = err.resource_type

        debug = None
        if include_debug and err.debug_info is not None:
            debug = err.debug_info.to_wire()

        return cls(
            type=err.gts_type,
            title=err.title,
            status=err.status_code,
            detail=err.message,
            context=context,
            debug=debug,
        )

    # --- Problem -> CanonicalError ---

    def to_canonical_error(self) -> CanonicalError:
        """
        Rebuild the canonical error this problem describes.

        Raises:
            InvalidProblemTypeError: ``type`` lacks the expected prefix/suffix
            UnknownCategoryError: the category name is not one of the 16
            ContextDeserializationError: ``context`` or ``debug`` has the wrong shape
        """
        category = category_from_type_uri(self.type)
        error_class = CanonicalError.error_class_for(category)

        context_type = error_class.metadata().context_type
        context = _validate_for_category(context_type, self.context, category)
        debug_info = None
        if self.debug is not None:
            debug_info = _validate_for_category(DebugInfo, self.debug, category)

        return error_class(
            context,
            self.detail,
            _extract_resource_type(self.context),
            debug_info,
        )

    # --- Wire helpers ---

    @classmethod
    def from_json(cls, payload: str | bytes) -> Problem:
        return cls.model_validate_json(payload)

    def to_json(self) -> str:
        return self.model_dump_json()

    def with_instance(self, instance: str) -> Problem:
        return self.model_copy(update={"instance": instance})

    def with_trace_id(self, trace_id: str) -> Problem:
        return self.model_copy(update={"trace_id": trace_id})


def _extract_resource_type(context: Any) -> str | None:
    if isinstance(context, dict):
        value = context.get("resource_type")
        if isinstance(value, str):
            return value
    return None


def _validate_for_category(model_type: type, value: Any, category: ErrorCategory) -> Any:
    try:
        return model_type.model_validate(value)
    except ValidationError as exc:
        raise ContextDeserializationError(category.value, exc) from exc


def problem_for_settings(err: CanonicalError, settings: Settings | None = None) -> Problem:
    """
    Render ``err`` in production or debug mode according to configuration.

    Debug rendering is used only when ``INCLUDE_DEBUG_INFO`` is set and the
    environment is not production.
    """
    settings = settings or get_settings()
    if settings.debug_problems_enabled:
        return Problem.from_error_debug(err)
    return Problem.from_error(err)
