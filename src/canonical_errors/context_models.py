"""
Context value types carried by canonical errors.

Each category binds exactly one of these types (see ``categories``). They are
PURE, immutable data models: builders such as ``with_description`` return an
updated copy and never touch the original.

Unknown keys are ignored on input so that a context tagged with an injected
``resource_type`` key still validates into types that do not declare it.
"""

from __future__ import annotations

from typing import Annotated, Iterable, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, RootModel


class ContextModel(BaseModel):
    """Base class for all context types."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class FieldViolation(ContextModel):
    """A single field validation violation."""

    field: str
    description: str
    reason: str


class ResourceInfo(ContextModel):
    """Resource identification context for resource-scoped errors."""

    resource_type: str
    resource_name: str
    description: str = "Resource not found"

    def with_description(self, description: str) -> ResourceInfo:
        return self.model_copy(update={"description": description})


class ErrorInfo(ContextModel):
    """Error information with reason, domain, and metadata."""

    reason: str
    domain: str
    metadata: dict[str, str] = Field(default_factory=dict)

    def with_metadata(self, key: str, value: str) -> ErrorInfo:
        return self.model_copy(update={"metadata": {**self.metadata, key: value}})


class QuotaViolation(ContextModel):
    """A single quota violation entry."""

    subject: str
    description: str


class QuotaFailure(ContextModel):
    """Quota failure with zero or more violations."""

    violations: list[QuotaViolation] = Field(default_factory=list)


class PreconditionViolation(ContextModel):
    """A single precondition violation entry. Serialized with ``type`` as key."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    precondition_type: str = Field(alias="type")
    subject: str
    description: str


class PreconditionFailure(ContextModel):
    """Precondition failure with zero or more violations."""

    violations: list[PreconditionViolation] = Field(default_factory=list)


class DebugInfo(ContextModel):
    """Debug information with detail and stack trace."""

    detail: str
    stack_entries: list[str] = Field(default_factory=list)

    def with_stack(self, entries: Iterable[str]) -> DebugInfo:
        return self.model_copy(update={"stack_entries": list(entries)})


class RetryInfo(ContextModel):
    """Retry information for unavailable errors."""

    retry_after_seconds: NonNegativeInt

    @classmethod
    def after_seconds(cls, seconds: int) -> RetryInfo:
        return cls(retry_after_seconds=seconds)


class RequestInfo(ContextModel):
    """Request identification context."""

    request_id: str


# ---------------------------------------------------------------------------
# Validation: untagged union of three shapes
# ---------------------------------------------------------------------------


class FieldViolationList(ContextModel):
    field_violations: list[FieldViolation]


class FormatValidation(ContextModel):
    format: str


class ConstraintValidation(ContextModel):
    constraint: str


# Shapes are tried left to right; the first whose required key is present wins.
ValidationShape = Annotated[
    Union[FieldViolationList, FormatValidation, ConstraintValidation],
    Field(union_mode="left_to_right"),
]


class Validation(RootModel[ValidationShape]):
    """
    Validation context for ``invalid_argument`` and ``out_of_range``.

    Exactly one shape is populated. The JSON form carries no discriminator:
    ``{"field_violations": [...]}``, ``{"format": "..."}`` or
    ``{"constraint": "..."}``.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def fields(cls, violations: Iterable[FieldViolation]) -> Validation:
        return cls(FieldViolationList(field_violations=list(violations)))

    @classmethod
    def format(cls, message: str) -> Validation:
        return cls(FormatValidation(format=message))

    @classmethod
    def constraint(cls, message: str) -> Validation:
        return cls(ConstraintValidation(constraint=message))

    @property
    def shape(self) -> FieldViolationList | FormatValidation | ConstraintValidation:
        return self.root

    def embedded_message(self) -> str | None:
        """Return the format/constraint text, or None for field violations."""
        if isinstance(self.root, FormatValidation):
            return self.root.format
        if isinstance(self.root, ConstraintValidation):
            return self.root.constraint
        return None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
