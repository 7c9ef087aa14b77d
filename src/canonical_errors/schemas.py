"""
Schema registry for the canonical error types.

Provides the stable GTS schema identifier of every context type and renders
draft-07 JSON-Schema documents for them. Nested context types are referenced
as ``gts://<schema id>`` rather than inlined. Used for documentation and
validation only; problem conversion does not depend on it.
"""

from __future__ import annotations

import re
from typing import Any, Iterator

from canonical_errors.canonical_error import CanonicalError
from canonical_errors.categories import CATEGORY_REGISTRY
from canonical_errors.context_models import (
    DebugInfo,
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

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"
GTS_REF_SCHEME = "gts://"

SCHEMA_IDS: dict[type, str] = {
    RetryInfo: "gts.cf.core.errors.retry_info.v1~",
    RequestInfo: "gts.cf.core.errors.request_info.v1~",
    ResourceInfo: "gts.cf.core.errors.resource_info.v1~",
    ErrorInfo: "gts.cf.core.errors.error_info.v1~",
    FieldViolation: "gts.cf.core.errors.field_violation.v1~",
    DebugInfo: "gts.cf.core.errors.debug_info.v1~",
    QuotaViolation: "gts.cf.core.errors.quota_violation.v1~",
    QuotaFailure: "gts.cf.core.errors.quota_failure.v1~",
    PreconditionViolation: "gts.cf.core.errors.precondition_violation.v1~",
    PreconditionFailure: "gts.cf.core.errors.precondition_failure.v1~",
    Validation: "gts.cf.core.errors.validation.v1~",
    CanonicalError: "gts.cf.core.errors.canonical_error.v1~",
}

_SCHEMA_IDS_BY_NAME = {model.__name__: schema for model, schema in SCHEMA_IDS.items()}

# gts.<vendor>.<package>.<namespace>.<type>.v<major>[.<minor>]~ with optional
# chained segments (without the leading "gts.") each terminated by "~".
_NAME = r"[a-z_][a-z0-9_]*"
_SEGMENT = rf"{_NAME}\.{_NAME}\.{_NAME}\.{_NAME}\.v(?:0|[1-9][0-9]*)(?:\.(?:0|[1-9][0-9]*))?"
_GTS_ID_PATTERN = re.compile(rf"^gts\.{_SEGMENT}~(?:{_SEGMENT}~)*$")


class InvalidGtsIdError(ValueError):
    """Raised when a string is not a valid GTS identifier."""


def is_valid_gts_id(value: str) -> bool:
    return _GTS_ID_PATTERN.fullmatch(value) is not None


def validate_gts_id(value: str) -> str:
    """
    Check that ``value`` is a GTS type identifier.

    Raises:
        InvalidGtsIdError: If ``value`` does not follow the GTS grammar
    """
    if not is_valid_gts_id(value):
        msg = f"Invalid GTS identifier: {value!r}"
        raise InvalidGtsIdError(msg)
    return value


def schema_id(model: type) -> str:
    """
    Return the stable schema identifier of a context type.

    Raises:
        KeyError: If ``model`` is not a registered type
    """
    try:
        return SCHEMA_IDS[model]
    except KeyError:
        msg = f"No schema identifier registered for {model.__name__}"
        raise KeyError(msg) from None


def schema_ref(model: type) -> str:
    return f"{GTS_REF_SCHEME}{schema_id(model)}"


def render_schema(model: type) -> dict[str, Any]:
    """Render the JSON-Schema document of a registered type."""
    if model is Validation:
        return validation_schema()
    if model is CanonicalError:
        return canonical_error_schema()

    raw = model.model_json_schema(by_alias=True)
    properties = {
        name: _clean_property(prop) for name, prop in raw.get("properties", {}).items()
    }
    required = [field.alias or name for name, field in model.model_fields.items()]
    return {
        "$id": schema_ref(model),
        "$schema": JSON_SCHEMA_DRAFT,
        "type": "object",
        "additionalProperties": False,
        "required": required,
        "properties": properties,
    }


def _clean_property(node: Any) -> Any:
    """Drop pydantic titles/defaults and rewrite local refs to GTS refs."""
    if isinstance(node, list):
        return [_clean_property(item) for item in node]
    if not isinstance(node, dict):
        return node

    cleaned: dict[str, Any] = {}
    for key, value in node.items():
        if key in ("title", "default"):
            continue
        if key == "$ref" and isinstance(value, str) and value.startswith("#/$defs/"):
            cleaned[key] = GTS_REF_SCHEME + _SCHEMA_IDS_BY_NAME[value.rsplit("/", 1)[-1]]
        else:
            cleaned[key] = _clean_property(value)
    return cleaned


def validation_schema() -> dict[str, Any]:
    """The untagged ``Validation`` union as a ``oneOf`` of its three shapes."""
    return {
        "$id": schema_ref(Validation),
        "$schema": JSON_SCHEMA_DRAFT,
        "oneOf": [
            {
                "type": "object",
                "properties": {
                    "field_violations": {
                        "type": "array",
                        "items": {"$ref": schema_ref(FieldViolation)},
                    }
                },
                "required": ["field_violations"],
            },
            {
                "type": "object",
                "properties": {"format": {"type": "string"}},
                "required": ["format"],
            },
            {
                "type": "object",
                "properties": {"constraint": {"type": "string"}},
                "required": ["constraint"],
            },
        ],
    }


def canonical_error_schema() -> dict[str, Any]:
    """One variant per category, each referencing its bound context schema."""
    variants = [
        {
            "type": "object",
            "properties": {
                "category": {"const": entry.display_name},
                "message": {"type": "string"},
                "resource_type": {"type": "string"},
                "context": {"$ref": schema_ref(entry.context_type)},
            },
            "required": ["category", "message", "context"],
        }
        for entry in CATEGORY_REGISTRY.values()
    ]
    return {
        "$id": schema_ref(CanonicalError),
        "$schema": JSON_SCHEMA_DRAFT,
        "oneOf": variants,
    }


def iter_schemas() -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(schema id, document)`` for every registered type."""
    for model, identifier in SCHEMA_IDS.items():
        yield identifier, render_schema(model)
