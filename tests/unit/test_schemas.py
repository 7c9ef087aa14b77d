"""
Unit tests for the schema registry.

Checks the rendered documents of representative context types, the GTS
identifier grammar, and that wire payloads validate against their schema.
"""

from __future__ import annotations

import jsonschema
import pytest
from canonical_errors.canonical_error import CanonicalError
from canonical_errors.context_models import (
    DebugInfo,
    ErrorInfo,
    FieldViolation,
    PreconditionViolation,
    QuotaFailure,
    QuotaViolation,
    RequestInfo,
    ResourceInfo,
    RetryInfo,
    Validation,
)
from canonical_errors.schemas import (
    JSON_SCHEMA_DRAFT,
    SCHEMA_IDS,
    InvalidGtsIdError,
    is_valid_gts_id,
    iter_schemas,
    render_schema,
    schema_id,
    schema_ref,
    validate_gts_id,
)

LEAF_PAYLOADS = [
    (RetryInfo, RetryInfo.after_seconds(30)),
    (RequestInfo, RequestInfo(request_id="req-1")),
    (ResourceInfo, ResourceInfo(resource_type="t", resource_name="n")),
    (ErrorInfo, ErrorInfo(reason="R", domain="D").with_metadata("k", "v")),
    (FieldViolation, FieldViolation(field="email", description="d", reason="REQUIRED")),
    (DebugInfo, DebugInfo(detail="boom").with_stack(["frame"])),
    (QuotaViolation, QuotaViolation(subject="s", description="d")),
    (
        PreconditionViolation,
        PreconditionViolation(precondition_type="TOS", subject="user", description="d"),
    ),
]


class TestSchemaIds:
    def test_resource_info_id(self) -> None:
        assert schema_id(ResourceInfo) == "gts.cf.core.errors.resource_info.v1~"
        assert schema_ref(ResourceInfo) == "gts://gts.cf.core.errors.resource_info.v1~"

    def test_canonical_error_id(self) -> None:
        assert schema_id(CanonicalError) == "gts.cf.core.errors.canonical_error.v1~"

    def test_all_registered_ids_are_valid_gts_ids(self) -> None:
        for identifier in SCHEMA_IDS.values():
            assert is_valid_gts_id(identifier), identifier

    def test_ids_are_unique(self) -> None:
        assert len(set(SCHEMA_IDS.values())) == len(SCHEMA_IDS)

    def test_unregistered_model_raises(self) -> None:
        with pytest.raises(KeyError):
            schema_id(str)


class TestGtsIdValidation:
    @pytest.mark.parametrize(
        "value",
        [
            "gts.cf.core.errors.retry_info.v1~",
            "gts.cf.core.errors.err.v1~cf.core.errors.not_found.v1~",
            "gts.x.pkg.ns.type.v2.1~",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert validate_gts_id(value) == value

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "gts.cf.core.errors.retry_info.v1",
            "cf.core.errors.retry_info.v1~",
            "gts.cf.core.retry_info.v1~",
            "gts.CF.core.errors.retry_info.v1~",
            "gts.cf.core.errors.retry_info.v01~",
        ],
    )
    def test_invalid(self, value: str) -> None:
        assert not is_valid_gts_id(value)
        with pytest.raises(InvalidGtsIdError):
            validate_gts_id(value)


class TestRenderedSchemas:
    """Test the rendered JSON-Schema documents."""

    def test_resource_info_schema(self) -> None:
        assert render_schema(ResourceInfo) == {
            "$id": "gts://gts.cf.core.errors.resource_info.v1~",
            "$schema": JSON_SCHEMA_DRAFT,
            "type": "object",
            "additionalProperties": False,
            "required": ["resource_type", "resource_name", "description"],
            "properties": {
                "resource_type": {"type": "string"},
                "resource_name": {"type": "string"},
                "description": {"type": "string"},
            },
        }

    def test_retry_info_schema_is_non_negative(self) -> None:
        schema = render_schema(RetryInfo)

        assert schema["properties"]["retry_after_seconds"] == {"type": "integer", "minimum": 0}

    def test_nested_types_use_gts_refs(self) -> None:
        schema = render_schema(QuotaFailure)

        assert schema["properties"]["violations"] == {
            "type": "array",
            "items": {"$ref": "gts://gts.cf.core.errors.quota_violation.v1~"},
        }
        assert "$defs" not in schema

    def test_precondition_violation_uses_type_key(self) -> None:
        schema = render_schema(PreconditionViolation)

        assert schema["required"] == ["type", "subject", "description"]
        assert "type" in schema["properties"]

    def test_validation_is_one_of_three_shapes(self) -> None:
        schema = render_schema(Validation)

        assert schema["$id"] == "gts://gts.cf.core.errors.validation.v1~"
        assert [variant["required"] for variant in schema["oneOf"]] == [
            ["field_violations"],
            ["format"],
            ["constraint"],
        ]

    def test_canonical_error_has_one_variant_per_category(self) -> None:
        schema = render_schema(CanonicalError)
        categories = [variant["properties"]["category"]["const"] for variant in schema["oneOf"]]

        assert len(categories) == 16
        assert "unavailable" in categories
        assert schema["oneOf"][4]["properties"]["context"] == {
            "$ref": "gts://gts.cf.core.errors.resource_info.v1~"
        }

    def test_iter_schemas_covers_registry(self) -> None:
        rendered = dict(iter_schemas())

        assert set(rendered) == set(SCHEMA_IDS.values())
        for identifier, document in rendered.items():
            assert document["$id"] == f"gts://{identifier}"
            assert document["$schema"] == JSON_SCHEMA_DRAFT


class TestWirePayloadsValidate:
    """Wire forms of leaf context types validate against their own schema."""

    @pytest.mark.parametrize("model, value", LEAF_PAYLOADS)
    def test_payload_validates(self, model: type, value: object) -> None:
        jsonschema.Draft7Validator(render_schema(model)).validate(value.to_wire())

    def test_unknown_property_rejected(self) -> None:
        payload = {"request_id": "req-1", "extra": True}

        with pytest.raises(jsonschema.ValidationError):
            jsonschema.Draft7Validator(render_schema(RequestInfo)).validate(payload)

    def test_schemas_are_valid_draft7(self) -> None:
        for _, document in iter_schemas():
            jsonschema.Draft7Validator.check_schema(document)
