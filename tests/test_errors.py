"""Tests for the decode error taxonomy."""

import pytest

from biqschema.errors import (
    DecodeError,
    DecodeIssue,
    MissingRequiredField,
    SchemaError,
    TypeMismatch,
    UnknownEnumCode,
    error_for_issues,
)


def _issue(code: str, **detail: object) -> DecodeIssue:
    return DecodeIssue(
        code=code,  # type: ignore[arg-type]
        entity="BiqDevice",
        field="flags",
        message="m",
        detail=dict(detail),
    )


class TestHierarchy:
    @pytest.mark.parametrize("exc_cls", [MissingRequiredField, UnknownEnumCode, TypeMismatch])
    def test_all_are_decode_errors(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, DecodeError)
        assert issubclass(exc_cls, SchemaError)

    def test_messages_name_entity_and_field(self) -> None:
        assert str(MissingRequiredField("BiqDevice", "name")) == (
            "BiqDevice: missing required field 'name'"
        )
        assert "255" in str(UnknownEnumCode("DeviceLimit", "limitType", 255))
        assert str(TypeMismatch("ownerId", "UUID")) == "field 'ownerId': expected UUID"


class TestErrorForIssues:
    def test_first_issue_decides_class(self) -> None:
        issues = (_issue("unknown_enum_code", raw_value=9), _issue("missing_field"))
        err = error_for_issues(issues)
        assert isinstance(err, UnknownEnumCode)
        assert err.raw_value == 9
        assert err.issues == issues

    def test_type_mismatch_kind(self) -> None:
        err = error_for_issues((_issue("type_mismatch", expected_kind="integer"),))
        assert isinstance(err, TypeMismatch)
        assert err.expected_kind == "integer"

    def test_missing_field(self) -> None:
        err = error_for_issues((_issue("missing_field"),))
        assert isinstance(err, MissingRequiredField)
        assert (err.entity, err.field) == ("BiqDevice", "flags")

    def test_no_issues(self) -> None:
        err = error_for_issues(())
        assert type(err) is DecodeError


def test_issue_is_serializable() -> None:
    issue = _issue("missing_field", path="device.name")
    assert issue.model_dump() == {
        "code": "missing_field",
        "entity": "BiqDevice",
        "field": "flags",
        "message": "m",
        "detail": {"path": "device.name"},
    }
