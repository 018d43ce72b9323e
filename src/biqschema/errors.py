"""Decode error taxonomy.

INVARIANT: a structure decodes completely or not at all. The single
exception is ``BiqDeviceLimit.type``, which degrades to None for unknown
codes instead of raising (see ``biqschema.domain.entities``).

Three fatal kinds, all subclasses of :class:`DecodeError`:

- :class:`MissingRequiredField` — a required key is absent or null.
- :class:`UnknownEnumCode` — an enum field carries an unrecognised ordinal.
- :class:`TypeMismatch` — a value has the wrong kind (or is out of range).

Every error carries the full list of :class:`DecodeIssue` records so that a
transport can report all problems at once. The raised class is the kind of
the first issue.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

IssueCode = Literal["missing_field", "unknown_enum_code", "type_mismatch"]


class DecodeIssue(BaseModel):
    """One problem found while decoding a payload."""

    model_config = {"frozen": True}

    code: IssueCode
    entity: str
    field: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class SchemaError(Exception):
    """Base for all errors raised by biqschema."""


class DecodeError(SchemaError):
    """A payload could not be decoded into the requested type."""

    def __init__(self, message: str, issues: tuple[DecodeIssue, ...] = ()) -> None:
        super().__init__(message)
        self.issues = issues


class MissingRequiredField(DecodeError):
    def __init__(
        self,
        entity: str,
        field: str,
        issues: tuple[DecodeIssue, ...] = (),
    ) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"{entity}: missing required field {field!r}", issues)


class UnknownEnumCode(DecodeError):
    def __init__(
        self,
        entity: str,
        field: str,
        raw_value: Any,
        issues: tuple[DecodeIssue, ...] = (),
    ) -> None:
        self.entity = entity
        self.field = field
        self.raw_value = raw_value
        super().__init__(f"{entity}: unknown code {raw_value!r} for field {field!r}", issues)


class TypeMismatch(DecodeError):
    def __init__(
        self,
        field: str,
        expected_kind: str,
        issues: tuple[DecodeIssue, ...] = (),
    ) -> None:
        self.field = field
        self.expected_kind = expected_kind
        super().__init__(f"field {field!r}: expected {expected_kind}", issues)


def error_for_issues(issues: tuple[DecodeIssue, ...]) -> DecodeError:
    """Build the exception matching the first issue, carrying all of them."""
    if not issues:
        return DecodeError("decode failed", issues)
    first = issues[0]
    if first.code == "missing_field":
        return MissingRequiredField(first.entity, first.field, issues)
    if first.code == "unknown_enum_code":
        return UnknownEnumCode(first.entity, first.field, first.detail.get("raw_value"), issues)
    return TypeMismatch(first.field, first.detail.get("expected_kind", "valid value"), issues)
