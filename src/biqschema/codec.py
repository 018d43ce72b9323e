"""Encode/decode contract for every entity and message.

- ``encode`` / ``to_json`` write wire keys (camelCase), enums as ordinals,
  UUIDs as canonical text, flags as a single integer.
- ``decode`` / ``from_json`` accept absent keys and explicit nulls alike for
  optional fields, match wire keys exactly (a snake_case key is an unknown
  key), and raise the :mod:`biqschema.errors` taxonomy on failure.
- ``decode_enum`` is the strict enum path used everywhere an enum code is
  decoded outside a model; unknown codes always raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar, get_args, get_origin

from pydantic import BaseModel, ValidationError

from biqschema.config.models import DEFAULT_CODEC_CONFIG, CodecConfig
from biqschema.errors import DecodeIssue, TypeMismatch, UnknownEnumCode, error_for_issues

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
E = TypeVar("E", bound=IntEnum)

_ROOT = "<root>"

# pydantic error type -> wire kind expected by the field
_EXPECTED_KINDS: dict[str, str] = {
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "string_type": "string",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "uuid_type": "UUID",
    "uuid_parsing": "UUID",
    "tuple_type": "array",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    # the only bounded wire field is an 8-bit code
    "greater_than_equal": "8-bit integer",
    "less_than_equal": "8-bit integer",
    "json_invalid": "valid JSON",
    "json_type": "valid JSON",
}


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode(model: BaseModel, config: CodecConfig | None = None) -> dict[str, Any]:
    """Return the JSON-compatible wire mapping for *model*."""
    cfg = config or DEFAULT_CODEC_CONFIG
    return model.model_dump(mode="json", by_alias=True, exclude_none=cfg.omit_absent)


def to_json(model: BaseModel, config: CodecConfig | None = None) -> str:
    """Return the wire JSON text for *model*."""
    cfg = config or DEFAULT_CODEC_CONFIG
    return model.model_dump_json(
        by_alias=True,
        exclude_none=cfg.omit_absent,
        indent=cfg.json_indent,
    )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode(model_cls: type[M], payload: Any) -> M:
    """Decode a wire mapping into *model_cls*.

    Raises:
        MissingRequiredField: A required key is absent or null.
        UnknownEnumCode: An enum field holds an unrecognised ordinal.
        TypeMismatch: A value has the wrong kind, or *payload* is not a mapping.
    """
    if not isinstance(payload, Mapping):
        issue = DecodeIssue(
            code="type_mismatch",
            entity=model_cls.__name__,
            field=_ROOT,
            message=f"expected a mapping, got {type(payload).__name__}",
            detail={"expected_kind": "object"},
        )
        raise error_for_issues((issue,))
    try:
        return model_cls.model_validate(payload, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _translate(model_cls, exc) from exc


def from_json(model_cls: type[M], text: str | bytes) -> M:
    """Decode wire JSON text into *model_cls*. Same errors as :func:`decode`."""
    try:
        return model_cls.model_validate_json(text, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _translate(model_cls, exc) from exc


def decode_many(model_cls: type[M], payloads: Iterable[Any]) -> list[M]:
    """Decode a list payload. The first failing element fails the whole call."""
    return [decode(model_cls, payload) for payload in payloads]


def decode_enum(enum_cls: type[E], raw: Any, *, entity: str, field: str) -> E:
    """Strictly decode an ordinal into *enum_cls*.

    Raises:
        UnknownEnumCode: *raw* is an integer with no matching member.
        TypeMismatch: *raw* is not an integer.
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        issue = DecodeIssue(
            code="type_mismatch",
            entity=entity,
            field=field,
            message=f"expected an integer ordinal, got {type(raw).__name__}",
            detail={"expected_kind": "integer"},
        )
        raise TypeMismatch(field, "integer", (issue,))
    try:
        return enum_cls(raw)
    except ValueError:
        issue = DecodeIssue(
            code="unknown_enum_code",
            entity=entity,
            field=field,
            message=f"{raw} is not a valid {enum_cls.__name__}",
            detail={"raw_value": raw, "enum": enum_cls.__name__},
        )
        raise UnknownEnumCode(entity, field, raw, (issue,)) from None


# ---------------------------------------------------------------------------
# pydantic error translation
# ---------------------------------------------------------------------------


def _translate(model_cls: type[BaseModel], exc: ValidationError) -> Exception:
    issues = tuple(_issue_for(model_cls, err) for err in exc.errors())
    logger.debug(
        "Decode of %s failed: %s",
        model_cls.__name__,
        ", ".join(f"{i.entity}.{i.field} ({i.code})" for i in issues),
    )
    return error_for_issues(issues)


def _issue_for(model_cls: type[BaseModel], err: ErrorDetails) -> DecodeIssue:
    loc = err["loc"]
    # An array element has no field name of its own; report its array.
    field_loc = _field_loc(loc)
    entity = _entity_for(model_cls, field_loc)
    field = str(field_loc[-1]) if field_loc else _ROOT
    path = ".".join(str(part) for part in loc) or _ROOT
    err_type = err["type"]
    raw = err.get("input")

    if err_type == "missing" or (raw is None and loc and isinstance(loc[-1], str)):
        return DecodeIssue(
            code="missing_field",
            entity=entity,
            field=field,
            message=f"{entity}: missing required field {field!r}",
            detail={"path": path},
        )
    if err_type == "enum":
        return DecodeIssue(
            code="unknown_enum_code",
            entity=entity,
            field=field,
            message=err["msg"],
            detail={"path": path, "raw_value": raw},
        )
    expected = _EXPECTED_KINDS.get(err_type, "valid value")
    return DecodeIssue(
        code="type_mismatch",
        entity=entity,
        field=field,
        message=f"{path}: {err['msg']}",
        detail={"path": path, "expected_kind": expected, "error_type": err_type},
    )


def _field_loc(loc: tuple[int | str, ...]) -> tuple[int | str, ...]:
    end = len(loc)
    while end and isinstance(loc[end - 1], int):
        end -= 1
    return loc[:end]


def _entity_for(model_cls: type[BaseModel], loc: tuple[int | str, ...]) -> str:
    """Name of the model that owns the last element of *loc*."""
    current = model_cls
    for part in loc[:-1]:
        if isinstance(part, int):
            continue
        nested = _nested_model(current, part)
        if nested is not None:
            current = nested
    return current.__name__


def _nested_model(model_cls: type[BaseModel], key: str) -> type[BaseModel] | None:
    for name, info in model_cls.model_fields.items():
        if key in (name, info.alias):
            return _find_model(info.annotation)
    return None


def _find_model(tp: Any) -> type[BaseModel] | None:
    if get_origin(tp) is None and isinstance(tp, type) and issubclass(tp, BaseModel):
        return tp
    for arg in get_args(tp):
        found = _find_model(arg)
        if found is not None:
            return found
    return None
