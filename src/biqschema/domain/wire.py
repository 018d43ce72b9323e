"""WireModel — the shared base for every entity and message.

Attributes are snake_case in Python; wire keys are camelCase via the alias
generator. Models are frozen: no field is reassigned after construction,
so instances are safe to share across threads.

Scalars on the wire are never retyped. ``WireInt`` and ``WireStr`` accept
only integers and strings; ``WireFloat`` accepts any JSON number but not a
boolean or numeric text. Enum fields go through :func:`require_ordinal` so
that ``"1"``, ``1.0`` and ``true`` never pass for a code.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Strict, StrictInt, StrictStr
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

WireInt = StrictInt
WireStr = StrictStr
WireFloat = Annotated[float, Strict()]


def require_ordinal(value: object) -> object:
    """Reject anything but a plain integer before enum lookup."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise PydanticCustomError("int_type", "Input should be an integer ordinal")
    return value


class WireModel(BaseModel):
    """Frozen pydantic model keyed by camelCase wire names.

    Python callers construct by attribute name; ``biqschema.codec`` decodes
    by wire key only.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        extra="ignore",
    )
