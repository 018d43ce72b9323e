"""Pydantic configuration models with code-baked defaults.

The schema layer reads no environment variables or files; hosts build a
``CodecConfig`` and pass it to the codec explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CodecConfig(BaseModel):
    """Encoding options for :mod:`biqschema.codec`."""

    model_config = {"frozen": True}

    # True: absent optionals are left out. False: written as explicit null.
    omit_absent: bool = True
    json_indent: int | None = Field(default=None, ge=0)


DEFAULT_CODEC_CONFIG = CodecConfig()
