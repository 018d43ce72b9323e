"""Domain layer — identity types, flags, enums, and entities.

This layer depends only on stdlib and pydantic.
It must never import from api, codec, or config.
"""
