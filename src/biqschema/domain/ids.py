"""Identity types and identity-only equality.

Three identifier kinds cross the wire:
- ``UserId``: account owner, a UUID.
- ``DeviceURN``: plain-text device name, used directly as a primary key.
- ``Id``: server-generated UUID for groups and similar entities.

INVARIANT: for ``IdHashable`` entities, equality and hash depend on ``id`` only.
Mutating (copying with updates to) any other field never changes identity.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import StrictStr

UserId = UUID
DeviceURN = StrictStr
Id = UUID


class IdHashable:
    """Mixin: equality and hashing defined solely by the ``id`` attribute.

    Must precede the pydantic base in the class bases so these methods win
    over the structural ``__eq__`` and generated ``__hash__`` of frozen models.
    """

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self.id)  # type: ignore[attr-defined]
