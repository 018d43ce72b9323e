"""Device capability flags — an open bitset over a signed integer.

Bit layout (wire contract):
- bit 0: locked
- bit 1: reserved, never assigned
- bit 2: temperature capable
- bit 3: movement capable
- bit 4: light capable

INVARIANT: unknown bits are carried, never masked. A value decoded from a
newer producer re-encodes to the same integer, including a value with
the sign bit set (which arrives as a negative number).
"""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import AfterValidator, Strict


class BiqDeviceFlag(int):
    """Bitset of device capabilities.

    Combine with ``|``, test with ``&`` or ``in``::

        >>> flags = BiqDeviceFlag.LOCKED | BiqDeviceFlag.MOVEMENT_CAPABLE
        >>> BiqDeviceFlag.LOCKED in flags
        True
        >>> int(flags & BiqDeviceFlag.TEMPERATURE_CAPABLE)
        0
    """

    LOCKED: ClassVar[BiqDeviceFlag]
    TEMPERATURE_CAPABLE: ClassVar[BiqDeviceFlag]
    MOVEMENT_CAPABLE: ClassVar[BiqDeviceFlag]
    LIGHT_CAPABLE: ClassVar[BiqDeviceFlag]

    def __new__(cls, raw_value: int = 0) -> BiqDeviceFlag:
        return super().__new__(cls, int(raw_value))

    @property
    def raw_value(self) -> int:
        return int(self)

    def __or__(self, other: int) -> BiqDeviceFlag:
        return BiqDeviceFlag(int(self) | int(other))

    __ror__ = __or__

    def __and__(self, other: int) -> BiqDeviceFlag:
        return BiqDeviceFlag(int(self) & int(other))

    __rand__ = __and__

    def __contains__(self, other: int) -> bool:
        bits = int(other)
        return bits != 0 and (int(self) & bits) == bits

    def __repr__(self) -> str:
        return f"BiqDeviceFlag({int(self)})"

    # --- Named bit accessors ---

    @property
    def locked(self) -> bool:
        return BiqDeviceFlag.LOCKED in self

    @property
    def temperature_capable(self) -> bool:
        return BiqDeviceFlag.TEMPERATURE_CAPABLE in self

    @property
    def movement_capable(self) -> bool:
        return BiqDeviceFlag.MOVEMENT_CAPABLE in self

    @property
    def light_capable(self) -> bool:
        return BiqDeviceFlag.LIGHT_CAPABLE in self


BiqDeviceFlag.LOCKED = BiqDeviceFlag(1)
BiqDeviceFlag.TEMPERATURE_CAPABLE = BiqDeviceFlag(1 << 2)
BiqDeviceFlag.MOVEMENT_CAPABLE = BiqDeviceFlag(1 << 3)
BiqDeviceFlag.LIGHT_CAPABLE = BiqDeviceFlag(1 << 4)


# Raw ``flags`` field on the wire: any integer, stored as a plain int even
# when a BiqDeviceFlag is passed in.
RawFlags = Annotated[int, Strict(), AfterValidator(int)]
