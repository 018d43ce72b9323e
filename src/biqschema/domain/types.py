"""Ordinal enums — limit types, observation intervals, observation elements.

All three serialize as their integer value. Ordinals are part of the wire
contract: append new members, never renumber existing ones.
"""

from __future__ import annotations

from datetime import timedelta
from enum import IntEnum


class BiqDeviceLimitType(IntEnum):
    """Alert/threshold rule kinds, stored on the wire as an 8-bit code."""

    TEMP_HIGH = 0
    TEMP_LOW = 1
    MOVEMENT_LEVEL = 2
    BATTERY_LEVEL = 3
    NOTIFICATIONS = 4
    TEMP_SCALE = 5
    COLOUR = 6


class ObsInterval(IntEnum):
    """Time range selector for observation requests."""

    ALL = 0
    LIVE = 1
    DAY = 2
    MONTH = 3
    YEAR = 4


# ObsInterval.LIVE covers this trailing window.
LIVE_WINDOW = timedelta(hours=12)


class ObservationElement(IntEnum):
    """Positional channel index of an observation (column-oriented exports).

    ``RELATIVE_TEMPERATURE`` and ``ACCELERATION`` (combined xyz) are derived
    channels with no discrete raw field on ``BiqObservation``.
    """

    DEVICE_ID = 0
    FIRMWARE_VERSION = 1
    BATTERY_LEVEL = 2
    CHARGING = 3
    TEMPERATURE = 4
    LIGHT_LEVEL = 5
    RELATIVE_HUMIDITY = 6
    RELATIVE_TEMPERATURE = 7
    ACCELERATION = 8
