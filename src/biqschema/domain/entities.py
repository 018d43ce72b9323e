"""Entity models — observations, devices, groups, and their join records.

Every entity has two construction paths:

- ``create(...)``: the constructor used by producers. It never accepts the
  expansion fields (``groupMemberships``, ``accessPermissions``, ``devices``);
  those are always absent on a freshly created entity.
- pydantic validation (``biqschema.codec.decode``): the read path. It accepts
  expansion fields because they appear on expanded read responses.

Expansion fields are attached afterwards by the storage collaborator through
``with_expansions()`` / ``with_devices()``, which return new instances.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Annotated, Self, TypeVar

from pydantic import Field, Strict, field_validator

from biqschema.domain.flags import BiqDeviceFlag, RawFlags
from biqschema.domain.ids import DeviceURN, Id, IdHashable, UserId
from biqschema.domain.types import BiqDeviceLimitType
from biqschema.domain.wire import WireFloat, WireInt, WireModel, WireStr

logger = logging.getLogger(__name__)

T = TypeVar("T")

UInt8 = Annotated[int, Strict(), Field(ge=0, le=255)]


# ---------------------------------------------------------------------------
# Observations
# ---------------------------------------------------------------------------


class BiqObservation(WireModel):
    """One telemetry sample, produced by the ingestion pipeline.

    ``obstime`` is stored in milliseconds since the epoch (as a float); that
    unit is authoritative. Consumers wanting seconds use ``obs_time_seconds``.
    """

    id: WireInt
    bixid: DeviceURN
    obstime: WireFloat
    charging: WireInt
    firmware: WireStr
    battery: WireFloat
    temp: WireFloat
    light: WireInt
    humidity: WireInt
    accelx: WireInt
    accely: WireInt
    accelz: WireInt

    @property
    def device_id(self) -> DeviceURN:
        return self.bixid

    @property
    def obs_time_seconds(self) -> float:
        return self.obstime / 1000

    @classmethod
    def create(
        cls,
        *,
        id: int,
        device_id: DeviceURN,
        obstime: float,
        charging: int,
        firmware: str,
        battery: float,
        temp: float,
        light: int,
        humidity: int,
        accelx: int,
        accely: int,
        accelz: int,
    ) -> Self:
        return cls(
            id=id,
            bixid=device_id,
            obstime=obstime,
            charging=charging,
            firmware=firmware,
            battery=battery,
            temp=temp,
            light=light,
            humidity=humidity,
            accelx=accelx,
            accely=accely,
            accelz=accelz,
        )


# ---------------------------------------------------------------------------
# Join records
# ---------------------------------------------------------------------------


class BiqDeviceGroupMembership(WireModel):
    """A device belongs to a group. The pair itself is the fact."""

    group_id: Id
    device_id: DeviceURN

    @classmethod
    def create(cls, group_id: Id, device_id: DeviceURN) -> Self:
        return cls(group_id=group_id, device_id=device_id)


class BiqDeviceAccessPermission(WireModel):
    """Grants a user access to a device they may not own.

    ``flags`` is opaque here; the access-control collaborator owns its bits.
    """

    user_id: UserId
    device_id: DeviceURN
    flags: WireInt = 0

    @field_validator("flags", mode="before")
    @classmethod
    def _null_flags_are_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @classmethod
    def create(cls, user_id: UserId, device_id: DeviceURN, flags: int = 0) -> Self:
        return cls(user_id=user_id, device_id=device_id, flags=flags)


# ---------------------------------------------------------------------------
# Devices and groups
# ---------------------------------------------------------------------------


class BiqDevice(IdHashable, WireModel):
    """A registered device. Identity is the device URN alone."""

    id: DeviceURN
    name: WireStr
    owner_id: UserId | None = None
    flags: RawFlags | None = None
    latitude: WireFloat | None = None
    longitude: WireFloat | None = None

    # Expansion fields: populated only on expanded reads.
    group_memberships: tuple[BiqDeviceGroupMembership, ...] | None = None
    access_permissions: tuple[BiqDeviceAccessPermission, ...] | None = None

    @property
    def device_flags(self) -> BiqDeviceFlag:
        """Decoded capability flags; absent ``flags`` is the empty set."""
        return BiqDeviceFlag(self.flags or 0)

    @classmethod
    def create(
        cls,
        id: DeviceURN,
        name: str,
        owner_id: UserId | None = None,
        flags: BiqDeviceFlag | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> Self:
        return cls(
            id=id,
            name=name,
            owner_id=owner_id,
            flags=None if flags is None else int(flags),
            latitude=latitude,
            longitude=longitude,
        )

    def with_expansions(
        self,
        *,
        group_memberships: Iterable[BiqDeviceGroupMembership] | None = None,
        access_permissions: Iterable[BiqDeviceAccessPermission] | None = None,
    ) -> Self:
        """Return a copy carrying the joined membership/permission rows."""
        return self.model_copy(
            update={
                "group_memberships": _as_tuple(group_memberships),
                "access_permissions": _as_tuple(access_permissions),
            }
        )


class BiqDeviceGroup(IdHashable, WireModel):
    """A named, owned collection of devices. Identity is ``id`` alone."""

    id: Id
    owner_id: UserId
    name: WireStr

    # Expansion field: populated only on expanded reads.
    devices: tuple[BiqDevice, ...] | None = None

    @classmethod
    def create(cls, id: Id, owner_id: UserId, name: str) -> Self:
        return cls(id=id, owner_id=owner_id, name=name)

    def with_devices(self, devices: Iterable[BiqDevice] | None) -> Self:
        """Return a copy carrying the group's member devices."""
        return self.model_copy(update={"devices": _as_tuple(devices)})


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------


class BiqDeviceLimit(WireModel):
    """A per-user alert/threshold rule on one device.

    ``limit_type`` keeps the raw 8-bit code so that codes added by newer
    servers survive decoding and re-encoding. ``type`` is the decoded view and
    is None for codes this version does not know.
    """

    user_id: UserId
    device_id: DeviceURN
    limit_type: UInt8
    limit_value: WireFloat = 0.0
    limit_value_string: WireStr | None = None

    @field_validator("limit_value", mode="before")
    @classmethod
    def _null_value_is_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @classmethod
    def create(
        cls,
        user_id: UserId,
        device_id: DeviceURN,
        limit_type: BiqDeviceLimitType,
        limit_value: float = 0.0,
        limit_value_string: str | None = None,
    ) -> Self:
        return cls(
            user_id=user_id,
            device_id=device_id,
            limit_type=int(limit_type),
            limit_value=limit_value,
            limit_value_string=limit_value_string,
        )

    @property
    def type(self) -> BiqDeviceLimitType | None:
        try:
            return BiqDeviceLimitType(self.limit_type)
        except ValueError:
            logger.debug(
                "Unknown limit type %d on device %s; leaving type unset",
                self.limit_type,
                self.device_id,
            )
            return None


def _as_tuple(items: Iterable[T] | None) -> tuple[T, ...] | None:
    return None if items is None else tuple(items)
