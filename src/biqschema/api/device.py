"""Device management and observation messages.

Some shapes serve more than one operation:
- ``GenericDeviceRequest`` is both ``RegisterRequest`` and ``LimitsRequest``.
- ``UpdateLimitsRequest`` is also ``DeviceLimitsResponse``: "set these limits"
  and "here are the current limits" share one shape, ``limits`` kept in order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Self
from uuid import UUID

from pydantic import BeforeValidator

from biqschema.domain.entities import BiqDevice, BiqObservation
from biqschema.domain.flags import BiqDeviceFlag, RawFlags
from biqschema.domain.ids import DeviceURN
from biqschema.domain.types import BiqDeviceLimitType, ObsInterval
from biqschema.domain.wire import WireFloat, WireInt, WireModel, WireStr, require_ordinal

__all__ = [
    "DeviceLimit",
    "DeviceLimitsResponse",
    "GenericDeviceRequest",
    "LimitsRequest",
    "ListDevicesResponseItem",
    "ObsInterval",
    "ObsRequest",
    "RegisterRequest",
    "ShareRequest",
    "ShareTokenRequest",
    "ShareTokenResponse",
    "UpdateLimitsRequest",
    "UpdateRequest",
]


class GenericDeviceRequest(WireModel):
    device_id: DeviceURN


RegisterRequest = GenericDeviceRequest
LimitsRequest = GenericDeviceRequest


class ShareRequest(WireModel):
    """Request to share someone else's device.

    Without a ``token`` the server applies its default sharing rule; with one,
    that specific share token is redeemed.
    """

    device_id: DeviceURN
    token: UUID | None = None


class ShareTokenRequest(WireModel):
    """Request for a token that lets others share this device."""

    device_id: DeviceURN


class ShareTokenResponse(WireModel):
    token: UUID


class UpdateRequest(WireModel):
    """Partial device update. Each absent field is left untouched."""

    device_id: DeviceURN
    name: WireStr | None = None
    flags: RawFlags | None = None

    @property
    def device_flags(self) -> BiqDeviceFlag | None:
        if self.flags is None:
            return None
        return BiqDeviceFlag(self.flags)


class DeviceLimit(WireModel):
    """One limit setting, standalone or inside a limits list.

    Unlike ``BiqDeviceLimit``, ``limit_type`` is decoded strictly here.
    """

    limit_type: Annotated[BiqDeviceLimitType, BeforeValidator(require_ordinal)]
    limit_value: WireFloat | None = None


class UpdateLimitsRequest(WireModel):
    device_id: DeviceURN
    limits: tuple[DeviceLimit, ...]


DeviceLimitsResponse = UpdateLimitsRequest


class ListDevicesResponseItem(WireModel):
    """One row of a device listing.

    ``last_observation``, ``share_count`` and ``limits`` are each filled in
    only when the producing operation chooses to; any of them may be absent.
    """

    device: BiqDevice
    last_observation: BiqObservation | None = None
    share_count: WireInt | None = None
    limits: tuple[DeviceLimit, ...] | None = None

    @classmethod
    def create(
        cls,
        device: BiqDevice,
        share_count: int,
        last_observation: BiqObservation | None,
        limits: Iterable[DeviceLimit],
    ) -> Self:
        return cls(
            device=device,
            share_count=share_count,
            last_observation=last_observation,
            limits=tuple(limits),
        )


class ObsRequest(WireModel):
    """Observations for one device over an interval (``ObsInterval``)."""

    device_id: DeviceURN
    interval: Annotated[ObsInterval, BeforeValidator(require_ordinal)]
