"""Shared pytest fixtures for biqschema tests."""

from __future__ import annotations

from uuid import UUID

import pytest

from biqschema.domain.entities import (
    BiqDevice,
    BiqDeviceAccessPermission,
    BiqDeviceGroupMembership,
    BiqObservation,
)
from biqschema.domain.flags import BiqDeviceFlag

OWNER_ID = UUID("6f1c2b9e-3a47-4d3f-9a0e-1f2b3c4d5e6f")
OTHER_USER_ID = UUID("0b7d9a52-8c1e-4e6a-b3f4-5a6b7c8d9e0f")
GROUP_ID = UUID("c2e8f7a1-9b3d-4c5e-8f6a-7b8c9d0e1f2a")
DEVICE_URN = "urn:biq:0001"


@pytest.fixture
def owner_id() -> UUID:
    return OWNER_ID


@pytest.fixture
def group_id() -> UUID:
    return GROUP_ID


@pytest.fixture
def observation() -> BiqObservation:
    """A fully populated telemetry sample."""
    return BiqObservation.create(
        id=42,
        device_id=DEVICE_URN,
        obstime=1_512_000_000_500.0,
        charging=1,
        firmware="1.2.3",
        battery=87.5,
        temp=21.25,
        light=300,
        humidity=45,
        accelx=-12,
        accely=3,
        accelz=1024,
    )


@pytest.fixture
def device() -> BiqDevice:
    """A device with every optional field set (expansions absent)."""
    return BiqDevice.create(
        DEVICE_URN,
        "Kitchen",
        owner_id=OWNER_ID,
        flags=BiqDeviceFlag.TEMPERATURE_CAPABLE | BiqDeviceFlag.LIGHT_CAPABLE,
        latitude=43.65,
        longitude=-79.38,
    )


@pytest.fixture
def expanded_device(device: BiqDevice) -> BiqDevice:
    """The same device as returned by an expanded read."""
    return device.with_expansions(
        group_memberships=[BiqDeviceGroupMembership.create(GROUP_ID, DEVICE_URN)],
        access_permissions=[BiqDeviceAccessPermission.create(OTHER_USER_ID, DEVICE_URN, flags=3)],
    )
