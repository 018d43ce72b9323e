"""Group management messages.

Partial updates: an absent optional field means "leave unchanged", which is
distinct from a present empty string.
"""

from __future__ import annotations

from biqschema.domain.ids import DeviceURN, Id
from biqschema.domain.wire import WireModel, WireStr


class CreateRequest(WireModel):
    name: WireStr


class DeleteRequest(WireModel):
    group_id: Id


class UpdateRequest(WireModel):
    """Rename a group. ``name=None`` leaves the name as it is."""

    group_id: Id
    name: WireStr | None = None


class ListDevicesRequest(WireModel):
    group_id: Id


class AddDeviceRequest(WireModel):
    group_id: Id
    device_id: DeviceURN
