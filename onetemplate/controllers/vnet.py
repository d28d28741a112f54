from __future__ import annotations

from typing import Optional

from ..entities import VirtualNetwork, VirtualNetworkPool
from ..templates.vnet import AddressRange, VirtualNetworkTemplate
from .base import EntityController, LockMixin, OwnershipMixin, PoolController, serialize_template


class VirtualNetworksController(PoolController):
    RESOURCE = "vnpool"
    ENTITY_RESOURCE = "vn"
    POOL = VirtualNetworkPool
    ITEMS = "virtual_networks"

    def create(self, template: Optional[VirtualNetworkTemplate], cluster_id: int = -1) -> int:
        return self.allocate(serialize_template(template, "VirtualNetwork create"), cluster_id)


class VirtualNetworkController(OwnershipMixin, LockMixin, EntityController):
    RESOURCE = "vn"
    ENTITY = VirtualNetwork

    def add_ar(self, address_range: AddressRange) -> None:
        self.call("add_ar", self.id, serialize_template(address_range, "VirtualNetwork add_ar"))

    def rm_ar(self, ar_id: int) -> None:
        self.call("rm_ar", self.id, ar_id)

    def update_ar(self, address_range: AddressRange) -> None:
        self.call("update_ar", self.id, serialize_template(address_range, "VirtualNetwork update_ar"))


__all__ = ["VirtualNetworksController", "VirtualNetworkController"]
