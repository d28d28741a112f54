from __future__ import annotations

from typing import Optional

from ..entities import Vdc, VdcPool
from ..filters import Filter
from ..templates.vdc import VdcTemplate
from .base import EntityController, PoolController, serialize_template


class VdcsController(PoolController):
    RESOURCE = "vdcpool"
    ENTITY_RESOURCE = "vdc"
    POOL = VdcPool
    ITEMS = "vdcs"

    def info_args(self, filter: Optional[Filter]) -> list:
        # the vdc pool is not filtered
        return []

    def create(self, name: str, template: Optional[VdcTemplate], cluster_id: int = -1) -> int:
        """Allocate a VDC; a cluster ID of -1 adds it to no cluster."""
        if template is None:
            raise ValueError("Vdc create: nil template")
        template.set_name(name)
        return self.allocate(serialize_template(template, "Vdc create"), cluster_id)


class VdcController(EntityController):
    RESOURCE = "vdc"
    ENTITY = Vdc

    def add_group(self, group_id: int) -> None:
        self.call("addgroup", self.id, group_id)

    def del_group(self, group_id: int) -> None:
        self.call("delgroup", self.id, group_id)

    def add_cluster(self, zone_id: int, cluster_id: int) -> None:
        self.call("addcluster", self.id, zone_id, cluster_id)

    def del_cluster(self, zone_id: int, cluster_id: int) -> None:
        self.call("delcluster", self.id, zone_id, cluster_id)

    def add_host(self, zone_id: int, host_id: int) -> None:
        self.call("addhost", self.id, zone_id, host_id)

    def del_host(self, zone_id: int, host_id: int) -> None:
        self.call("delhost", self.id, zone_id, host_id)

    def add_datastore(self, zone_id: int, datastore_id: int) -> None:
        self.call("adddatastore", self.id, zone_id, datastore_id)

    def del_datastore(self, zone_id: int, datastore_id: int) -> None:
        self.call("deldatastore", self.id, zone_id, datastore_id)

    def add_vnet(self, zone_id: int, vnet_id: int) -> None:
        self.call("addvnet", self.id, zone_id, vnet_id)

    def del_vnet(self, zone_id: int, vnet_id: int) -> None:
        self.call("delvnet", self.id, zone_id, vnet_id)


__all__ = ["VdcsController", "VdcController"]
