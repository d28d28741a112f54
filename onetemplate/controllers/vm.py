from __future__ import annotations

from typing import Any, Optional

from ..entities import VM, VMPool
from ..filters import Filter, VMFilter
from ..templates.vm import VMTemplate
from .base import EntityController, LockMixin, OwnershipMixin, PoolController, serialize_template


class VMsController(PoolController):
    RESOURCE = "vmpool"
    ENTITY_RESOURCE = "vm"
    POOL = VMPool
    ITEMS = "vms"

    def info_args(self, filter: Optional[Filter]) -> list:
        # VMFilter and VMExtendedFilter append the state and the pair filter
        return (filter or VMFilter()).to_args()

    def create(self, template: Optional[VMTemplate], pending: bool = False) -> int:
        """Allocate a VM, held in PENDING (not scheduled) when ``pending`` is set."""
        return self.allocate(serialize_template(template, "VM create"), pending)


class VMController(OwnershipMixin, LockMixin, EntityController):
    RESOURCE = "vm"
    ENTITY = VM

    def delete(self) -> None:
        self.action("terminate-hard")

    def action(self, action: str) -> None:
        self.call("action", action, self.id)

    def terminate(self, hard: bool = False) -> None:
        self.action("terminate-hard" if hard else "terminate")

    def hold(self) -> None:
        self.action("hold")

    def release(self) -> None:
        self.action("release")

    def stop(self) -> None:
        self.action("stop")

    def suspend(self) -> None:
        self.action("suspend")

    def resume(self) -> None:
        self.action("resume")

    def poweroff(self, hard: bool = False) -> None:
        self.action("poweroff-hard" if hard else "poweroff")

    def reboot(self, hard: bool = False) -> None:
        self.action("reboot-hard" if hard else "reboot")

    def deploy(self, host_id: int, enforce: bool = False, datastore_id: int = -1) -> None:
        self.call("deploy", self.id, host_id, enforce, datastore_id)

    def resize(self, template: Any, enforce: bool = False) -> None:
        """Change the capacity; ``template`` holds CPU, VCPU and MEMORY."""
        self.call("resize", self.id, serialize_template(template, "VM resize"), enforce)


__all__ = ["VMsController", "VMController"]
