"""VM templates.

Available template parts and keys are listed in
https://docs.opennebula.io/5.8/operation/references/template.html. vCenter,
public cloud, hypervisor and user inputs sections are only reachable through
the generic accessors.
"""

from __future__ import annotations

import base64
from enum import StrEnum
from typing import Iterable, Optional

from ..document import DynamicTemplate
from ..errors import AlreadySetError, NotFoundError, TypeMismatchError
from ..formatter import DEFAULT_FORMATTER
from ..nodes import Pair, TemplateElement
from ..schema import KeyRule, TemplateSchema
from .base import TemplateView, VectorTemplate
from .disk import Disk
from .nic import NIC

CONTEXT_VECTOR = "CONTEXT"
CPU_MODEL_VECTOR = "CPU_MODEL"
FEATURES_VECTOR = "FEATURES"
GRAPHICS_VECTOR = "GRAPHICS"
INPUT_VECTOR = "INPUT"
OS_VECTOR = "OS"
SCHED_ACTION_VECTOR = "SCHED_ACTION"


class VMCapacityKey(StrEnum):
    CPU = "CPU"
    MEMORY = "MEMORY"
    VCPU = "VCPU"


class VMShowbackKey(StrEnum):
    MEMORY_COST = "MEMORY_COST"
    CPU_COST = "CPU_COST"
    DISK_COST = "DISK_COST"


class VMOSKey(StrEnum):
    ARCH = "ARCH"
    MACHINE = "MACHINE"
    KERNEL = "KERNEL"
    KERNEL_DS = "KERNEL_DS"
    INITRD = "INITRD"
    INITRD_DS = "INITRD_DS"
    ROOT = "ROOT"
    KERNEL_CMD = "KERNEL_CMD"
    BOOTLOADER = "BOOTLOADER"
    BOOT = "BOOT"


class VMCPUModelKey(StrEnum):
    MODEL = "MODEL"


class VMFeatureKey(StrEnum):
    PAE = "PAE"
    ACPI = "ACPI"
    APIC = "APIC"
    LOCAL_TIME = "LOCAL_TIME"
    GUEST_AGENT = "GUEST_AGENT"
    VIRTIO_SCSI_QUEUES = "VIRTIO_SCSI_QUEUES"


class VMIOGraphicsKey(StrEnum):
    TYPE = "TYPE"  # vnc, sdl, spice
    LISTEN = "LISTEN"
    PORT = "PORT"
    PASSWD = "PASSWD"
    KEYMAP = "KEYMAP"
    RANDOM_PASSWD = "RANDOM_PASSWD"


class VMIOInputKey(StrEnum):
    TYPE = "TYPE"  # mouse or tablet
    BUS = "BUS"  # usb or ps2


class VMContextKey(StrEnum):
    DNS = "DNS"
    DNS_HOSTNAME = "DNS_HOSTNAME"
    EC2_PUBLIC_KEY = "EC2_PUBLIC_KEY"
    FILES = "FILES"
    FILES_DS = "FILES_DS"
    GATEWAY_IFACE = "GATEWAY_IFACE"
    NETWORK = "NETWORK"
    INIT_SCRIPTS = "INIT_SCRIPTS"
    SSH_PUBLIC_KEY = "SSH_PUBLIC_KEY"
    TARGET = "TARGET"
    TOKEN = "TOKEN"
    USERNAME = "USERNAME"
    VARIABLE = "VARIABLE"
    SECURETTY = "SECURETTY"
    SET_HOSTNAME = "SET_HOSTNAME"
    # ETHx_* keys are not mapped


class VMContextB64Key(StrEnum):
    PASSWORD_BASE64 = "PASSWORD_BASE64"
    START_SCRIPT_BASE64 = "START_SCRIPT_BASE64"
    CRYPTED_PASSWORD_BASE64 = "CRYPTED_PASSWORD_BASE64"


class VMPlacementKey(StrEnum):
    SCHED_REQUIREMENTS = "SCHED_REQUIREMENTS"
    SCHED_RANK = "SCHED_RANK"
    SCHED_DS_REQUIREMENTS = "SCHED_DS_REQUIREMENTS"
    SCHED_DS_RANK = "SCHED_DS_RANK"
    USER_PRIORITY = "USER_PRIORITY"


class VMSchedActionKey(StrEnum):
    TIME = "TIME"
    REPEAT = "REPEAT"
    DAYS = "DAYS"
    ACTION = "ACTION"
    END_TYPE = "END_TYPE"
    END_VALUE = "END_VALUE"


class VMContext(VectorTemplate):
    VECTOR_KEY = CONTEXT_VECTOR

    def add_b64(self, key: VMContextB64Key, value: str) -> Pair:
        encoded = base64.b64encode(value.encode("utf-8")).decode("ascii")
        return self.add(key, encoded)


class SchedAction(VectorTemplate):
    VECTOR_KEY = SCHED_ACTION_VECTOR
    ID_KEY = "ID"


def _format_cpu(cpu: float) -> str:
    return ("{:.6f}".format(cpu)).rstrip("0").rstrip(".")


class VMTemplate(TemplateView):
    """VM template made of a capacity part, a context, disks, NICs, scheduled
    actions and the dynamic remainder, serialized in that order."""

    SCHEMA = TemplateSchema.of(
        "VMTemplate",
        KeyRule(VMCapacityKey.CPU),
        KeyRule(VMCapacityKey.MEMORY),
        KeyRule(VMCapacityKey.VCPU),
        KeyRule(CONTEXT_VECTOR, kind="vector"),
        KeyRule(Disk.VECTOR_KEY, kind="vector", repeatable=True),
        KeyRule(NIC.VECTOR_KEY, kind="vector", repeatable=True),
        KeyRule(SCHED_ACTION_VECTOR, kind="vector", repeatable=True),
    )

    def __init__(self, dynamic: Optional[DynamicTemplate] = None):
        super().__init__(dynamic)
        self.capacity = DynamicTemplate()
        self.context = VMContext()
        self.disks: list[Disk] = []
        self.nics: list[NIC] = []
        self.sched_actions: list[SchedAction] = []

    def _bind(self, bound: dict[str, list]) -> None:
        for key in VMCapacityKey:
            for pair in bound[key]:
                self.capacity.append(pair)
        for vector in bound[CONTEXT_VECTOR]:
            self.context = VMContext(vector)
        self.disks = [Disk(vector) for vector in bound[Disk.VECTOR_KEY]]
        self.nics = [NIC(vector) for vector in bound[NIC.VECTOR_KEY]]
        self.sched_actions = [SchedAction(vector) for vector in bound[SCHED_ACTION_VECTOR]]

    def _bound_elements(self) -> list[TemplateElement]:
        elements: list[TemplateElement] = list(self.capacity)
        if len(self.context.vector):
            elements.append(self.context.vector)
        for part in [*self.disks, *self.nics, *self.sched_actions]:
            elements.append(part.vector)
        return elements

    def _unbind(self, key: str) -> None:
        match key:
            case VMCapacityKey.CPU | VMCapacityKey.MEMORY | VMCapacityKey.VCPU:
                self.capacity.delete(key)
            case "CONTEXT":
                self.context = VMContext()
            case "DISK":
                self.disks = []
            case "NIC":
                self.nics = []
            case "SCHED_ACTION":
                self.sched_actions = []

    def serialize(self) -> str:
        sections: list[str] = [self.capacity.serialize()]
        if len(self.context.vector):
            sections.append(self.context.serialize())
        sections.extend(disk.serialize() for disk in self.disks)
        sections.extend(nic.serialize() for nic in self.nics)
        sections.extend(action.serialize() for action in self.sched_actions)
        sections.append(self.dynamic.serialize())
        return DEFAULT_FORMATTER.format_sections(sections)

    def _ensure_unset(self, keys: Iterable[str], group: str) -> None:
        for key in keys:
            if self.capacity.exists(key) or self.dynamic.exists(key):
                raise AlreadySetError(key, group)

    # Capacity ----------------------------------------------------------------
    def set_capacity(self, cpu: float, vcpu: int, memory: int) -> None:
        """Set CPU, VCPU and MEMORY. Fails if any of them is already present."""
        self._ensure_unset(VMCapacityKey, "VMTemplate.set_capacity")
        self.capacity.add_pair(VMCapacityKey.CPU, _format_cpu(cpu))
        self.capacity.add_pair(VMCapacityKey.MEMORY, memory)
        self.capacity.add_pair(VMCapacityKey.VCPU, vcpu)

    def get_capacity(self) -> tuple[float, int, int]:
        """Return ``(cpu, vcpu, memory)``. VCPU defaults to 1 when not defined."""
        cpu = self._capacity_value(VMCapacityKey.CPU)
        try:
            cpu_value = float(cpu) if cpu is not None else 0.0
        except ValueError as e:
            raise TypeMismatchError(f"value {cpu!r} of key CPU is not a number", key="CPU", value=cpu) from e
        vcpu = self._capacity_value(VMCapacityKey.VCPU)
        memory = self._capacity_value(VMCapacityKey.MEMORY)
        vcpu_value = self.capacity.get_id(VMCapacityKey.VCPU) if vcpu is not None else 1
        memory_value = self.capacity.get_id(VMCapacityKey.MEMORY) if memory is not None else 0
        return cpu_value, vcpu_value, memory_value

    def _capacity_value(self, key: str) -> Optional[str]:
        try:
            return self.capacity.get_str(key)
        except NotFoundError:
            return None

    # Disks, NICs and scheduled actions ---------------------------------------
    def add_disk(self, disk: Disk) -> None:
        self.disks.append(disk)

    def add_nic(self, nic: NIC) -> None:
        self.nics.append(nic)

    def new_sched_action(self) -> SchedAction:
        return SchedAction()

    def add_sched_action(self, action: SchedAction) -> None:
        self.sched_actions.append(action)

    # Showback ----------------------------------------------------------------
    def set_showback(self, key: VMShowbackKey, value: str) -> Pair:
        self._ensure_unset([key], "VMTemplate.set_showback")
        return self.dynamic.add_pair(key, value)

    def get_showback(self, key: VMShowbackKey) -> str:
        return self.dynamic.get_str(key)

    # Placement ---------------------------------------------------------------
    def set_placement(self, key: VMPlacementKey, value: str) -> Pair:
        self._ensure_unset([key], "VMTemplate.set_placement")
        return self.dynamic.add_pair(key, value)

    def get_placement(self, key: VMPlacementKey) -> str:
        return self.dynamic.get_str(key)

    # Vector parts ------------------------------------------------------------
    def add_os(self, key: VMOSKey, value: str) -> Pair:
        return self.dynamic.add_pair_to_vector(OS_VECTOR, key, value)

    def get_os(self, key: VMOSKey) -> str:
        return self.dynamic.get_str_from_vector(OS_VECTOR, key)

    def add_cpu_model(self, value: str) -> Pair:
        return self.dynamic.add_pair_to_vector(CPU_MODEL_VECTOR, VMCPUModelKey.MODEL, value)

    def get_cpu_model(self, key: VMCPUModelKey = VMCPUModelKey.MODEL) -> str:
        return self.dynamic.get_str_from_vector(CPU_MODEL_VECTOR, key)

    def add_feature(self, key: VMFeatureKey, value: str) -> Pair:
        return self.dynamic.add_pair_to_vector(FEATURES_VECTOR, key, value)

    def get_feature(self, key: VMFeatureKey) -> str:
        return self.dynamic.get_str_from_vector(FEATURES_VECTOR, key)

    def add_io_graphic(self, key: VMIOGraphicsKey, value: str) -> Pair:
        return self.dynamic.add_pair_to_vector(GRAPHICS_VECTOR, key, value)

    def get_io_graphic(self, key: VMIOGraphicsKey) -> str:
        return self.dynamic.get_str_from_vector(GRAPHICS_VECTOR, key)

    def add_io_input(self, key: VMIOInputKey, value: str) -> Pair:
        return self.dynamic.add_pair_to_vector(INPUT_VECTOR, key, value)

    def get_io_input(self, key: VMIOInputKey) -> str:
        return self.dynamic.get_str_from_vector(INPUT_VECTOR, key)

    # Context -----------------------------------------------------------------
    def add_ctx(self, key: VMContextKey, value: str) -> Pair:
        return self.context.add(key, value)

    def add_b64_ctx(self, key: VMContextB64Key, value: str) -> Pair:
        return self.context.add_b64(key, value)

    def get_ctx(self, key: VMContextKey) -> str:
        return self.context.get(key)


class VMUserTemplate(TemplateView):
    """User template of a VM: scheduler messages plus custom attributes."""

    SCHEMA = TemplateSchema.of("VMUserTemplate", KeyRule("ERROR"), KeyRule("SCHED_MESSAGE"))

    def __init__(self, dynamic: Optional[DynamicTemplate] = None):
        super().__init__(dynamic)
        self.error = ""
        self.sched_message = ""

    def _bind(self, bound: dict[str, list]) -> None:
        for pair in bound["ERROR"]:
            self.error = pair.value
        for pair in bound["SCHED_MESSAGE"]:
            self.sched_message = pair.value

    def _bound_elements(self) -> list[TemplateElement]:
        elements: list[TemplateElement] = []
        if self.error:
            elements.append(Pair(key="ERROR", value=self.error))
        if self.sched_message:
            elements.append(Pair(key="SCHED_MESSAGE", value=self.sched_message))
        return elements

    def _unbind(self, key: str) -> None:
        if key == "ERROR":
            self.error = ""
        elif key == "SCHED_MESSAGE":
            self.sched_message = ""

    def serialize(self) -> str:
        sections = []
        if self.error:
            sections.append(Pair(key="ERROR", value=self.error).serialize())
        if self.sched_message:
            sections.append(Pair(key="SCHED_MESSAGE", value=self.sched_message).serialize())
        sections.append(self.dynamic.serialize())
        return DEFAULT_FORMATTER.format_sections(sections)


__all__ = [
    "VMTemplate",
    "VMUserTemplate",
    "VMContext",
    "SchedAction",
    "VMCapacityKey",
    "VMShowbackKey",
    "VMOSKey",
    "VMCPUModelKey",
    "VMFeatureKey",
    "VMIOGraphicsKey",
    "VMIOInputKey",
    "VMContextKey",
    "VMContextB64Key",
    "VMPlacementKey",
    "VMSchedActionKey",
]
