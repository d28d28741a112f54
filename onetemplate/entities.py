"""Resources returned by the info calls, read from their XML bodies.

Each entity maps XML children onto pydantic fields: a field is read from the
child tag named by its alias (the upper-cased field name otherwise). ``A>B``
aliases collect every ``B`` below ``A`` into a list. Fields typed with another
entity are read recursively, fields typed with a template facade are parsed
with the template parser.
"""

from __future__ import annotations

import types
from enum import IntEnum
from typing import Any, Optional, Union, get_args, get_origin

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field

from .filters import LockLevel, VMState
from .lexer import XmlInput, load_xml
from .templates.document import DocumentTemplate
from .templates.image import ImageTemplate
from .templates.vdc import VdcTemplate
from .templates.vm import VMTemplate, VMUserTemplate
from .templates.vnet import VirtualNetworkTemplate

UNCHANGED = -1


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_entity(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, XmlEntity)


def _is_template(annotation: Any) -> bool:
    return isinstance(annotation, type) and hasattr(annotation, "parse_element")


def _read_child(child: etree._Element, annotation: Any) -> Any:
    if _is_entity(annotation):
        return annotation.from_element(child)
    if _is_template(annotation):
        return annotation.parse_element(child)
    return child.text


class XmlEntity(BaseModel):
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    @classmethod
    def from_element(cls, xml: XmlInput):
        element = load_xml(xml)
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            path = (field.alias or name.upper()).replace(">", "/")
            annotation = _unwrap_optional(field.annotation)
            if get_origin(annotation) is list:
                (item_type,) = get_args(annotation)
                values[name] = [_read_child(child, item_type) for child in element.findall(path)]
                continue
            child = element.find(path)
            if child is None:
                continue
            value = _read_child(child, annotation)
            if value is not None:
                values[name] = value
        return cls.model_validate(values)


class Permissions(XmlEntity):
    """Owner/group/other use, manage and admin bits. -1 leaves a bit unchanged on chmod."""

    owner_u: int = UNCHANGED
    owner_m: int = UNCHANGED
    owner_a: int = UNCHANGED
    group_u: int = UNCHANGED
    group_m: int = UNCHANGED
    group_a: int = UNCHANGED
    other_u: int = UNCHANGED
    other_m: int = UNCHANGED
    other_a: int = UNCHANGED

    def to_args(self, id: int) -> list[int]:
        return [
            id,
            self.owner_u,
            self.owner_m,
            self.owner_a,
            self.group_u,
            self.group_m,
            self.group_a,
            self.other_u,
            self.other_m,
            self.other_a,
        ]

    def __str__(self) -> str:
        bits = []
        for u, m, a in (
            (self.owner_u, self.owner_m, self.owner_a),
            (self.group_u, self.group_m, self.group_a),
            (self.other_u, self.other_m, self.other_a),
        ):
            bits.append(str((u == 1) << 2 | (m == 1) << 1 | (a == 1)))
        return "".join(bits)


class Lock(XmlEntity):
    locked: int = 0
    owner: int = -1
    time: int = 0
    req_id: int = -1

    @property
    def level(self) -> Optional[LockLevel]:
        return LockLevel(self.locked) if self.locked else None


class ImageState(IntEnum):
    INIT = 0
    READY = 1
    USED = 2
    DISABLED = 3
    LOCKED = 4
    ERROR = 5
    CLONE = 6
    DELETE = 7
    USED_PERS = 8
    LOCKED_USED = 9
    LOCKED_USED_PERS = 10


class Image(XmlEntity):
    id: int
    uid: int = -1
    gid: int = -1
    uname: str = ""
    gname: str = ""
    name: str = ""
    lock: Optional[Lock] = None
    permissions: Optional[Permissions] = None
    type: int = 0
    disk_type: int = 0
    persistent: int = 0
    regtime: int = 0
    source: str = ""
    path: str = ""
    fstype: str = ""
    size: int = 0
    state_raw: int = Field(default=0, alias="STATE")
    running_vms: int = 0
    cloning_ops: int = 0
    cloning_id: int = -1
    target_snapshot: int = -1
    datastore_id: int = -1
    datastore: str = ""
    vms: list[int] = Field(default_factory=list, alias="VMS>ID")
    clones: list[int] = Field(default_factory=list, alias="CLONES>ID")
    app_clones: list[int] = Field(default_factory=list, alias="APP_CLONES>ID")
    template: ImageTemplate = Field(default_factory=ImageTemplate)

    def state(self) -> ImageState:
        try:
            return ImageState(self.state_raw)
        except ValueError:
            raise ValueError(f"Image State: this state value is not currently handled: {self.state_raw}") from None

    def state_string(self) -> str:
        return self.state().name


class ImagePool(XmlEntity):
    images: list[Image] = Field(default_factory=list, alias="IMAGE")


class Document(XmlEntity):
    id: int
    uid: int = -1
    gid: int = -1
    uname: str = ""
    gname: str = ""
    name: str = ""
    type: str = ""
    permissions: Optional[Permissions] = None
    lock: Optional[Lock] = None
    template: DocumentTemplate = Field(default_factory=DocumentTemplate)


class DocumentPool(XmlEntity):
    documents: list[Document] = Field(default_factory=list, alias="DOCUMENT")


class VdcCluster(XmlEntity):
    zone_id: int
    cluster_id: int


class VdcHost(XmlEntity):
    zone_id: int
    host_id: int


class VdcDatastore(XmlEntity):
    zone_id: int
    datastore_id: int


class VdcVNet(XmlEntity):
    zone_id: int
    vnet_id: int


class Vdc(XmlEntity):
    id: int
    name: str = ""
    groups: list[int] = Field(default_factory=list, alias="GROUPS>ID")
    clusters: list[VdcCluster] = Field(default_factory=list, alias="CLUSTERS>CLUSTER")
    hosts: list[VdcHost] = Field(default_factory=list, alias="HOSTS>HOST")
    datastores: list[VdcDatastore] = Field(default_factory=list, alias="DATASTORES>DATASTORE")
    vnets: list[VdcVNet] = Field(default_factory=list, alias="VNETS>VNET")
    template: VdcTemplate = Field(default_factory=VdcTemplate)


class VdcPool(XmlEntity):
    vdcs: list[Vdc] = Field(default_factory=list, alias="VDC")


class VM(XmlEntity):
    id: int
    uid: int = -1
    gid: int = -1
    uname: str = ""
    gname: str = ""
    name: str = ""
    permissions: Optional[Permissions] = None
    last_poll: int = 0
    state_raw: int = Field(default=0, alias="STATE")
    lcm_state_raw: int = Field(default=0, alias="LCM_STATE")
    prev_state_raw: int = Field(default=0, alias="PREV_STATE")
    prev_lcm_state_raw: int = Field(default=0, alias="PREV_LCM_STATE")
    resched: int = 0
    stime: int = 0
    etime: int = 0
    deploy_id: str = ""
    lock: Optional[Lock] = None
    template: VMTemplate = Field(default_factory=VMTemplate)
    user_template: VMUserTemplate = Field(default_factory=VMUserTemplate)

    def state(self) -> VMState:
        try:
            return VMState(self.state_raw)
        except ValueError:
            raise ValueError(f"VM State: this state value is not currently handled: {self.state_raw}") from None

    def state_string(self) -> str:
        return self.state().name


class VMPool(XmlEntity):
    vms: list[VM] = Field(default_factory=list, alias="VM")


class Template(XmlEntity):
    id: int
    uid: int = -1
    gid: int = -1
    uname: str = ""
    gname: str = ""
    name: str = ""
    lock: Optional[Lock] = None
    permissions: Optional[Permissions] = None
    regtime: int = 0
    template: VMTemplate = Field(default_factory=VMTemplate)


class TemplatePool(XmlEntity):
    templates: list[Template] = Field(default_factory=list, alias="VMTEMPLATE")


class VirtualNetwork(XmlEntity):
    id: int
    uid: int = -1
    gid: int = -1
    uname: str = ""
    gname: str = ""
    name: str = ""
    permissions: Optional[Permissions] = None
    clusters: list[int] = Field(default_factory=list, alias="CLUSTERS>ID")
    bridge: str = ""
    bridge_type: str = ""
    parent_network_id: str = ""
    vn_mad: str = ""
    phydev: str = ""
    vlan_id: str = ""
    used_leases: int = 0
    vrouters: list[int] = Field(default_factory=list, alias="VROUTERS>ID")
    lock: Optional[Lock] = None
    template: VirtualNetworkTemplate = Field(default_factory=VirtualNetworkTemplate)


class VirtualNetworkPool(XmlEntity):
    virtual_networks: list[VirtualNetwork] = Field(default_factory=list, alias="VNET")


__all__ = [
    "XmlEntity",
    "Permissions",
    "Lock",
    "ImageState",
    "Image",
    "ImagePool",
    "Document",
    "DocumentPool",
    "VdcCluster",
    "VdcHost",
    "VdcDatastore",
    "VdcVNet",
    "Vdc",
    "VdcPool",
    "VM",
    "VMPool",
    "Template",
    "TemplatePool",
    "VirtualNetwork",
    "VirtualNetworkPool",
]
