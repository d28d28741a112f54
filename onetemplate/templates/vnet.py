"""Virtual network templates and their address ranges.

Key reference: https://docs.opennebula.io/5.8/operation/references/vnet_template.html
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from ..document import DynamicTemplate
from ..formatter import DEFAULT_FORMATTER
from ..nodes import Pair, TemplateElement
from ..schema import KeyRule, TemplateSchema
from .base import TemplateView, VectorTemplate

VN_MAD = "VN_MAD"


class VirtualNetworkTemplateKey(StrEnum):
    NAME = "NAME"
    DESCRIPTION = "DESCRIPTION"

    # physical network
    VN_MAD = "VN_MAD"
    BRIDGE = "BRIDGE"
    VLAN_ID = "VLAN_ID"
    AUTOMATIC_VLAN_ID = "AUTOMATIC_VLAN_ID"
    PHYDEV = "PHYDEV"

    # quality of service
    INBOUND_AVG_BW = "INBOUND_AVG_BW"
    INBOUND_PEAK_BW = "INBOUND_PEAK_BW"
    INBOUND_PEAK_KB = "INBOUND_PEAK_KB"
    OUTBOUND_AVG_BW = "OUTBOUND_AVG_BW"
    OUTBOUND_PEAK_BW = "OUTBOUND_PEAK_BW"
    OUTBOUND_PEAK_KB = "OUTBOUND_PEAK_KB"

    # contextualization
    NETWORK_MASK = "NETWORK_MASK"
    NETWORK_ADDRESS = "NETWORK_ADDRESS"
    GATEWAY = "GATEWAY"
    GATEWAY6 = "GATEWAY6"
    DNS = "DNS"
    GUEST_MTU = "GUEST_MTU"
    CONTEXT_FORCE_IPV4 = "CONTEXT_FORCE_IPV4"
    SEARCH_DOMAIN = "SEARCH_DOMAIN"
    SECURITY_GROUPS = "SECURITY_GROUPS"

    # interface creation options
    CONF = "CONF"
    OVS_BRIDGE_CONF = "OVS_BRIDGE_CONF"
    IP_LINK_CONF = "IP_LINK_CONF"


class AddressRangeKey(StrEnum):
    AR_ID = "AR_ID"
    IP = "IP"
    SIZE = "SIZE"
    TYPE = "TYPE"
    MAC = "MAC"
    GLOBAL_PREFIX = "GLOBAL_PREFIX"
    ULA_PREFIX = "ULA_PREFIX"
    PREFIX_LENGTH = "PREFIX_LENGTH"


class AddressRange(VectorTemplate):
    VECTOR_KEY = "AR"
    ID_KEY = AddressRangeKey.AR_ID


class VirtualNetworkTemplate(TemplateView):
    SCHEMA = TemplateSchema.of(
        "VirtualNetworkTemplate",
        KeyRule(VN_MAD),
        KeyRule(AddressRange.VECTOR_KEY, kind="vector", repeatable=True),
    )

    def __init__(self, dynamic: Optional[DynamicTemplate] = None):
        super().__init__(dynamic)
        self.vn_mad = ""
        self.ars: list[AddressRange] = []

    def _bind(self, bound: dict[str, list]) -> None:
        for pair in bound[VN_MAD]:
            self.vn_mad = pair.value
        self.ars = [AddressRange(vector) for vector in bound[AddressRange.VECTOR_KEY]]

    def _bound_elements(self) -> list[TemplateElement]:
        elements: list[TemplateElement] = []
        if self.vn_mad:
            elements.append(Pair(key=VN_MAD, value=self.vn_mad))
        elements.extend(ar.vector for ar in self.ars)
        return elements

    def _unbind(self, key: str) -> None:
        if key == VN_MAD:
            self.vn_mad = ""
        elif key == AddressRange.VECTOR_KEY:
            self.ars = []

    def serialize(self) -> str:
        sections = []
        if self.vn_mad:
            sections.append(Pair(key=VN_MAD, value=self.vn_mad).serialize())
        sections.extend(ar.serialize() for ar in self.ars)
        sections.append(self.dynamic.serialize())
        return DEFAULT_FORMATTER.format_sections(sections)

    def set_vn_mad(self, value: str) -> None:
        self.vn_mad = value

    def add_ar(self, ar: AddressRange) -> None:
        self.ars.append(ar)


__all__ = ["VirtualNetworkTemplate", "VirtualNetworkTemplateKey", "AddressRange", "AddressRangeKey"]
