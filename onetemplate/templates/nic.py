"""NIC vector, common to VM and virtual router templates."""

from enum import StrEnum

from .base import VectorTemplate


# https://docs.opennebula.io/5.8/operation/references/template.html#network-section
class NicKey(StrEnum):
    NIC_ID = "NIC_ID"
    AR_ID = "AR_ID"
    BRIDGE = "BRIDGE"
    BRIDGE_TYPE = "BRIDGE_TYPE"
    CLUSTER_ID = "CLUSTER_ID"
    FILTER = "FILTER"
    FLOATING_IP = "FLOATING_IP"
    GATEWAY = "GATEWAY"
    IP = "IP"
    MAC = "MAC"
    MTU = "MTU"
    NETWORK = "NETWORK"
    NETWORK_MASK = "NETWORK_MASK"
    NETWORK_ID = "NETWORK_ID"
    NETWORK_UID = "NETWORK_UID"
    NETWORK_UNAME = "NETWORK_UNAME"
    NETWORK_ADDRESS = "NETWORK_ADDRESS"
    PHYDEV = "PHYDEV"
    PUBLIC_IP = "PUBLIC_IP"
    SECURITY_GROUPS = "SECURITY_GROUPS"
    TARGET = "TARGET"
    VLAN_ID = "VLAN_ID"
    VN_MAD = "VN_MAD"


class NIC(VectorTemplate):
    VECTOR_KEY = "NIC"
    ID_KEY = NicKey.NIC_ID


__all__ = ["NIC", "NicKey"]
