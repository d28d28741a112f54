"""Typed views over the generic template model, one module per resource."""

from .base import TemplateView, VectorTemplate
from .disk import Disk, DiskKey
from .nic import NIC, NicKey
from .image import ImageTemplate, ImageTemplateKey, ImageType
from .vm import (
    SchedAction,
    VMCapacityKey,
    VMContext,
    VMContextB64Key,
    VMContextKey,
    VMCPUModelKey,
    VMFeatureKey,
    VMIOGraphicsKey,
    VMIOInputKey,
    VMOSKey,
    VMPlacementKey,
    VMSchedActionKey,
    VMShowbackKey,
    VMTemplate,
    VMUserTemplate,
)
from .vnet import AddressRange, AddressRangeKey, VirtualNetworkTemplate, VirtualNetworkTemplateKey
from .vdc import VdcTemplate, VdcTemplateKey
from .document import DocumentTemplate, DocumentTemplateKey

__all__ = [
    "TemplateView",
    "VectorTemplate",
    "Disk",
    "DiskKey",
    "NIC",
    "NicKey",
    "ImageTemplate",
    "ImageTemplateKey",
    "ImageType",
    "SchedAction",
    "VMCapacityKey",
    "VMContext",
    "VMContextB64Key",
    "VMContextKey",
    "VMCPUModelKey",
    "VMFeatureKey",
    "VMIOGraphicsKey",
    "VMIOInputKey",
    "VMOSKey",
    "VMPlacementKey",
    "VMSchedActionKey",
    "VMShowbackKey",
    "VMTemplate",
    "VMUserTemplate",
    "AddressRange",
    "AddressRangeKey",
    "VirtualNetworkTemplate",
    "VirtualNetworkTemplateKey",
    "VdcTemplate",
    "VdcTemplateKey",
    "DocumentTemplate",
    "DocumentTemplateKey",
]
