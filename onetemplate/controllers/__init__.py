"""Remote operations on OpenNebula resources."""

from __future__ import annotations

from ..client import Transport, XmlRpcTransport, ClientConfig
from .base import EntityController, PoolController, find_unique
from .document import DocumentController, DocumentsController
from .image import ImageController, ImagesController
from .template import TemplateController, TemplatesController
from .vdc import VdcController, VdcsController
from .vm import VMController, VMsController
from .vnet import VirtualNetworkController, VirtualNetworksController


class Controller:
    """Entry point handing out pool and entity controllers bound to one transport."""

    def __init__(self, transport: Transport, enable_logger: bool = True):
        self.transport = transport
        self.enable_logger = enable_logger

    @classmethod
    def from_config(cls, config: ClientConfig | None = None) -> "Controller":
        return cls(XmlRpcTransport(config), enable_logger=(config or {}).get("enable_logger", True))

    def images(self) -> ImagesController:
        return ImagesController(self.transport, enable_logger=self.enable_logger)

    def image(self, id: int) -> ImageController:
        return ImageController(self.transport, id, enable_logger=self.enable_logger)

    def documents(self, doc_type: int) -> DocumentsController:
        return DocumentsController(self.transport, doc_type, enable_logger=self.enable_logger)

    def document(self, id: int) -> DocumentController:
        return DocumentController(self.transport, id, enable_logger=self.enable_logger)

    def vdcs(self) -> VdcsController:
        return VdcsController(self.transport, enable_logger=self.enable_logger)

    def vdc(self, id: int) -> VdcController:
        return VdcController(self.transport, id, enable_logger=self.enable_logger)

    def vms(self) -> VMsController:
        return VMsController(self.transport, enable_logger=self.enable_logger)

    def vm(self, id: int) -> VMController:
        return VMController(self.transport, id, enable_logger=self.enable_logger)

    def templates(self) -> TemplatesController:
        return TemplatesController(self.transport, enable_logger=self.enable_logger)

    def template(self, id: int) -> TemplateController:
        return TemplateController(self.transport, id, enable_logger=self.enable_logger)

    def virtual_networks(self) -> VirtualNetworksController:
        return VirtualNetworksController(self.transport, enable_logger=self.enable_logger)

    def virtual_network(self, id: int) -> VirtualNetworkController:
        return VirtualNetworkController(self.transport, id, enable_logger=self.enable_logger)


__all__ = [
    "Controller",
    "PoolController",
    "EntityController",
    "find_unique",
    "DocumentController",
    "DocumentsController",
    "ImageController",
    "ImagesController",
    "TemplateController",
    "TemplatesController",
    "VdcController",
    "VdcsController",
    "VMController",
    "VMsController",
    "VirtualNetworkController",
    "VirtualNetworksController",
]
