from __future__ import annotations

from typing import Optional

from ..entities import Image, ImagePool
from ..templates.image import ImageTemplate, ImageType
from .base import EntityController, LockMixin, OwnershipMixin, PoolController, serialize_template


class ImagesController(PoolController):
    RESOURCE = "imagepool"
    ENTITY_RESOURCE = "image"
    POOL = ImagePool
    ITEMS = "images"

    def create(self, name: str, image_type: ImageType, datastore_id: int, template: Optional[ImageTemplate]) -> int:
        if template is None:
            raise ValueError("Image create: nil template")
        template.set_name(name)
        template.set_type(image_type)
        return self.allocate(serialize_template(template, "Image create"), datastore_id)


class ImageController(OwnershipMixin, LockMixin, EntityController):
    RESOURCE = "image"
    ENTITY = Image

    def clone(self, name: str, datastore_id: int) -> int:
        return self.call("clone", self.id, name, datastore_id).body_int()

    def chtype(self, image_type: ImageType) -> None:
        self.call("chtype", self.id, str(image_type))

    def enable(self, enable: bool) -> None:
        self.call("enable", self.id, enable)

    def persistent(self, persistent: bool) -> None:
        self.call("persistent", self.id, persistent)

    def snapshot_delete(self, snapshot_id: int) -> None:
        self.call("snapshotdelete", self.id, snapshot_id)

    def snapshot_revert(self, snapshot_id: int) -> None:
        self.call("snapshotrevert", self.id, snapshot_id)

    def snapshot_flatten(self, snapshot_id: int) -> None:
        self.call("snapshotflatten", self.id, snapshot_id)


__all__ = ["ImagesController", "ImageController"]
