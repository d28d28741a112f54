"""Template of image resources."""

from enum import StrEnum

from ..document import TYPE
from ..nodes import Pair
from .base import TemplateView


class ImageTemplateKey(StrEnum):
    NAME = "NAME"
    DESCRIPTION = "DESCRIPTION"
    TYPE = "TYPE"
    PERSISTENT = "PERSISTENT"
    PERSISTENT_TYPE = "PERSISTENT_TYPE"
    SIZE = "SIZE"
    DEV_PREFIX = "DEV_PREFIX"
    TARGET = "TARGET"
    DRIVER = "DRIVER"
    PATH = "PATH"
    SOURCE = "SOURCE"
    DISK_TYPE = "DISK_TYPE"
    READONLY = "READONLY"
    MD5 = "MD5"
    SHA1 = "SHA1"


class ImageType(StrEnum):
    # virtual machine disks
    DATABLOCK = "DATABLOCK"
    CDROM = "CDROM"
    OS = "OS"

    # file types, only registered in file datastores
    KERNEL = "KERNEL"
    RAMDISK = "RAMDISK"
    CONTEXT = "CONTEXT"


class ImageTemplate(TemplateView):
    def set_type(self, image_type: ImageType) -> Pair:
        self.dynamic.delete(TYPE)
        return self.dynamic.add_pair(TYPE, str(image_type))


__all__ = ["ImageTemplate", "ImageTemplateKey", "ImageType"]
