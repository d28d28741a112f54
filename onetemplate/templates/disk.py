"""DISK vector of VM and virtual router templates."""

from enum import StrEnum

from .base import VectorTemplate


class DiskKey(StrEnum):
    DATASTORE = "DATASTORE"
    DATASTORE_ID = "DATASTORE_ID"
    DEV_PREFIX = "DEV_PREFIX"
    DISK_ID = "DISK_ID"
    DISK_TYPE = "DISK_TYPE"
    DRIVER = "DRIVER"
    IMAGE = "IMAGE"
    IMAGE_ID = "IMAGE_ID"
    IMAGE_UNAME = "IMAGE_UNAME"
    ORIGINAL_SIZE = "ORIGINAL_SIZE"
    SIZE = "SIZE"
    TARGET = "TARGET"
    TYPE = "TYPE"


class Disk(VectorTemplate):
    VECTOR_KEY = "DISK"
    ID_KEY = DiskKey.DISK_ID


__all__ = ["Disk", "DiskKey"]
