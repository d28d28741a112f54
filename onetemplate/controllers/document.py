from __future__ import annotations

from typing import Any, Optional

from ..entities import Document, DocumentPool
from ..filters import Filter
from .base import (
    EntityController,
    LockMixin,
    OwnershipMixin,
    PoolController,
    find_unique,
    serialize_template,
)


class DocumentsController(PoolController):
    """Documents of one type (OneFlow services and service templates use their own types)."""

    RESOURCE = "documentpool"
    ENTITY_RESOURCE = "document"
    POOL = DocumentPool
    ITEMS = "documents"

    def __init__(self, transport, doc_type: int, enable_logger: bool = True):
        super().__init__(transport, enable_logger=enable_logger)
        self.doc_type = doc_type

    def info_args(self, filter: Optional[Filter]) -> list:
        return [*(filter or Filter()).to_args(), self.doc_type]

    def by_pair(self, key: str, value: str, filter: Optional[Filter] = None) -> int:
        """ID of the only document whose template holds ``key="value"``."""
        return find_unique(
            self.items(filter),
            lambda document: document.template.match_pair(key, value),
            f'template pair {key}="{value}"',
        ).id

    def create(self, template: Any) -> int:
        return self.allocate(serialize_template(template, "Document create"), self.doc_type)


class DocumentController(OwnershipMixin, LockMixin, EntityController):
    RESOURCE = "document"
    ENTITY = Document

    def clone(self, name: str) -> int:
        return self.call("clone", self.id, name).body_int()


__all__ = ["DocumentsController", "DocumentController"]
