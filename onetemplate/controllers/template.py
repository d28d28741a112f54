from __future__ import annotations

from typing import Any, Optional

from ..entities import Template, TemplatePool
from ..templates.vm import VMTemplate
from .base import EntityController, LockMixin, OwnershipMixin, PoolController, serialize_template


class TemplatesController(PoolController):
    RESOURCE = "templatepool"
    ENTITY_RESOURCE = "template"
    POOL = TemplatePool
    ITEMS = "templates"

    def create(self, template: Optional[VMTemplate]) -> int:
        return self.allocate(serialize_template(template, "Template create"))


class TemplateController(OwnershipMixin, LockMixin, EntityController):
    RESOURCE = "template"
    ENTITY = Template

    def clone(self, name: str, recursive: bool = False) -> int:
        return self.call("clone", self.id, name, recursive).body_int()

    def instantiate(self, name: str = "", pending: bool = False, extra: Any = "") -> int:
        """Create a VM from this template, ``extra`` is merged into it. Returns the VM ID."""
        extra_text = serialize_template(extra, "Template instantiate")
        return self.call("instantiate", self.id, name, pending, extra_text).body_int()


__all__ = ["TemplatesController", "TemplateController"]
