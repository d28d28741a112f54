"""Shared plumbing of the resource controllers.

A pool controller lists one resource type, an entity controller acts on one
resource by ID. Every call is ``one.<resource>.<op>`` with the controller's
arguments, sent through the transport given to the ``Controller``.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Iterable, Optional, TypeVar

from ..client import Response, Transport
from ..entities import Permissions, XmlEntity
from ..errors import MultipleMatchesError, NotFoundError
from ..filters import Filter, LockLevel, UpdateType
from ..logger import get_logger

E = TypeVar("E")


def find_unique(items: Iterable[E], predicate: Callable[[E], bool], what: str) -> E:
    """The only item matching ``predicate``; ``what`` names the lookup in errors."""
    matches = [item for item in items if predicate(item)]
    if not matches:
        raise NotFoundError(what, f"resource not found: {what}")
    if len(matches) > 1:
        raise MultipleMatchesError(what, len(matches), f"multiple resources with {what}")
    return matches[0]


def serialize_template(template: Any, operation: str) -> str:
    if template is None:
        raise ValueError(f"{operation}: nil template")
    if isinstance(template, str):
        return template
    return template.serialize()


class BaseController:
    RESOURCE: ClassVar[str]

    def __init__(self, transport: Transport, enable_logger: bool = True):
        self.transport = transport
        self.logger = get_logger("onetemplate.controller", is_enabled=enable_logger)

    def method(self, operation: str) -> str:
        return f"one.{self.RESOURCE}.{operation}"

    def call(self, operation: str, *args: Any) -> Response:
        method = self.method(operation)
        self.logger.info(f"{method}{args!r}")
        return self.transport.call(method, *args)


class PoolController(BaseController):
    """Listing of one resource type."""

    POOL: ClassVar[type[XmlEntity]]
    ITEMS: ClassVar[str]
    ENTITY_RESOURCE: ClassVar[str]

    def allocate(self, *args: Any) -> int:
        """Create a resource, returning its new ID."""
        method = f"one.{self.ENTITY_RESOURCE}.allocate"
        self.logger.info(f"Allocating with {method}")
        return self.transport.call(method, *args).body_int()

    def info_args(self, filter: Optional[Filter]) -> list:
        return (filter or Filter()).to_args()

    def info(self, filter: Optional[Filter] = None):
        response = self.call("info", *self.info_args(filter))
        return self.POOL.from_element(response.body_str())

    def items(self, filter: Optional[Filter] = None) -> list:
        return getattr(self.info(filter), self.ITEMS)

    def by_name(self, name: str, filter: Optional[Filter] = None) -> int:
        """ID of the only resource called ``name`` in the pool."""
        return find_unique(self.items(filter), lambda item: item.name == name, f"name {name}").id


class EntityController(BaseController):
    ENTITY: ClassVar[type[XmlEntity]]

    def __init__(self, transport: Transport, id: int, enable_logger: bool = True):
        super().__init__(transport, enable_logger=enable_logger)
        self.id = id

    def info(self):
        response = self.call("info", self.id)
        return self.ENTITY.from_element(response.body_str())

    def delete(self) -> None:
        self.call("delete", self.id)

    def update(self, template: Any, update_type: UpdateType = UpdateType.REPLACE) -> None:
        """Replace (or merge into) the resource template."""
        text = serialize_template(template, f"{type(self).__name__} update")
        self.call("update", self.id, text, int(update_type))

    def rename(self, new_name: str) -> None:
        self.call("rename", self.id, new_name)


class OwnershipMixin:
    def chmod(self, permissions: Permissions) -> None:
        self.call("chmod", *permissions.to_args(self.id))

    def chown(self, uid: int = -1, gid: int = -1) -> None:
        """Change owner and group, -1 keeps the current one."""
        self.call("chown", self.id, uid, gid)


class LockMixin:
    def lock(self, level: LockLevel) -> None:
        self.call("lock", self.id, int(level))

    def unlock(self) -> None:
        self.call("unlock", self.id)


__all__ = [
    "BaseController",
    "PoolController",
    "EntityController",
    "OwnershipMixin",
    "LockMixin",
    "find_unique",
    "serialize_template",
]
