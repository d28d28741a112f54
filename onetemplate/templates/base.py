"""Shared plumbing of the typed template views.

A view owns one generic structure, a ``Vector`` for leaf entities (DISK, NIC,
AR...) or a ``DynamicTemplate`` for whole resource templates, and forwards the
key based accessors to it. Keys may be given as plain strings or as members of
the per-resource key enumerations.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from ..document import DynamicTemplate
from ..lexer import XmlInput
from ..nodes import Pair, TemplateElement, Vector
from ..parser import parse_elements
from ..schema import TemplateSchema


class VectorTemplate:
    VECTOR_KEY: ClassVar[str]
    ID_KEY: ClassVar[Optional[str]] = None

    def __init__(self, vector: Optional[Vector] = None):
        self.vector = vector if vector is not None else Vector(key=self.VECTOR_KEY)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.vector.pairs!r})"

    def __str__(self) -> str:
        return self.serialize()

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.vector == other.vector

    @property
    def key(self) -> str:
        return self.vector.key

    @property
    def pairs(self) -> list[Pair]:
        return self.vector.pairs

    @property
    def id(self) -> int:
        if self.ID_KEY is None:
            raise TypeError(f"{type(self).__name__} has no identifier key")
        return self.vector.get_id(self.ID_KEY)

    def serialize(self) -> str:
        return self.vector.serialize()

    def get(self, key: str) -> str:
        return self.vector.get_str(str(key))

    def get_id(self, key: str) -> int:
        return self.vector.get_id(str(key))

    def add(self, key: str, value: Any) -> Pair:
        return self.vector.add_pair(str(key), value)

    def delete(self, key: str) -> None:
        self.vector.delete(str(key))

    def exists(self, key: str) -> bool:
        return self.vector.exists(str(key))


class TemplateView:
    """Typed view over a resource template.

    ``SCHEMA`` lists the keys bound to named attributes; subclasses without
    bound keys keep every element in ``dynamic``.
    """

    SCHEMA: ClassVar[Optional[TemplateSchema]] = None

    def __init__(self, dynamic: Optional[DynamicTemplate] = None):
        self.dynamic = dynamic if dynamic is not None else DynamicTemplate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize()!r})"

    def __str__(self) -> str:
        return self.serialize()

    @classmethod
    def parse(cls, xml: XmlInput):
        elements = parse_elements(xml, lexer_config={"enable_logger": False}, parser_config={"enable_logger": False})
        if cls.SCHEMA is None:
            return cls(DynamicTemplate(elements))
        bound, remainder = cls.SCHEMA.split(elements)
        template = cls(DynamicTemplate(remainder))
        template._bind(bound)
        return template

    @classmethod
    def parse_element(cls, element: XmlInput):
        return cls.parse(element)

    def _bind(self, bound: dict[str, list]) -> None:
        pass

    def _bound_elements(self) -> list[TemplateElement]:
        """Elements held outside ``dynamic`` by the bound attributes, in serialization order."""
        return []

    def _unbind(self, key: str) -> None:
        pass

    def as_document(self) -> DynamicTemplate:
        """The whole template, bound parts first, as one document sharing this view's nodes."""
        return DynamicTemplate([*self._bound_elements(), *self.dynamic.elements])

    def serialize(self) -> str:
        return self.dynamic.serialize()

    def get(self, key: str) -> str:
        return self.as_document().get_str(str(key))

    def get_id(self, key: str) -> int:
        return self.as_document().get_id(str(key))

    def get_int(self, key: str) -> int:
        return self.as_document().get_int(str(key))

    def add(self, key: str, value: Any) -> Pair:
        return self.dynamic.add_pair(str(key), value)

    def delete(self, key: str) -> None:
        self._unbind(str(key))
        self.dynamic.delete(str(key))

    def exists(self, key: str) -> bool:
        return self.as_document().exists(str(key))

    def match_pair(self, key: str, value: str) -> bool:
        return self.as_document().match_pair(str(key), value)

    def set_name(self, name: str) -> Pair:
        return self.dynamic.set_name(name)

    def set_description(self, description: str) -> Pair:
        return self.dynamic.set_description(description)


__all__ = ["VectorTemplate", "TemplateView"]
