"""Dynamic (schema-free) OpenNebula template document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .errors import MultipleMatchesError, NotFoundError
from .formatter import DEFAULT_FORMATTER, DEFAULT_XML_ROOT, XmlTemplateFormatter
from .lexer import LexerConfig, XmlInput
from .nodes import Pair, TemplateElement, Vector
from .parser import ParserConfig, parse_elements
from .utils import parse_int

NAME = "NAME"
DESCRIPTION = "DESCRIPTION"
TYPE = "TYPE"


@dataclass
class DynamicTemplate:
    """Ordered sequence of pairs and vectors.

    Several elements may share a key (DISK, NIC, SCHED_ACTION...), lookups scan
    the elements in order. Keys are compared as is: builder keys are upper case,
    parsed keys keep the case of the XML tag.
    """

    elements: list[TemplateElement] = field(default_factory=list)

    @classmethod
    def parse(
        cls,
        xml: XmlInput,
        lexer_config: Optional[LexerConfig] = None,
        parser_config: Optional[ParserConfig] = None,
    ) -> "DynamicTemplate":
        return cls(elements=parse_elements(xml, lexer_config=lexer_config, parser_config=parser_config))

    @classmethod
    def parse_element(cls, element: XmlInput) -> "DynamicTemplate":
        return cls.parse(element, lexer_config={"enable_logger": False}, parser_config={"enable_logger": False})

    def __iter__(self) -> Iterator[TemplateElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        return self.serialize()

    def serialize(self) -> str:
        return DEFAULT_FORMATTER.format_elements(self.elements)

    def to_xml(self, root: str = DEFAULT_XML_ROOT, pretty_print: bool = False) -> str:
        return XmlTemplateFormatter(root=root, pretty_print=pretty_print).format_elements(self.elements)

    def keys(self) -> list[str]:
        return [element.key for element in self.elements]

    # Building ----------------------------------------------------------------
    def add_vector(self, key: str) -> Vector:
        vector = Vector(key=key.upper())
        self.elements.append(vector)
        return vector

    def add_pair(self, key: str, value: Any) -> Pair:
        pair = Pair.build(key, value)
        self.elements.append(pair)
        return pair

    def append(self, element: TemplateElement) -> None:
        self.elements.append(element)

    def add_pair_to_vector(self, vector_key: str, key: str, value: Any) -> Pair:
        """Add a pair to the only ``vector_key`` vector, creating it when missing."""
        vectors = self.get_vectors(vector_key.upper())
        if len(vectors) > 1:
            raise MultipleMatchesError(
                vector_key, len(vectors), f"Can't add pair to vector: multiple entries with key {vector_key}"
            )
        vector = vectors[0] if vectors else self.add_vector(vector_key)
        return vector.add_pair(key, value)

    def delete(self, key: str) -> None:
        self.elements = [element for element in self.elements if element.key != key]

    def set_name(self, name: str) -> Pair:
        self.delete(NAME)
        return self.add_pair(NAME, name)

    def set_description(self, description: str) -> Pair:
        self.delete(DESCRIPTION)
        return self.add_pair(DESCRIPTION, description)

    # Lookup ------------------------------------------------------------------
    def exists(self, key: str) -> bool:
        return any(element.key == key for element in self.elements)

    def get_pairs(self, key: str) -> list[Pair]:
        pairs = []
        for element in self.elements:
            match element:
                case Pair(key=element_key) if element_key == key:
                    pairs.append(element)
        return pairs

    def get_vectors(self, key: str) -> list[Vector]:
        vectors = []
        for element in self.elements:
            match element:
                case Vector(key=element_key) if element_key == key:
                    vectors.append(element)
        return vectors

    def get_pair(self, key: str) -> Pair:
        return _unique(key, self.get_pairs(key))

    def get_vector(self, key: str) -> Vector:
        return _unique(key, self.get_vectors(key))

    def get_str(self, key: str) -> str:
        return self.get_pair(key).value

    def get_int(self, key: str) -> int:
        return parse_int(key, self.get_str(key))

    def get_id(self, key: str) -> int:
        return parse_int(key, self.get_str(key), unsigned=True)

    def get_str_from_vector(self, vector_key: str, key: str) -> str:
        return self.get_vector(vector_key).get_str(key)

    def match_pair(self, key: str, value: str) -> bool:
        """True if a pair, at top level or inside a vector, has this key and value."""
        for element in self.elements:
            match element:
                case Pair():
                    if element.key == key and element.value == value:
                        return True
                case Vector():
                    if element.match_pair(key, value):
                        return True
        return False


def _unique(key: str, matches: list[Any]) -> Any:
    if not matches:
        raise NotFoundError(key, f"Get: tag {key} not found")
    if len(matches) > 1:
        raise MultipleMatchesError(key, len(matches), f"Get: multiple entries with key {key}")
    return matches[0]


__all__ = ["DynamicTemplate", "NAME", "DESCRIPTION", "TYPE"]
