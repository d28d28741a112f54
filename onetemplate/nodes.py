"""Node definitions for the OpenNebula template model: pairs and vectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .errors import MultipleMatchesError, NotFoundError
from .utils import parse_int, to_template_value

VECTOR_INDENT = "    "


@dataclass(slots=True)
class Pair:
    """A ``KEY="value"`` leaf. The key is never changed after creation."""

    key: str
    value: str

    @classmethod
    def build(cls, key: str, value: Any) -> "Pair":
        return cls(key=key.upper(), value=to_template_value(key, value))

    def serialize(self) -> str:
        # no escaping of embedded quotes, the value is emitted verbatim
        return f'{self.key}="{self.value}"'

    def __str__(self) -> str:
        return self.serialize()


@dataclass(slots=True)
class Vector:
    """One instance of a repeatable block such as a DISK, a NIC or an AR."""

    key: str
    pairs: list[Pair] = field(default_factory=list)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __str__(self) -> str:
        return self.serialize()

    def serialize(self) -> str:
        body = ",\n".join(f"{VECTOR_INDENT}{pair.serialize()}" for pair in self.pairs)
        # only the vector key is upper-cased, pair keys keep their parsed case
        return f"{self.key.upper()}=[\n{body} ]"

    # Building ----------------------------------------------------------------
    def add_pair(self, key: str, value: Any) -> Pair:
        pair = Pair.build(key, value)
        self.pairs.append(pair)
        return pair

    def delete(self, key: str) -> None:
        self.pairs = [pair for pair in self.pairs if pair.key != key]

    # Lookup ------------------------------------------------------------------
    def exists(self, key: str) -> bool:
        return any(pair.key == key for pair in self.pairs)

    def get_pairs(self, key: str) -> list[Pair]:
        return [pair for pair in self.pairs if pair.key == key]

    def get_pair(self, key: str) -> Pair:
        pairs = self.get_pairs(key)
        if not pairs:
            raise NotFoundError(key, f"{self.key}: tag {key} not found")
        if len(pairs) > 1:
            raise MultipleMatchesError(key, len(pairs), f"{self.key}: multiple entries with key {key}")
        return pairs[0]

    def get_first(self, key: str) -> Pair:
        for pair in self.pairs:
            if pair.key == key:
                return pair
        raise NotFoundError(key, f"{self.key}: tag {key} not found")

    def get_str(self, key: str) -> str:
        return self.get_pair(key).value

    def get_int(self, key: str) -> int:
        return parse_int(key, self.get_str(key))

    def get_id(self, key: str) -> int:
        return parse_int(key, self.get_str(key), unsigned=True)

    def match_pair(self, key: str, value: str) -> bool:
        return any(pair.key == key and pair.value == value for pair in self.pairs)


TemplateElement = Pair | Vector


__all__ = ["Pair", "Vector", "TemplateElement", "VECTOR_INDENT"]
