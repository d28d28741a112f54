"""Schema definitions for the statically bound part of typed templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal

from .errors import ParseError
from .nodes import Pair, TemplateElement, Vector

TemplateValueKind = Literal["pair", "vector"]


@dataclass(slots=True)
class KeyRule:
    """Schema rule describing how a statically bound key behaves."""

    name: str
    kind: TemplateValueKind = "pair"
    repeatable: bool = False


@dataclass(slots=True)
class TemplateSchema:
    """Keys a typed template binds to named fields.

    Elements whose key has no rule make up the dynamic remainder.
    """

    name: str
    rules: dict[str, KeyRule] = field(default_factory=dict)

    @classmethod
    def of(cls, name: str, *rules: KeyRule) -> "TemplateSchema":
        return cls(name=name, rules={rule.name: rule for rule in rules})

    def rule_for(self, key: str) -> "KeyRule | None":
        return self.rules.get(key)

    def split(self, elements: Iterable[TemplateElement]) -> tuple[dict[str, list[TemplateElement]], list[TemplateElement]]:
        """Separate bound elements, grouped by key, from the remainder.

        Each element lands on exactly one side, in document order.
        """
        bound: dict[str, list[TemplateElement]] = {name: [] for name in self.rules}
        remainder: list[TemplateElement] = []
        for element in elements:
            rule = self.rule_for(element.key)
            if rule is None:
                remainder.append(element)
                continue
            element = self._coerce(rule, element)
            if bound[rule.name] and not rule.repeatable:
                raise ParseError(f"{self.name}: {rule.name} must appear only once")
            bound[rule.name].append(element)
        return bound, remainder

    def _coerce(self, rule: KeyRule, element: TemplateElement) -> TemplateElement:
        match element:
            case Vector() if rule.kind == "pair":
                raise ParseError(f"{self.name}: {rule.name} must be a single value, got a vector")
            case Pair(value="") if rule.kind == "vector":
                # an empty vector cannot be told apart from an empty value
                return Vector(key=element.key)
            case Pair() if rule.kind == "vector":
                raise ParseError(f"{self.name}: {rule.name} must be a vector, got a value")
        return element


__all__ = ["KeyRule", "TemplateSchema", "TemplateValueKind"]
