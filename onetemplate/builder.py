"""Builders that convert plain Python mappings into template documents."""

from __future__ import annotations

from typing import Any, Mapping

from .document import DynamicTemplate
from .errors import TypeMismatchError
from .nodes import Vector


class TemplateBuilder:
    """Build a ``DynamicTemplate`` from a mapping.

    Scalars become pairs, a mapping becomes one vector, a list of mappings
    becomes repeated vectors and a list of scalars becomes repeated pairs::

        TemplateBuilder().build({"NAME": "vm", "DISK": [{"IMAGE_ID": 119}]})
    """

    def build(self, tree: Mapping[str, Any]) -> DynamicTemplate:
        if not isinstance(tree, Mapping):
            raise TypeError("Template tree must be a mapping")
        template = DynamicTemplate()
        for key, value in tree.items():
            self._convert_entry(template, key, value)
        return template

    def _convert_entry(self, template: DynamicTemplate, key: str, value: Any) -> None:
        if isinstance(value, Mapping):
            template.append(self._convert_vector(key, value))
            return
        if isinstance(value, list):
            for item in value:
                if isinstance(item, list):
                    raise TypeMismatchError(f"AddPair: nested list for key {key}", key=key, value=value)
                self._convert_entry(template, key, item)
            return
        template.add_pair(key, value)

    def _convert_vector(self, key: str, obj: Mapping[str, Any]) -> Vector:
        vector = Vector(key=key.upper())
        for pair_key, value in obj.items():
            values = value if isinstance(value, list) else [value]
            for item in values:
                if isinstance(item, (Mapping, list)):
                    raise TypeMismatchError(
                        f"{vector.key}: vectors only hold values, got {type(item).__name__} for key {pair_key}",
                        key=pair_key,
                        value=item,
                    )
                vector.add_pair(pair_key, item)
        return vector


def build_template(tree: Mapping[str, Any]) -> DynamicTemplate:
    return TemplateBuilder().build(tree)


__all__ = ["TemplateBuilder", "build_template"]
