"""Formatter producing the OpenNebula attribute=value wire text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from lxml import etree

from .nodes import Pair, TemplateElement, Vector

DEFAULT_XML_ROOT = "TEMPLATE"


@dataclass
class TemplateFormatter:
    separator: str = "\n"

    def format_element(self, element: TemplateElement) -> str:
        match element:
            case Pair():
                return element.serialize()
            case Vector():
                return element.serialize()
        raise TypeError(f"Unknown template element: {type(element)}")

    def format_elements(self, elements: Iterable[TemplateElement]) -> str:
        """Join elements one per line, without a newline after the last one."""
        return self.separator.join(self.format_element(element) for element in elements)

    def format_sections(self, sections: Iterable[str]) -> str:
        """Join already formatted parts of a composite template.

        Every non-empty section but the last is followed by the separator, so the
        result never carries a trailing newline nor blank lines for empty parts.
        """
        return self.separator.join(section for section in sections if section)


DEFAULT_FORMATTER = TemplateFormatter()


@dataclass
class XmlTemplateFormatter:
    """Formatter producing the XML form of a template, also accepted by allocate and update calls."""

    root: str = DEFAULT_XML_ROOT
    pretty_print: bool = False

    def to_element(self, elements: Iterable[TemplateElement]) -> etree._Element:
        root = etree.Element(self.root)
        for element in elements:
            match element:
                case Pair():
                    etree.SubElement(root, element.key).text = element.value
                case Vector():
                    vector = etree.SubElement(root, element.key)
                    for pair in element.pairs:
                        etree.SubElement(vector, pair.key).text = pair.value
                case _:
                    raise TypeError(f"Unknown template element: {type(element)}")
        return root

    def format_elements(self, elements: Iterable[TemplateElement]) -> str:
        return etree.tostring(self.to_element(elements), encoding="unicode", pretty_print=self.pretty_print)


__all__ = ["TemplateFormatter", "XmlTemplateFormatter", "DEFAULT_FORMATTER", "DEFAULT_XML_ROOT"]
