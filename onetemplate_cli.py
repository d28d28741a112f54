"""CLI converting OpenNebula template XML into attribute=value wire text."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from lxml import etree

from onetemplate import DynamicTemplate, TemplateError
from onetemplate.lexer import load_xml, local_name

DEFAULT_ROOT = "TEMPLATE"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Read a template XML document (such as the TEMPLATE of a one.vm.info body) "
            "and print it in the attribute=value syntax accepted by allocate and update calls."
        )
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to an XML file (defaults to standard input).",
    )
    parser.add_argument(
        "--root",
        default=None,
        help=(
            "Tag of the template element inside a larger body, e.g. TEMPLATE or USER_TEMPLATE "
            f"(defaults to the document root, or its {DEFAULT_ROOT} child when the root is not one)."
        ),
    )
    parser.add_argument(
        "--strip-whitespace",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Ignore indentation between tags (default: enabled).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log tokenization and parsing details.",
    )
    return parser.parse_args(argv)


def read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"Input path does not exist: {source}")
    return source.read_bytes()


def select_root(document: etree._Element, tag: Optional[str]) -> etree._Element:
    """Element holding the template: ``tag`` anywhere below the root, or the root itself."""
    if tag is None:
        if local_name(document) == DEFAULT_ROOT:
            return document
        child = document.find(DEFAULT_ROOT)
        return child if child is not None else document
    if local_name(document) == tag:
        return document
    found = document.find(f".//{tag}")
    if found is None:
        raise TemplateError(f"No <{tag}> element in input")
    return found


def convert(data: bytes, root: Optional[str] = None, strip_whitespace: bool = True, verbose: bool = False) -> str:
    element = select_root(load_xml(data), root)
    template = DynamicTemplate.parse(
        element,
        lexer_config={"enable_logger": verbose, "strip_whitespace": strip_whitespace},
        parser_config={"enable_logger": verbose},
    )
    return template.serialize()


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        text = convert(
            read_input(args.input),
            root=args.root,
            strip_whitespace=args.strip_whitespace,
            verbose=args.verbose,
        )
    except (TemplateError, FileNotFoundError) as exc:
        print(f"onetemplate: {exc}", file=sys.stderr)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
