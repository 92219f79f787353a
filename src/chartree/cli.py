"""
CLI interface for chartree.

    chartree flatten chart.json      # build the tree, print its spec
    chartree props interval          # list accessors of a node type

Input files describe a tree declaratively, in JSON or TOML:

    {"type": "view", "width": 300,
     "children": [{"type": "line", "encode": {"x": "date"}}]}

A missing or null top-level "type" makes the root a virtual wrapper.
Attributes are applied through the generated accessors, so a name the node
type does not declare fails the same way it would in code.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from pathlib import Path
from typing import Any

from .composition import create_node
from .errors import ChartreeError, UnknownAttributeError
from .flatten import flatten
from .node import Node
from .props import AttributeKind, ChildDescriptor, props_of


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="chartree",
        description="Build chart node trees and flatten them into renderer specs",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    flatten_cmd = sub.add_parser("flatten", help="Flatten a chart file into a spec")
    flatten_cmd.add_argument(
        "file",
        nargs="?",
        help="Chart file (.json or .toml); reads JSON from stdin if not provided",
    )
    flatten_cmd.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2, 0 for compact)",
    )

    props_cmd = sub.add_parser("props", help="List accessors of a node type")
    props_cmd.add_argument("type", help="Node type tag, e.g. interval or view")

    return parser.parse_args(args)


def read_tree(filename: str | None) -> dict[str, Any]:
    """Read a declarative tree from a file or stdin."""
    if filename is None:
        return json.loads(sys.stdin.read())
    path = Path(filename)
    if path.suffix.lower() == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    return json.loads(path.read_text(encoding="utf-8"))


def build_tree(doc: dict[str, Any]) -> Node:
    """
    Build nodes from a declarative document.

    Iterative like flatten(); children are attached in document order.
    """
    root = _build_node(doc)
    pending: list[tuple[Node, dict[str, Any]]] = [(root, doc)]
    while pending:
        node, source = pending.pop()
        for child_doc in source.get("children", []):
            child = _build_node(child_doc)
            if child.is_virtual:
                raise ChartreeError("only the root node may omit \"type\"")
            node.add_child(child)
            pending.append((child, child_doc))
    return root


def _build_node(doc: dict[str, Any]) -> Node:
    if not isinstance(doc, dict):
        raise ChartreeError(f"expected a node object, got {type(doc).__name__}")
    type_tag = doc.get("type")
    if type_tag is None:
        # Virtual wrapper: only layout attributes matter, store them raw
        node = Node(None)
        for key, val in doc.items():
            if key not in ("type", "children"):
                node.attr(key, val)
        return node

    node = create_node(type_tag)
    table = props_of(node)
    for key, val in doc.items():
        if key in ("type", "children"):
            continue
        descriptor = table.get(key)
        if descriptor is None or isinstance(descriptor, ChildDescriptor):
            raise UnknownAttributeError(type(node).__name__, key)
        accessor = getattr(node, descriptor.method_name)
        if descriptor.kind is AttributeKind.OBJECT and not isinstance(val, dict):
            raise ChartreeError(f"{key!r} of {type_tag!r} must be an object")
        accessor(val)
    return node


def format_props(type_tag: str) -> list[str]:
    """One line per accessor: method name, wire name, kind."""
    lines = []
    for name, d in sorted(props_of(create_node(type_tag)).items()):
        kind = ("container" if d.container else "mark") if isinstance(d, ChildDescriptor) else d.kind.value
        lines.append(f"{d.method_name:<16} {name:<16} {kind}")
    return lines


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    if parsed.command == "props":
        try:
            lines = format_props(parsed.type)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print("\n".join(lines))
        return 0

    try:
        doc = read_tree(parsed.file)
    except (OSError, ValueError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    try:
        spec = flatten(build_tree(doc))
    except (ChartreeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(spec, indent=parsed.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
