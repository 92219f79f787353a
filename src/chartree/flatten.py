"""
Flatten a node tree into a plain nested spec.

The walk uses an explicit stack so arbitrarily deep trees never hit the
recursion limit. Output:

    {"type": "view", "width": 640, "children": [{"type": "line", ...}]}

"children" appears only on nodes that have children, in insertion order.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import InvalidRootError
from .node import Node

logger = logging.getLogger(__name__)

# Canvas-level attributes a virtual root hands to the node it delegates to
LAYOUT_ATTRIBUTES = (
    "width",
    "height",
    "paddingLeft",
    "paddingTop",
    "paddingBottom",
    "paddingRight",
)


def _copy(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def value_of(node: Node) -> dict[str, Any]:
    """Serialized object for one node: type plus its attributes."""
    out: dict[str, Any] = {"type": node.type}
    for key, val in node.value.items():
        out[key] = _copy(val)
    return out


def normalize_root(node: Node) -> tuple[Node, dict[str, Any]]:
    """
    Resolve the node that actually gets rendered.

    Returns the semantic root and the layout attributes inherited from a
    virtual wrapper (empty for a regular root). A wrapper delegates to its
    last child, not its only one, and is the sole source of layout: every
    layout key is returned, None where the wrapper leaves it unset.
    """
    if not node.is_virtual:
        return node, {}
    if not node.children:
        raise InvalidRootError("virtual root has no children to delegate to")
    root = node.children[-1]
    layout = {key: node.value.get(key) for key in LAYOUT_ATTRIBUTES}
    logger.debug("virtual root delegates to %r with %s", root, layout)
    return root, layout


def flatten(node: Node) -> dict[str, Any]:
    """Walk the tree from node and return its nested spec."""
    root, layout = normalize_root(node)

    root_value = value_of(root)
    for key, val in layout.items():
        if val is None:
            root_value.pop(key, None)
        else:
            root_value[key] = val

    discovered: list[Node] = [root]
    node_value: dict[int, dict[str, Any]] = {id(root): root_value}

    while discovered:
        current = discovered.pop()
        value = node_value[id(current)]
        for child in current.children:
            child_value = value_of(child)
            value.setdefault("children", []).append(child_value)
            node_value[id(child)] = child_value
            discovered.append(child)

    return root_value
