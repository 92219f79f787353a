"""
Composition capability: attributes of a container that lays out children.

Compositions can create marks and nested compositions through generated
factory methods, e.g. ``view.space_flex().interval()``.
"""

from __future__ import annotations

from functools import partial

from .library import COMPOSITION_TYPES
from .mark import marks
from .node import Node
from .props import array, container_props, define_props, node_props, object_, value

COMPOSITION_PROPS = [
    value("key"),
    value("data"),
    value("width"),
    value("height"),
    value("paddingLeft"),
    value("paddingRight"),
    value("paddingBottom"),
    value("paddingTop"),
    array("coordinate"),
    array("interaction"),
    array("transform"),
    object_("theme"),
    object_("title"),
    object_("scale"),
    object_("style"),
    object_("encode"),
    value("direction"),
    array("ratio"),
]


class Composition(Node):
    """Container node whose children are laid out together."""


compositions = {t: partial(Composition, t) for t in COMPOSITION_TYPES}

define_props(COMPOSITION_PROPS, node_props(marks), container_props(compositions))(Composition)


def create_node(type: str) -> Node:
    """Build an empty node for a catalog type tag."""
    if type in marks:
        return marks[type]()
    if type in compositions:
        return compositions[type]()
    raise ValueError(f"unknown node type {type!r}")
