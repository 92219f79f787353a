"""
Mark capability: attributes of a drawable element (interval, line, ...).
"""

from __future__ import annotations

from functools import partial

from .library import MARK_TYPES
from .node import Node
from .props import array, define_props, object_, value

MARK_PROPS = [
    value("class"),
    value("key"),
    value("paddingLeft"),
    value("paddingRight"),
    value("paddingBottom"),
    value("paddingTop"),
    value("data"),
    array("transform"),
    object_("encode"),
    object_("scale"),
    array("coordinate"),
    object_("style"),
    array("interaction"),
    object_("theme"),
    value("adjust"),
    value("facet"),
    value("frame"),
    array("labels"),
    value("stack"),
    object_("animate"),
]


@define_props(MARK_PROPS)
class Mark(Node):
    """Leaf node for a single visual element."""


# type tag -> zero-argument constructor
marks = {t: partial(Mark, t) for t in MARK_TYPES}
