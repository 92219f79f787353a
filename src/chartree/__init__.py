"""
chartree - build chart node trees with chainable accessors and flatten them
into the nested specs a renderer consumes.
"""

from .chart import Chart, RenderContext
from .composition import Composition, create_node
from .errors import (
    ChartreeError,
    ContainerNotFoundError,
    DestroyedControllerError,
    InvalidChildError,
    InvalidRootError,
    SchedulerRequiredError,
    UnknownAttributeError,
)
from .events import ChartEvent
from .flatten import flatten
from .mark import Mark
from .node import Node
from .props import AttributeDescriptor, AttributeKind, define_props

__all__ = [
    "AttributeDescriptor",
    "AttributeKind",
    "Chart",
    "ChartEvent",
    "ChartreeError",
    "Composition",
    "ContainerNotFoundError",
    "DestroyedControllerError",
    "InvalidChildError",
    "InvalidRootError",
    "Mark",
    "Node",
    "RenderContext",
    "SchedulerRequiredError",
    "UnknownAttributeError",
    "create_node",
    "define_props",
    "flatten",
]
