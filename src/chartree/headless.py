"""
Headless backend.

In-memory stand-ins for the document, drawing surface and window a chart
talks to. They are the defaults when no real backend is supplied, and they
record what happened so callers (and tests) can inspect it:

    chart = Chart(width=300, height=200)
    chart.interval().data(rows)
    chart.render()
    chart.context().surface.painted[-1]   # the spec that was drawn
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


class Element:
    """A box in a document tree."""

    def __init__(
        self,
        tag: str = "div",
        id: str | None = None,
        client_width: int = 0,
        client_height: int = 0,
        padding: tuple[int, int, int, int] = (0, 0, 0, 0),
    ):
        self.tag = tag
        self.id = id
        self.client_width = client_width
        self.client_height = client_height
        self.padding_top, self.padding_right, self.padding_bottom, self.padding_left = padding
        self.parent: Element | None = None
        self.children: list[Element] = []
        self.document: Document | None = None

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, id={self.id!r})"

    def append(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.remove_child(child)
        self.children.append(child)
        child.parent = self
        return child

    def remove_child(self, child: Element) -> Element:
        self.children.remove(child)
        child.parent = None
        return child


class Document:
    """Registry of elements addressable by id."""

    def __init__(self):
        self.body = Element("body")
        self.body.document = self

    def create_element(self, tag: str = "div", **kwargs: Any) -> Element:
        element = Element(tag, **kwargs)
        element.document = self
        return element

    def get_element_by_id(self, id: str) -> Element | None:
        stack = [self.body]
        while stack:
            element = stack.pop()
            if element.id == id:
                return element
            stack.extend(element.children)
        return None


class Surface:
    """Drawing surface of a fixed size. Keeps every spec painted onto it."""

    def __init__(self, container: Element | None, width: int, height: int):
        self.container = container
        self.width = width
        self.height = height
        self.element = Element("canvas", id=f"surface-{next(_ids)}")
        self.plugins: list[Any] = []
        self.painted: list[dict[str, Any]] = []
        self.resize_calls = 0
        self.destroyed = False

    def register_plugin(self, plugin: Any) -> None:
        self.plugins.append(plugin)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.resize_calls += 1

    def draw(self, spec: dict[str, Any]) -> None:
        self.painted.append(spec)

    def destroy(self) -> None:
        self.destroyed = True
        if self.element.parent is not None:
            self.element.parent.remove_child(self.element)


def create_surface(container: Element | None, width: int, height: int) -> Surface:
    """Surface factory: the default for Chart(renderer=...)."""
    logger.debug("headless surface %dx%d", width, height)
    return Surface(container, width, height)


def paint(spec: dict[str, Any], context: Any) -> Element:
    """Painter: record the spec on the context's surface and return its element."""
    context.surface.draw(spec)
    return context.surface.element


class Window:
    """Source of resize notifications."""

    def __init__(self):
        self._subscribers: list[Callable[..., Any]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[..., Any]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[..., Any]) -> None:
        self._subscribers.remove(callback)

    def dispatch_resize(self) -> None:
        for callback in list(self._subscribers):
            callback()
