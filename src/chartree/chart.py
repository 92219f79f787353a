"""
Chart - the root node and its render lifecycle.

A Chart is a node like any other (it builds marks and compositions through
generated factory methods) that also owns a container, a drawing surface and
an optional auto-fit subscription:

    chart = Chart(width=600, height=400)
    chart.interval().data(rows).encode("x", "genre").encode("y", "sold")
    chart.render()

Collaborators are injected; by default they come from chartree.headless:
- renderer: surface factory, (container, width, height) -> surface
- painter: (spec, context) -> element to attach to the container
- document: resolves string container ids
- window: resize notifications for auto-fit
- scheduler: runs the debounced auto-fit resize; defaults to the running
  asyncio loop, and is required when auto-fit is on outside one
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from . import headless
from .composition import COMPOSITION_PROPS, compositions
from .config import get_config
from .errors import ContainerNotFoundError, DestroyedControllerError, SchedulerRequiredError
from .events import ChartEvent, Emitter
from .flatten import flatten
from .mark import MARK_PROPS, marks
from .node import Node
from .props import array, container_props, define_props, node_props, object_, value
from .scheduling import Debouncer, Scheduler, running_loop_scheduler
from .size import Size, get_chart_size

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """What the painter gets besides the spec."""
    library: dict[str, Callable[[], Node]] = field(default_factory=dict)
    surface: Any = None


def normalize_container(container: Any, document: Any) -> Any:
    """Resolve a container argument to an element."""
    if container is None:
        return document.create_element("div")
    if isinstance(container, str):
        element = document.get_element_by_id(container)
        if element is None:
            raise ContainerNotFoundError(f"no element with id {container!r}")
        return element
    return container


def remove_container(container: Any) -> None:
    parent = container.parent
    if parent is not None:
        parent.remove_child(container)


CHART_PROPS = [
    value("data"),
    array("coordinate"),
    array("interaction"),
    object_("theme"),
    object_("title"),
    value("key"),
    array("transform"),
    value("width"),
    value("height"),
    value("autoFit"),
]


@define_props(
    MARK_PROPS,
    COMPOSITION_PROPS,
    CHART_PROPS,
    node_props(marks),
    container_props(compositions),
)
class Chart(Node, Emitter):
    """Root node that renders itself onto an owned surface."""

    def __init__(
        self,
        container: Any = None,
        *,
        width: int | None = None,
        height: int | None = None,
        auto_fit: bool | None = None,
        renderer: Callable[..., Any] | None = None,
        plugins: Iterable[Any] | None = None,
        painter: Callable[[dict[str, Any], RenderContext], Any] | None = None,
        document: Any = None,
        window: Any = None,
        scheduler: Scheduler | None = None,
        type: str | None = "view",
        **attributes: Any,
    ):
        Node.__init__(self, type, attributes)
        Emitter.__init__(self)
        if width is not None:
            self.value["width"] = width
        if height is not None:
            self.value["height"] = height
        if auto_fit is not None:
            self.value["autoFit"] = auto_fit

        cfg = get_config()
        self._document = document if document is not None else headless.Document()
        self._container = normalize_container(container, self._document)
        self._renderer = renderer or headless.create_surface
        self._plugins = list(plugins or ())
        self._painter = painter or headless.paint
        self._window = window
        self._context = RenderContext(library={**marks, **compositions})
        self._destroyed = False

        self._scheduler = scheduler
        self._debounce_delay = cfg.resize.debounce_delay
        self._resize: Debouncer | None = None
        self._auto_fit_bound = False
        self._bind_auto_fit()

    # -- accessors -----------------------------------------------------

    def spec(self) -> dict[str, Any]:
        """Current flattened spec of the tree rooted here."""
        return flatten(self)

    def container(self) -> Any:
        return self._container

    def context(self) -> RenderContext:
        return self._context

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def size(self) -> Size:
        """Configured size: explicit attributes, else config defaults."""
        cfg = get_config().chart
        width = self.value.get("width")
        height = self.value.get("height")
        return Size(
            cfg.width if width is None else width,
            cfg.height if height is None else height,
        )

    def _auto_fit_enabled(self) -> bool:
        auto_fit = self.value.get("autoFit")
        return get_config().chart.auto_fit if auto_fit is None else bool(auto_fit)

    # -- lifecycle -----------------------------------------------------

    def render(self) -> Chart:
        self._check_alive("render")
        self.emit(ChartEvent.BEFORE_RENDER)

        spec = self.spec()
        if self._context.surface is None:
            self._context.surface = self._init_surface()

        self.emit(ChartEvent.BEFORE_PAINT)
        element = self._painter(spec, self._context)
        self.emit(ChartEvent.AFTER_PAINT)

        if element.parent is not self._container:
            self._container.append(element)

        self.emit(ChartEvent.AFTER_RENDER)
        return self

    def change_size(self, width: int, height: int) -> Chart:
        self._check_alive("change_size")
        if self.size() == (width, height):
            return self

        self.emit(ChartEvent.BEFORE_CHANGE_SIZE)
        logger.debug("resize %s -> %dx%d", self.size(), width, height)
        self.value["width"] = width
        self.value["height"] = height
        if self._context.surface is not None:
            self._context.surface.resize(width, height)
        self.render()
        self.emit(ChartEvent.AFTER_CHANGE_SIZE)
        return self

    def change_data(self, data: Any) -> Chart:
        self._check_alive("change_data")
        self.emit(ChartEvent.BEFORE_CHANGE_DATA)
        self.data(data)
        self.render()
        self.emit(ChartEvent.AFTER_CHANGE_DATA)
        return self

    def force_fit(self) -> Chart:
        """Re-measure the container and resize to it."""
        self._check_alive("force_fit")
        width, height = self.size()
        measured = get_chart_size(self._container, True, width, height)
        return self.change_size(measured.width, measured.height)

    def clear(self) -> Chart:
        """Release the surface; the next render() creates a new one."""
        self._check_alive("clear")
        self.emit(ChartEvent.BEFORE_CLEAR)
        self._release_surface()
        self.emit(ChartEvent.AFTER_CLEAR)
        return self

    def destroy(self) -> None:
        """Release everything the chart owns. Safe to call more than once."""
        if self._destroyed:
            return
        self.emit(ChartEvent.BEFORE_DESTROY)
        self._release_surface()
        if self._resize is not None:
            self._resize.cancel()
        self._unbind_auto_fit()
        remove_container(self._container)
        self._destroyed = True
        logger.debug("chart destroyed")
        self.emit(ChartEvent.AFTER_DESTROY)
        self.off()

    # -- internals -----------------------------------------------------

    def _check_alive(self, operation: str) -> None:
        if self._destroyed:
            raise DestroyedControllerError(f"cannot {operation}: chart was destroyed")

    def _init_surface(self) -> Any:
        width, height = self.size()
        size = get_chart_size(self._container, self._auto_fit_enabled(), width, height)
        surface = self._renderer(self._container, size.width, size.height)
        for plugin in self._plugins:
            surface.register_plugin(plugin)
        logger.debug("surface created %dx%d with %d plugins", size.width, size.height, len(self._plugins))
        return surface

    def _release_surface(self) -> None:
        if self._context.surface is not None:
            self._context.surface.destroy()
            self._context.surface = None

    def _on_resize(self) -> None:
        if not self._destroyed:
            self.force_fit()

    def _bind_auto_fit(self) -> None:
        if not self._auto_fit_enabled():
            return
        scheduler = self._scheduler if self._scheduler is not None else running_loop_scheduler()
        if scheduler is None:
            raise SchedulerRequiredError(
                "auto-fit needs a scheduler: pass scheduler= or create the chart inside a running event loop"
            )
        self._resize = Debouncer(self._on_resize, self._debounce_delay, scheduler)
        if self._window is None:
            self._window = headless.Window()
        self._window.subscribe(self._resize.trigger)
        self._auto_fit_bound = True

    def _unbind_auto_fit(self) -> None:
        if self._auto_fit_bound:
            self._window.unsubscribe(self._resize.trigger)
            self._auto_fit_bound = False
