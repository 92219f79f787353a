"""
Node - the builder tree primitive.

Every chart is a tree of Nodes. A node carries a type tag, an attribute
store and ordered children. Attribute accessors are generated per class by
props.define_props(); the base Node has none.

Key invariant: a node has at most one parent and the tree has no cycles.
A node with type None is a virtual root: a transparent wrapper that owns
canvas sizing and delegates its rendered identity to its last child.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from .errors import InvalidChildError, UnknownAttributeError
from .props import MISSING


class Node:
    """A typed node in the chart tree."""

    # Instance attributes no generated accessor may take over
    __reserved__ = frozenset({"value", "children", "parent"})

    def __init__(self, type: str | None = None, value: dict[str, Any] | None = None):
        self._type = type
        self.value: dict[str, Any] = dict(value) if value else {}
        self.children: list[Node] = []
        self.parent: Node | None = None

    @property
    def type(self) -> str | None:
        return self._type

    @property
    def is_virtual(self) -> bool:
        """Virtual roots carry no type and never appear in a spec."""
        return self._type is None

    def __getattr__(self, name: str):
        # Only reached when normal lookup fails: no accessor is registered
        if name.startswith("__"):
            raise AttributeError(name)
        raise UnknownAttributeError(type(self).__name__, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self._type!r}, children={len(self.children)})"

    def attr(self, name: str, value: Any = MISSING) -> Any:
        """Raw attribute store access, bypassing descriptors."""
        if value is MISSING:
            return self.value.get(name)
        self.value[name] = value
        return self

    def add_child(self, child: Node) -> Node:
        """Add a child node and return it for chaining."""
        if child is self:
            raise InvalidChildError(f"{self!r} cannot be its own child")
        if child.parent is not None:
            raise InvalidChildError(f"{child!r} already belongs to {child.parent!r}")
        for ancestor in self.ancestors():
            if ancestor is child:
                raise InvalidChildError(f"adding {child!r} to {self!r} would create a cycle")
        self.children.append(child)
        child.parent = self
        return child

    def remove(self) -> Node:
        """Detach from the parent so the node can be attached elsewhere."""
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None
        return self

    def ancestors(self) -> Iterator[Node]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then children in order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def breadth_first(self) -> Iterator[Node]:
        """Traverse tree breadth-first."""
        queue: deque[Node] = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def get_node_by_type(self, type: str) -> Node | None:
        """First descendant (or self) with the given type tag."""
        for node in self.depth_first():
            if node.type == type:
                return node
        return None
