"""
Attribute descriptors and accessor generation.

A node class declares which attributes it accepts by registering descriptor
sets with define_props(). Each descriptor becomes one chainable accessor
method on the class:

    chart.data(rows)             # Value: set, returns the node
    chart.data()                 # Value: get
    chart.transform({...})       # Array: append one element
    chart.transform([...])       # Array: replace the whole list
    chart.scale("x", {...})      # Object: upsert one entry
    chart.scale("x")             # Object: get one entry
    chart.scale({...})           # Object: replace the whole map

Descriptor sets compose without inheritance: a class merges any number of
sets and the last descriptor registered for a name wins.
"""

from __future__ import annotations

import keyword
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class _Missing:
    """Sentinel for "no argument given"."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class AttributeKind(str, Enum):
    VALUE = "value"
    ARRAY = "array"
    OBJECT = "object"


def accessor_name(name: str) -> str:
    """Python method name for a wire attribute name: paddingLeft -> padding_left."""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name).lower()
    if keyword.iskeyword(snake):
        snake += "_"
    return snake


@dataclass(frozen=True)
class AttributeDescriptor:
    """A named attribute and the access pattern it follows."""
    name: str
    kind: AttributeKind = AttributeKind.VALUE

    @property
    def method_name(self) -> str:
        return accessor_name(self.name)


@dataclass(frozen=True)
class ChildDescriptor:
    """A factory method that creates, attaches and returns a typed child."""
    name: str
    ctor: Callable[..., Any]
    container: bool = False

    @property
    def method_name(self) -> str:
        return accessor_name(self.name)


Descriptor = Union[AttributeDescriptor, ChildDescriptor]


def value(name: str) -> AttributeDescriptor:
    return AttributeDescriptor(name, AttributeKind.VALUE)


def array(name: str) -> AttributeDescriptor:
    return AttributeDescriptor(name, AttributeKind.ARRAY)


def object_(name: str) -> AttributeDescriptor:
    return AttributeDescriptor(name, AttributeKind.OBJECT)


def node_props(catalog: Mapping[str, Callable[..., Any]]) -> list[ChildDescriptor]:
    """Child factories for leaf node types (marks)."""
    return [ChildDescriptor(name, ctor) for name, ctor in catalog.items()]


def container_props(catalog: Mapping[str, Callable[..., Any]]) -> list[ChildDescriptor]:
    """Child factories for container node types (compositions)."""
    return [ChildDescriptor(name, ctor, container=True) for name, ctor in catalog.items()]


def merge_props(*descriptor_sets: Iterable[Descriptor]) -> dict[str, Descriptor]:
    """Merge descriptor sets in order; a later descriptor replaces an earlier one of the same name."""
    merged: dict[str, Descriptor] = {}
    for descriptors in descriptor_sets:
        for d in descriptors:
            merged.pop(d.name, None)
            merged[d.name] = d
    return merged


def props_of(target: Any) -> dict[str, Descriptor]:
    """Registered descriptor table of a node class or instance."""
    cls = target if isinstance(target, type) else type(target)
    return dict(getattr(cls, "__props__", {}))


def define_props(*descriptor_sets: Iterable[Descriptor]):
    """
    Class decorator installing one accessor per descriptor.

    The merged table extends whatever the class inherits, is stored on the
    class itself as __props__, and is the only thing modified. Applying the
    same sets again leaves the class in the same state.
    """
    merged = merge_props(*descriptor_sets)

    def decorator(cls):
        table: dict[str, Descriptor] = dict(getattr(cls, "__props__", {}))
        for name, d in merged.items():
            table.pop(name, None)
            table[name] = d

        # Validate everything before touching the class
        methods = {}
        for d in table.values():
            method = d.method_name
            existing = getattr(cls, method, None)
            reserved = method in getattr(cls, "__reserved__", ())
            if reserved or (existing is not None and not hasattr(existing, "__descriptor__")):
                raise TypeError(
                    f"{cls.__name__}.{method} already exists; "
                    f"attribute {d.name!r} would shadow it"
                )
            methods[method] = _make_accessor(d)

        for method, fn in methods.items():
            setattr(cls, method, fn)
        cls.__props__ = table
        return cls

    return decorator


def _make_accessor(d: Descriptor):
    if isinstance(d, ChildDescriptor):
        fn = _child_accessor(d)
    elif d.kind is AttributeKind.ARRAY:
        fn = _array_accessor(d.name)
    elif d.kind is AttributeKind.OBJECT:
        fn = _object_accessor(d.name)
    else:
        fn = _value_accessor(d.name)
    fn.__name__ = d.method_name
    fn.__qualname__ = d.method_name
    fn.__descriptor__ = d
    return fn


def _value_accessor(name: str):
    def accessor(self, value=MISSING):
        if value is MISSING:
            return self.value.get(name)
        self.value[name] = value
        return self

    accessor.__doc__ = f"Get or set {name!r}."
    return accessor


def _array_accessor(name: str):
    def accessor(self, value=MISSING):
        if value is MISSING:
            return self.value.get(name)
        if isinstance(value, (list, tuple)):
            self.value[name] = list(value)
        else:
            self.value.setdefault(name, []).append(value)
        return self

    accessor.__doc__ = f"Get {name!r}, append one element, or replace it with a list."
    return accessor


def _object_accessor(name: str):
    def accessor(self, key=MISSING, value=MISSING):
        if key is MISSING:
            return self.value.get(name)
        if isinstance(key, Mapping):
            self.value[name] = dict(key)
            return self
        if value is MISSING:
            current = self.value.get(name)
            return None if current is None else current.get(key)
        self.value.setdefault(name, {})[key] = value
        return self

    accessor.__doc__ = f"Get {name!r} or one entry of it, upsert an entry, or replace the map."
    return accessor


def _child_accessor(d: ChildDescriptor):
    def accessor(self, **attributes):
        child = d.ctor()
        for key, val in attributes.items():
            child.attr(key, val)
        return self.add_child(child)

    kind = "container" if d.container else "mark"
    accessor.__doc__ = f"Append a {d.name!r} {kind} and return it."
    return accessor
