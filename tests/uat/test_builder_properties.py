"""
UAT: Builder and Lifecycle Properties

Acceptance criteria for the chainable builder, flattening and the chart
lifecycle:
- setters chain, getters return the last value set
- array attributes accumulate in call order; a list replaces
- flatten is deterministic and order-preserving
- a virtual root hands its size to the node it delegates to
- resizing to the current size does nothing
- destroy can be called twice
- a node has one owner
"""

import pytest
from chartree import Chart, Composition, InvalidChildError, Mark, Node, flatten
from chartree.headless import Surface, Window, create_surface
from chartree.props import AttributeKind, props_of
from chartree.scheduling import ManualScheduler

SAMPLES = {
    AttributeKind.VALUE: 42,
    AttributeKind.ARRAY: ["a", "b"],
    AttributeKind.OBJECT: {"k": 1},
}


def test_every_chart_attribute_chains():
    """Every attribute accessor returns the node on set and the value on get."""
    chart = Chart()
    for name, descriptor in props_of(Chart).items():
        kind = getattr(descriptor, "kind", None)
        if kind is None:
            continue  # child factory
        sample = SAMPLES[kind]
        accessor = getattr(chart, descriptor.method_name)
        assert accessor(sample) is chart, name
        assert accessor() == sample, name


def test_array_accumulation():
    mark = Mark("interval")
    mark.transform({"type": "a"}).transform({"type": "b"}).transform({"type": "c"})
    assert [t["type"] for t in mark.transform()] == ["a", "b", "c"]

    mark.transform([{"type": "z"}])
    assert mark.transform() == [{"type": "z"}]


def test_flatten_determinism_and_order():
    root = Composition("spaceLayer")
    expected = []
    for i, t in enumerate(["line", "area", "point"] * 3):
        child = getattr(root, t)().key(i)
        expected.append((t, i))
        if t == "area":
            child.style("fill", "red")

    first = flatten(root)
    second = flatten(root)

    assert first == second
    assert [(c["type"], c["key"]) for c in first["children"]] == expected


def test_virtual_root_delegation():
    wrapper = Node(None, {"width": 600, "height": 400})
    wrapper.add_child(Mark("interval").data([1]))

    spec = flatten(wrapper)

    assert spec == {"type": "interval", "width": 600, "height": 400, "data": [1]}


def test_noop_resize():
    surfaces: list[Surface] = []

    def factory(container, width, height):
        surfaces.append(create_surface(container, width, height))
        return surfaces[-1]

    renders = []
    chart = Chart(width=500, height=300, renderer=factory, scheduler=ManualScheduler())
    chart.on("afterrender", lambda: renders.append(1))
    chart.render()

    chart.change_size(500, 300)

    assert surfaces[0].resize_calls == 0
    assert len(renders) == 1


def test_destroy_idempotence():
    window = Window()
    chart = Chart(auto_fit=True, window=window, scheduler=ManualScheduler()).render()
    chart.destroy()
    chart.destroy()
    assert window.subscriber_count == 0


def test_ownership_exclusivity():
    first = Composition("view")
    second = Composition("view")
    line = first.line()
    second.point()

    with pytest.raises(InvalidChildError):
        second.add_child(line)

    assert first.children == [line]
    assert [c.type for c in second.children] == ["point"]
    assert line.parent is first
