"""
Chart size resolution.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol


class Size(NamedTuple):
    width: int
    height: int


class Measurable(Protocol):
    client_width: int
    client_height: int
    padding_left: int
    padding_right: int
    padding_top: int
    padding_bottom: int


def get_container_size(container: Measurable) -> Size:
    """Content box of the container: client size minus padding."""
    return Size(
        width=container.client_width - container.padding_left - container.padding_right,
        height=container.client_height - container.padding_top - container.padding_bottom,
    )


def get_chart_size(container: Measurable, auto_fit: bool, width: int, height: int) -> Size:
    """
    Size the chart should take.

    With auto_fit the container's content box wins, except for dimensions it
    reports as zero (or less), which keep the configured value.
    """
    w, h = width, height

    if auto_fit:
        measured = get_container_size(container)
        w = measured.width if measured.width > 0 else w
        h = measured.height if measured.height > 0 else h

    return Size(w, h)
