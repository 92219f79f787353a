"""
Errors raised by chartree.

Structural errors abort the offending call before anything is mutated.
Nothing here is retried; every failure reaches the caller synchronously.
"""

from __future__ import annotations


class ChartreeError(Exception):
    """Base class for all chartree errors."""


class UnknownAttributeError(ChartreeError, AttributeError):
    """Accessor used for a name with no registered descriptor."""

    def __init__(self, owner: str, name: str):
        super().__init__(f"{owner} has no attribute accessor {name!r}")
        self.owner = owner
        self.name = name


class InvalidChildError(ChartreeError, ValueError):
    """Child already owned elsewhere, or attaching it would form a cycle."""


class InvalidRootError(ChartreeError, ValueError):
    """Virtual root wrapper has nothing to delegate to."""


class DestroyedControllerError(ChartreeError, RuntimeError):
    """Lifecycle operation on a chart after destroy()."""


class ContainerNotFoundError(ChartreeError, LookupError):
    """Container id could not be resolved against the document."""


class SchedulerRequiredError(ChartreeError, RuntimeError):
    """Auto-fit is on but there is no scheduler to run the resize on."""
