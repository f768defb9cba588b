"""Graph related exception hierarchy."""
from __future__ import annotations

from typing import Sequence


class GraphError(Exception):
    """Base graph exception."""


class UnknownModuleError(GraphError):
    """Raised when a requested module is not a key of the graph.

    Recoverable: the caller named a target (or closure seed) that the
    workspace does not contain.
    """

    def __init__(self, module: str):
        super().__init__(f"module not found: {module}")
        self.module = module


class ContractViolation(GraphError):
    """Raised when an internal lookup finds a module missing from the graph.

    Signals an inconsistent graph produced upstream; callers should abort
    rather than recover.
    """


class CycleError(GraphError):
    """Raised when transitive reduction is requested on a cyclic graph."""

    def __init__(self, cycle: Sequence[str]):
        super().__init__("dependency cycle: " + " -> ".join(cycle))
        self.cycle = list(cycle)
