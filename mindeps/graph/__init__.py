"""Dependency graph core.

Pipeline: build_graph → induced_ancestors → (ensure_acyclic) →
transitive_reduction → iter_edges / format_edges. Every function is pure;
graphs are never mutated after construction.
"""

from .ancestors import induced_ancestors  # noqa: F401
from .builder import build_graph, edge_count  # noqa: F401
from .cycles import ensure_acyclic, find_cycles  # noqa: F401
from .emit import format_edges, iter_edges  # noqa: F401
from .exceptions import (  # noqa: F401
    ContractViolation,
    CycleError,
    GraphError,
    UnknownModuleError,
)
from .reachability import closure, closure_inclusive, direct_deps  # noqa: F401
from .reduction import (  # noqa: F401
    indirectly_reachable,
    minimal_deps,
    transitive_reduction,
)
from .types import Edge, Graph, Module  # noqa: F401

__all__ = [
    "build_graph",
    "edge_count",
    "direct_deps",
    "closure",
    "closure_inclusive",
    "induced_ancestors",
    "find_cycles",
    "ensure_acyclic",
    "indirectly_reachable",
    "minimal_deps",
    "transitive_reduction",
    "iter_edges",
    "format_edges",
    "GraphError",
    "UnknownModuleError",
    "ContractViolation",
    "CycleError",
    "Graph",
    "Module",
    "Edge",
]
