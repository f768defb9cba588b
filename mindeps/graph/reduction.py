"""Transitive reduction.

For a DAG, the edge ``u -> d`` is redundant when ``d`` is reachable from
another direct dependency of ``u``. Each module is reduced independently;
on a DAG the result is the unique transitive reduction. On cyclic input
the computation still terminates but the result is not a reduction in any
meaningful sense (see ``cycles.ensure_acyclic``).
"""
from __future__ import annotations

from typing import FrozenSet, Set

from .reachability import closure, direct_deps
from .types import Graph, MutableGraph


def indirectly_reachable(graph: Graph, module: str) -> FrozenSet[str]:
    """Everything reachable one hop past each direct dependency."""
    reach: Set[str] = set()
    for dep in direct_deps(graph, module):
        reach |= closure(graph, dep)
    return frozenset(reach)


def minimal_deps(graph: Graph, module: str) -> FrozenSet[str]:
    implied = indirectly_reachable(graph, module)
    return frozenset(
        d for d in direct_deps(graph, module) if d not in implied
    )


def transitive_reduction(graph: Graph) -> Graph:
    reduced: MutableGraph = {}
    for mod in sorted(graph):
        reduced[mod] = minimal_deps(graph, mod)
    return reduced


__all__ = ["indirectly_reachable", "minimal_deps", "transitive_reduction"]
