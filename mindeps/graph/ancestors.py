"""Induced subgraph of a target and everything it depends on."""
from __future__ import annotations

from .reachability import closure_inclusive, direct_deps
from .types import Graph, MutableGraph


def induced_ancestors(graph: Graph, target: str) -> Graph:
    keep = closure_inclusive(graph, target)
    sub: MutableGraph = {}
    for mod in sorted(keep):
        # The intersection never drops anything for a closed set; kept as a
        # guard against inconsistent input graphs.
        sub[mod] = direct_deps(graph, mod) & keep
    return sub


__all__ = ["induced_ancestors"]
