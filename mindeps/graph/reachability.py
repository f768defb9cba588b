"""Reachability over a dependency graph.

Traversals use an explicit stack and a visited set: they terminate on
cycles and do not depend on recursion depth.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable, Set

from .exceptions import ContractViolation, UnknownModuleError
from .types import Graph


def direct_deps(graph: Graph, module: str) -> FrozenSet[str]:
    """Dependencies of a module already known to be in ``graph``."""
    try:
        return graph[module]
    except KeyError:
        raise ContractViolation(f"{module} not found in graph") from None


def _walk(graph: Graph, seeds: Iterable[str]) -> Set[str]:
    seen: Set[str] = set()
    stack = list(seeds)
    while stack:
        mod = stack.pop()
        if mod not in seen:
            seen.add(mod)
            stack.extend(direct_deps(graph, mod))
    return seen


def closure(graph: Graph, module: str) -> FrozenSet[str]:
    """All modules reachable from ``module`` through one or more edges.

    ``module`` itself is included only when it lies on a cycle.
    """
    return frozenset(_walk(graph, direct_deps(graph, module)))


def closure_inclusive(graph: Graph, module: str) -> FrozenSet[str]:
    """``module`` plus everything it transitively depends on."""
    if module not in graph:
        raise UnknownModuleError(module)
    return frozenset(_walk(graph, [module]))


__all__ = ["direct_deps", "closure", "closure_inclusive"]
