"""Cycle detection for the reduction guard.

Transitive reduction as implemented in ``reduction`` is only meaningful on
DAGs; ``ensure_acyclic`` is run before it unless the caller opts out.
"""
from __future__ import annotations

from typing import Dict, List

from .exceptions import CycleError
from .reachability import direct_deps
from .types import Graph

_WHITE, _GREY, _BLACK = 0, 1, 2


def find_cycles(graph: Graph) -> List[List[str]]:
    """Return cycles as paths ``[a, b, ..., a]`` (canonical visit order).

    Iterative DFS; each back edge found yields one cycle, so the list is not
    an exhaustive enumeration of elementary cycles.
    """
    color: Dict[str, int] = {mod: _WHITE for mod in graph}
    cycles: List[List[str]] = []
    for start in sorted(graph):
        if color[start] != _WHITE:
            continue
        path: List[str] = [start]
        color[start] = _GREY
        stack = [iter(sorted(direct_deps(graph, start)))]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                color[path.pop()] = _BLACK
                continue
            state = color.get(nxt, _BLACK)
            if state == _GREY:
                idx = path.index(nxt)
                cycles.append(path[idx:] + [nxt])
            elif state == _WHITE:
                color[nxt] = _GREY
                path.append(nxt)
                stack.append(iter(sorted(direct_deps(graph, nxt))))
    return cycles


def ensure_acyclic(graph: Graph) -> None:
    cycles = find_cycles(graph)
    if cycles:
        raise CycleError(cycles[0])


__all__ = ["find_cycles", "ensure_acyclic"]
