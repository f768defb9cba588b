"""Graph Builder: raw (module, candidate) observations → closed graph.

Candidates come from a lexically naive manifest scan, so false positives
are expected; any token that is not a known module is dropped silently.
"""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from mindeps import metrics

from .types import Graph, MutableGraph

log = logging.getLogger(__name__)


def build_graph(
    modules: Iterable[str],
    candidates: Mapping[str, Iterable[str]],
) -> Graph:
    known = set(modules)
    graph: MutableGraph = {}
    dropped = 0
    for mod in sorted(known):
        deps = set()
        for token in candidates.get(mod, ()):
            if token in known:
                deps.add(token)
            else:
                dropped += 1
        graph[mod] = frozenset(deps)
    ignored = sorted(set(candidates) - known)
    if ignored:
        log.debug("ignoring candidates of unknown modules: %s", ignored)
    if dropped:
        metrics.inc("candidates_dropped_total", value=dropped)
        log.debug("dropped %d candidate tokens naming no module", dropped)
    return graph


def edge_count(graph: Graph) -> int:
    return sum(len(deps) for deps in graph.values())


__all__ = ["build_graph", "edge_count"]
