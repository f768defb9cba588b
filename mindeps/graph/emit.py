"""Deterministic edge emission.

Edges are reported dependency first: ``u -> v`` in the graph ("u depends
on v") is emitted as ``(v, u)``.
"""
from __future__ import annotations

from typing import Iterator, List

from .types import Edge, Graph


def iter_edges(graph: Graph) -> Iterator[Edge]:
    for mod in sorted(graph):
        for dep in sorted(graph[mod]):
            yield dep, mod


def format_edges(graph: Graph, arrow: str = " -> ") -> List[str]:
    return [f"{dep}{arrow}{mod}" for dep, mod in iter_edges(graph)]


__all__ = ["iter_edges", "format_edges"]
