"""Presentation of a (minimal) graph: plain edge lines or Graphviz DOT."""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Tuple

from mindeps.graph import Graph, ensure_acyclic, format_edges, iter_edges


def render_text(graph: Graph, arrow: str = " -> ") -> str:
    lines = format_edges(graph, arrow)
    return "\n".join(lines) + ("\n" if lines else "")


def compute_ranks(
    graph: Graph,
) -> Tuple[Dict[str, int], Dict[int, List[str]]]:
    """Layer modules: no dependencies → rank 0, else 1 + max dep rank.

    Raises CycleError on cyclic input (ranks are undefined there).
    """
    ensure_acyclic(graph)
    rank_map: Dict[str, int] = {}
    for start in sorted(graph):
        stack = [start]
        while stack:
            mod = stack[-1]
            if mod in rank_map:
                stack.pop()
                continue
            pending = [d for d in sorted(graph[mod]) if d not in rank_map]
            if pending:
                stack.extend(pending)
                continue
            rank_map[mod] = max(
                (rank_map[d] + 1 for d in graph[mod]), default=0
            )
            stack.pop()
    ranks: Dict[int, List[str]] = defaultdict(list)
    for mod in sorted(rank_map):
        ranks[rank_map[mod]].append(mod)
    return rank_map, dict(ranks)


def _quote(name: str) -> str:
    return '"' + name.replace('"', '\\"') + '"'


def render_dot(graph: Graph, name: str = "Dependencies") -> str:
    _, ranks = compute_ranks(graph)
    lines = [f"digraph {_quote(name)} {{", "  node [shape=box];", ""]
    for mod in sorted(graph):
        lines.append(f"  {_quote(mod)};")
    lines.append("")
    for rank in sorted(ranks):
        lines.append(f"  subgraph rank{rank} {{")
        lines.append("    rank=same;")
        for mod in ranks[rank]:
            lines.append(f"    {_quote(mod)};")
        lines.append("  }")
    lines.append("")
    for dep, mod in iter_edges(graph):
        lines.append(f"  {_quote(dep)} -> {_quote(mod)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


__all__ = ["render_text", "render_dot", "compute_ranks"]
