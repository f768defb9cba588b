"""Analysis pipeline.

scan → build → induced ancestors of the target → cycle guard → transitive
reduction → edge lines. Each stage publishes an event and records its
latency; a failure publishes ``AnalysisFailed`` and re-raises before any
line has been produced.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

from mindeps import metrics
from mindeps.config import AggregatedConfig, get_config
from mindeps.errors import map_exception, validate_error_type
from mindeps.events import (
    AnalysisFailed,
    AncestorsExtracted,
    GraphBuilt,
    GraphReduced,
    WorkspaceScanned,
    publish,
)
from mindeps.graph import (
    Graph,
    build_graph,
    edge_count,
    ensure_acyclic,
    format_edges,
    induced_ancestors,
    transitive_reduction,
)
from mindeps.scan import ModuleFilter, collect_candidates, discover_packages

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    target: str
    full: Graph
    ancestors: Graph
    minimal: Graph
    lines: List[str]

    @property
    def removed_edges(self) -> int:
        return edge_count(self.ancestors) - edge_count(self.minimal)


def _fail(target: str | None, exc: Exception) -> None:
    code = validate_error_type(map_exception(exc))
    metrics.inc("analysis_failed_total", {"error_type": code})
    publish(AnalysisFailed(target=target, error_type=code, message=str(exc)))


def scan_workspace(
    root: str | Path, cfg: AggregatedConfig
) -> Mapping[str, List[str]]:
    scan = cfg.scan
    with metrics.stage_timer("scan"):
        packages = discover_packages(
            root,
            scan.folders,
            scan.manifest_name,
            ModuleFilter.from_config(scan),
        )
        candidates = collect_candidates(packages, scan.delimiter)
    publish(
        WorkspaceScanned(
            root=str(root),
            packages=len(packages),
            candidates=sum(len(c) for c in candidates.values()),
        )
    )
    return candidates


def analyze_graph(
    graph: Graph,
    target: str,
    check_acyclic: bool = True,
    arrow: str = " -> ",
) -> AnalysisResult:
    """Run the core stages on an already built graph."""
    try:
        with metrics.stage_timer("ancestors"):
            ancestors = induced_ancestors(graph, target)
        publish(
            AncestorsExtracted(
                target=target,
                modules=len(ancestors),
                edges=edge_count(ancestors),
            )
        )
        metrics.inc(
            "graph_edges_total", {"stage": "ancestors"}, edge_count(ancestors)
        )
        if check_acyclic:
            ensure_acyclic(ancestors)
        else:
            log.warning(
                "cycle check disabled; reduction of %s is unverified", target
            )
        with metrics.stage_timer("reduce"):
            minimal = transitive_reduction(ancestors)
    except Exception as e:
        _fail(target, e)
        raise
    before, after = edge_count(ancestors), edge_count(minimal)
    metrics.inc("graph_edges_total", {"stage": "minimal"}, after)
    metrics.inc("edges_removed_total", value=before - after)
    publish(
        GraphReduced(
            target=target,
            edges_before=before,
            edges_after=after,
            checked_acyclic=check_acyclic,
        )
    )
    log.info(
        "%s: %d modules, %d -> %d edges", target, len(minimal), before, after
    )
    return AnalysisResult(
        target=target,
        full=graph,
        ancestors=ancestors,
        minimal=minimal,
        lines=format_edges(minimal, arrow),
    )


def analyze(
    root: str | Path,
    target: str | None = None,
    cfg: AggregatedConfig | None = None,
) -> AnalysisResult:
    cfg = cfg or get_config()
    target = target if target is not None else cfg.analysis.target
    try:
        candidates = scan_workspace(root, cfg)
    except Exception as e:
        _fail(target, e)
        raise
    with metrics.stage_timer("build"):
        graph = build_graph(candidates.keys(), candidates)
    edges = edge_count(graph)
    metrics.inc("graph_edges_total", {"stage": "full"}, edges)
    publish(
        GraphBuilt(
            modules=len(graph),
            edges=edges,
            dropped_candidates=sum(
                1 for c in candidates.values() for t in c if t not in graph
            ),
        )
    )
    return analyze_graph(
        graph,
        target,
        check_acyclic=cfg.analysis.check_acyclic,
        arrow=cfg.output.arrow,
    )


__all__ = ["AnalysisResult", "analyze", "analyze_graph", "scan_workspace"]
