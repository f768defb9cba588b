"""Event dataclasses published by the analysis pipeline.

Each dataclass maps to one event name (its class name) on the bus in
``mindeps.eventbus``. Use ``publish(event)`` rather than building payload
dicts by hand.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from time import time
from typing import Any, Dict

from mindeps.eventbus import emit as _emit_bus


@dataclass(slots=True)
class BaseEvent:
    def to_event(self) -> Dict[str, Any]:  # noqa: D401
        data = asdict(self)
        data["ts"] = data.get("ts") or time()
        return data


@dataclass(slots=True)
class WorkspaceScanned(BaseEvent):
    root: str
    packages: int
    candidates: int


@dataclass(slots=True)
class GraphBuilt(BaseEvent):
    modules: int
    edges: int
    dropped_candidates: int


@dataclass(slots=True)
class AncestorsExtracted(BaseEvent):
    target: str
    modules: int
    edges: int


@dataclass(slots=True)
class GraphReduced(BaseEvent):
    """Transitive reduction finished.

    edges_before / edges_after: edge counts of the ancestor subgraph and of
    the minimal graph. checked_acyclic: whether the cycle guard ran.
    """
    target: str
    edges_before: int
    edges_after: int
    checked_acyclic: bool = True


@dataclass(slots=True)
class AnalysisFailed(BaseEvent):
    target: str | None
    error_type: str
    message: str | None = None


EVENT_TYPES = (
    WorkspaceScanned,
    GraphBuilt,
    AncestorsExtracted,
    GraphReduced,
    AnalysisFailed,
)


def publish(event: BaseEvent) -> None:
    _emit_bus(type(event).__name__, event.to_event())


__all__ = [
    "BaseEvent",
    "WorkspaceScanned",
    "GraphBuilt",
    "AncestorsExtracted",
    "GraphReduced",
    "AnalysisFailed",
    "EVENT_TYPES",
    "publish",
]
