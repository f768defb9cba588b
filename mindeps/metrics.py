"""Minimal in-memory metrics collector.

Purpose:
    - Counters and simple latency samples for each analysis stage.
    - Zero external deps; a real exporter can replace it later.

Core API (intentionally tiny):
    inc(name, labels=None, value=1)
    observe(name, value, labels=None)
    snapshot() -> dict (copy for safe reading)

Thread-safety: coarse RLock; overhead negligible for one run per process.

Metric names (documented for discoverability):
    - modules_discovered_total
    - candidates_dropped_total
    - graph_edges_total{stage}           # full|ancestors|minimal
    - edges_removed_total
    - stage_latency_ms{stage}            # histogram, via stage_timer()
    - analysis_failed_total{error_type}
    - env_override_total{path}
    - config_validation_errors_total{path,code}
    - events_emitted_total{event}, handler_exceptions_total{event}
"""
from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from time import perf_counter, time
from typing import Any, Dict, Iterator, List, Tuple

Labels = Tuple[Tuple[str, str], ...]
MetricKey = Tuple[str, Labels]

_COUNTERS: Dict[MetricKey, float] = {}
_HIST: Dict[MetricKey, List[float]] = {}
_LOCK = RLock()


def _key(name: str, labels: dict[str, Any] | None) -> MetricKey:
    if not labels:
        return name, ()
    return name, tuple(sorted((str(k), str(v)) for k, v in labels.items()))


def _label_str(labels: Labels) -> str:
    if not labels:
        return ""
    return "{" + ",".join(f"{k}={v}" for k, v in labels) + "}"


def inc(
    name: str,
    labels: dict[str, Any] | None = None,
    value: float = 1.0,
) -> None:
    key = _key(name, labels)
    with _LOCK:
        _COUNTERS[key] = _COUNTERS.get(key, 0.0) + value


def observe(
    name: str,
    value: float,
    labels: dict[str, Any] | None = None,
) -> None:
    key = _key(name, labels)
    with _LOCK:
        _HIST.setdefault(key, []).append(value)


@contextmanager
def stage_timer(stage: str) -> Iterator[None]:
    """Record the wall time of one pipeline stage in ``stage_latency_ms``.

    Recorded even when the stage raises.
    """
    t0 = perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (perf_counter() - t0) * 1000
        observe("stage_latency_ms", elapsed_ms, {"stage": stage})


def snapshot() -> dict[str, Any]:
    with _LOCK:
        counters = {
            name + _label_str(labels): v
            for (name, labels), v in _COUNTERS.items()
        }
        hist = {}
        for (name, labels), vals in _HIST.items():
            if not vals:
                continue
            hist[name + _label_str(labels)] = {
                "count": len(vals),
                "min": min(vals),
                "max": max(vals),
                "p50": sorted(vals)[len(vals) // 2],
                "last": vals[-1],
            }
        return {
            "ts": time(),
            "counters": counters,
            "histograms": hist,
        }


def reset_for_tests() -> None:  # pragma: no cover
    with _LOCK:
        _COUNTERS.clear()
        _HIST.clear()


__all__ = [
    "inc",
    "observe",
    "stage_timer",
    "snapshot",
    "reset_for_tests",
]
