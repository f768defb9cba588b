"""Sync in-process event bus.

Features:
  - subscribe(event_name, handler)
  - emit(event_name, payload) adds ts if missing
  - handler isolation (exceptions counted and logged, not propagated)
  - metrics counters:
        events_emitted_total{event}, handler_exceptions_total{event}

The analysis pipeline publishes one event per stage; the CLI and tests
subscribe to observe progress without coupling to the graph code.
"""
from __future__ import annotations

import logging
from threading import RLock
from time import time
from typing import Any, Callable, Dict, List

from mindeps import metrics

Handler = Callable[[Dict[str, Any]], None]

log = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Handler]] = {}
        self._lock = RLock()

    def subscribe(self, event: str, handler: Handler) -> None:
        with self._lock:
            self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        with self._lock:
            handlers = self._subs.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

    def emit(self, event: str, payload: Dict[str, Any]) -> None:
        if "ts" not in payload:
            payload["ts"] = time()
        with self._lock:
            subs = list(self._subs.get(event, ()))
        metrics.inc("events_emitted_total", {"event": event})
        for h in subs:
            try:
                h(dict(payload))  # shallow copy per handler
            except Exception:  # noqa: BLE001
                metrics.inc("handler_exceptions_total", {"event": event})
                log.exception("event handler failed for %s", event)

    def reset_for_tests(self) -> None:  # pragma: no cover
        with self._lock:
            self._subs.clear()


_BUS = EventBus()


def subscribe(event: str, handler: Handler) -> None:
    _BUS.subscribe(event, handler)


def unsubscribe(event: str, handler: Handler) -> None:
    _BUS.unsubscribe(event, handler)


def emit(event: str, payload: Dict[str, Any]) -> None:
    _BUS.emit(event, payload)


def reset_for_tests() -> None:  # pragma: no cover
    _BUS.reset_for_tests()


__all__ = ["emit", "subscribe", "unsubscribe", "EventBus", "reset_for_tests"]
