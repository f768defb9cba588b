from mindeps import metrics
from mindeps.eventbus import EventBus, emit, subscribe, unsubscribe
from mindeps.events import GraphBuilt, publish


def test_eventbus_basic_dispatch():
    got = []

    def h1(p):
        got.append(p["value"])

    def h2(p):
        got.append(p["value"] * 2)

    subscribe("TestEvent", h1)
    subscribe("TestEvent", h2)
    try:
        emit("TestEvent", {"value": 3})
    finally:
        unsubscribe("TestEvent", h1)
        unsubscribe("TestEvent", h2)
    assert sorted(got) == [3, 6]
    snap = metrics.snapshot()["counters"]
    assert any("events_emitted_total" in k for k in snap)


def test_handler_exception_isolated():
    metrics.reset_for_tests()
    bus = EventBus()
    got = []

    def bad(_):
        raise RuntimeError("boom")

    bus.subscribe("E", bad)
    bus.subscribe("E", lambda p: got.append(p))
    bus.emit("E", {})
    assert len(got) == 1 and "ts" in got[0]
    counters = metrics.snapshot()["counters"]
    assert counters["handler_exceptions_total{event=E}"] == 1


def test_publish_dataclass_event():
    got = []
    handler = got.append
    subscribe("GraphBuilt", handler)
    try:
        publish(GraphBuilt(modules=3, edges=2, dropped_candidates=5))
    finally:
        unsubscribe("GraphBuilt", handler)
    assert got[0]["modules"] == 3
    assert got[0]["dropped_candidates"] == 5
    assert got[0]["ts"]
