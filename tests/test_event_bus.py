from jeopardy.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_event_bus_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_event_bus_keeps_bound_methods_alive():
    bus = EventBus()
    calls = []

    class Listener:
        def on_event(self, sender, **kwargs):
            calls.append(kwargs)

    bus.subscribe("ping", Listener().on_event)
    bus.emit("ping", n=1)
    assert calls == [{"n": 1}]
