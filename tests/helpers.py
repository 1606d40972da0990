from __future__ import annotations

from jeopardy.events.bus import EventBus

SPORTS_BOARD = {"Sports": {200: {"q": "Q1", "a": "A1"}}}

TWO_BY_TWO_BOARD = {
    "Sports": {
        200: {"question": "Sports 200", "answer": "Answer S200"},
        400: {"question": "Sports 400", "answer": "Answer S400"},
    },
    "Literature": {
        200: {"question": "Literature 200", "answer": "Answer L200"},
        400: {"question": "Literature 400", "answer": "Answer L400"},
    },
}


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def record(bus: EventBus, *names: str) -> list[tuple[str, dict]]:
    """Subscribe to ``names`` and collect ``(name, payload)`` pairs in emission order."""
    received: list[tuple[str, dict]] = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **payload: received.append((_name, payload)))
    return received


def play_clue(session, category: str, value: int, correct: bool) -> None:
    """Open, reveal and judge one clue, asserting each step applies."""
    assert session.select_cell(category, value)
    assert session.reveal_answer()
    assert session.judge(correct)


def rect_center(rect) -> tuple[float, float]:
    left, bottom, width, height = rect
    return left + width / 2, bottom + height / 2
