from __future__ import annotations

from esper import World

from jeopardy.components.answered_cells import AnsweredCells
from jeopardy.components.board import QuestionBoard
from jeopardy.components.selection import Selection
from jeopardy.constants import KEY_ESCAPE, MOUSE_BUTTON_LEFT
from jeopardy.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_DISMISS_REQUEST,
    EVENT_JUDGE_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_REVEAL_REQUEST,
)
from jeopardy.ui.layout import compute_board_layout, point_in_rect
from jeopardy.utils.components import first_component, require_component


class InputSystem:
    """Turns raw mouse and keyboard presses into player intents."""

    def __init__(self, world: World, event_bus: EventBus, window) -> None:
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        self.handle_mouse_press(float(x), float(y), button)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(symbol, kwargs.get('modifiers', 0))

    def handle_mouse_press(self, x: float, y: float, button=MOUSE_BUTTON_LEFT) -> None:
        if button != MOUSE_BUTTON_LEFT:
            return
        board = require_component(self.world, QuestionBoard)
        layout = compute_board_layout(self.window.width, self.window.height, board)
        selection_entry = first_component(self.world, Selection)
        if selection_entry is not None:
            self._handle_modal_press(x, y, layout, selection_entry[1])
            return
        cell = layout.cell_at(x, y)
        if cell is None:
            return
        if cell in require_component(self.world, AnsweredCells):
            return
        self.event_bus.emit(EVENT_CELL_CLICK, category=cell.category, value=cell.value)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        if symbol != KEY_ESCAPE:
            return
        if first_component(self.world, Selection) is None:
            return
        self.event_bus.emit(EVENT_DISMISS_REQUEST, reason="escape")

    def _handle_modal_press(self, x: float, y: float, layout, selection: Selection) -> None:
        if not point_in_rect(x, y, layout.modal):
            self.event_bus.emit(EVENT_DISMISS_REQUEST, reason="click_outside")
            return
        if not selection.revealed:
            if point_in_rect(x, y, layout.reveal_button):
                self.event_bus.emit(EVENT_REVEAL_REQUEST)
            return
        if point_in_rect(x, y, layout.correct_button):
            self.event_bus.emit(EVENT_JUDGE_REQUEST, correct=True)
        elif point_in_rect(x, y, layout.incorrect_button):
            self.event_bus.emit(EVENT_JUDGE_REQUEST, correct=False)
