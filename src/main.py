"""Entry point for the two-team Jeopardy board.

Sets up the game session, event bus, presentation systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from jeopardy.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from jeopardy.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS
from jeopardy.session import GameSession
from jeopardy.systems.feedback_system import FeedbackSystem
from jeopardy.systems.input import InputSystem
from jeopardy.systems.render import RenderSystem


class JeopardyWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.session = GameSession()
        self.event_bus = self.session.event_bus
        self.world = self.session.world
        self.feedback_system = FeedbackSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.world, self.event_bus, self)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.render_system.notify_resize(width, height)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = JeopardyWindow()
    run()

if __name__ == "__main__":
    main()
