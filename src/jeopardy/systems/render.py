from __future__ import annotations

from esper import World

from jeopardy.components.board import QuestionBoard
from jeopardy.constants import (
    ANSWER_TEXT_COLOR,
    ANSWERED_CELL_COLOR,
    CELL_COLOR,
    CELL_TEXT_COLOR,
    CORRECT_BUTTON_COLOR,
    HEADER_COLOR,
    INCORRECT_BUTTON_COLOR,
    MODAL_BUTTON_HEIGHT,
    MODAL_COLOR,
    MODAL_PADDING,
    MODAL_TEXT_COLOR,
    OVERLAY_COLOR,
    REVEAL_BUTTON_COLOR,
    TEAM_COLORS,
    TEAM_HIGHLIGHT_COLORS,
)
from jeopardy.events.bus import EventBus
from jeopardy.ui.layout import BoardLayout, Rect, compute_board_layout
from jeopardy.utils import queries
from jeopardy.utils.components import require_component


class RenderSystem:
    """Draws scoreboard, clue grid and the open clue modal."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.layout: BoardLayout | None = None
        self._last_window_size: tuple[int, int] | None = None

    def notify_resize(self, width: int, height: int):
        self._last_window_size = None

    def refresh_layout(self) -> BoardLayout:
        size = (self.window.width, self.window.height)
        if self.layout is None or size != self._last_window_size:
            board = require_component(self.world, QuestionBoard)
            self.layout = compute_board_layout(size[0], size[1], board)
            self._last_window_size = size
        return self.layout

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except RuntimeError:
            headless = True
        layout = self.refresh_layout()
        if headless:
            return
        self._draw_scoreboard(arcade, layout)
        self._draw_grid(arcade, layout)
        self._draw_modal(arcade, layout)

    def _draw_scoreboard(self, arcade, layout: BoardLayout) -> None:
        totals = queries.scores(self.world)
        active = queries.active_team(self.world)
        for team, rect in layout.team_panels.items():
            left, bottom, width, height = rect
            is_active = team is active
            if is_active:
                arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, TEAM_HIGHLIGHT_COLORS[team])
                arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, TEAM_COLORS[team], border_width=3)
            label = f"Team {team.value}: ${totals[team]}"
            if is_active:
                label += "  ★"
            arcade.draw_text(
                label,
                left + width / 2,
                bottom + height / 2,
                MODAL_TEXT_COLOR if is_active else CELL_TEXT_COLOR,
                24,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _draw_grid(self, arcade, layout: BoardLayout) -> None:
        for category, rect in layout.headers.items():
            self._draw_box(arcade, rect, HEADER_COLOR, category, 20)
        for cell, rect in layout.cells.items():
            if queries.is_answered(self.world, cell.category, cell.value):
                self._draw_box(arcade, rect, ANSWERED_CELL_COLOR, "", 24)
            else:
                self._draw_box(arcade, rect, CELL_COLOR, f"${cell.value}", 24)

    def _draw_modal(self, arcade, layout: BoardLayout) -> None:
        view = queries.current_selection(self.world)
        if view is None:
            return
        arcade.draw_lrbt_rectangle_filled(0, layout.window_width, 0, layout.window_height, OVERLAY_COLOR)
        left, bottom, width, height = layout.modal
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, MODAL_COLOR)
        text_left = left + MODAL_PADDING
        text_width = width - 2 * MODAL_PADDING
        top = bottom + height - MODAL_PADDING
        arcade.draw_text(
            f"{view.category} - ${view.value}",
            text_left,
            top,
            MODAL_TEXT_COLOR,
            24,
            anchor_x="left",
            anchor_y="top",
            bold=True,
        )
        question = arcade.Text(
            view.question,
            text_left,
            top - 48,
            MODAL_TEXT_COLOR,
            font_size=18,
            width=int(text_width),
            multiline=True,
            anchor_x="left",
            anchor_y="top",
        )
        question.draw()
        if view.revealed:
            arcade.draw_text(
                view.answer,
                text_left,
                bottom + MODAL_PADDING + MODAL_BUTTON_HEIGHT + MODAL_PADDING,
                ANSWER_TEXT_COLOR,
                16,
                width=int(text_width),
                multiline=True,
                anchor_x="left",
                anchor_y="bottom",
            )
            self._draw_box(arcade, layout.correct_button, CORRECT_BUTTON_COLOR, "Correct", 16)
            self._draw_box(arcade, layout.incorrect_button, INCORRECT_BUTTON_COLOR, "Incorrect", 16)
        else:
            self._draw_box(arcade, layout.reveal_button, REVEAL_BUTTON_COLOR, "Show Answer", 16)

    @staticmethod
    def _draw_box(arcade, rect: Rect, fill, label: str, font_size: int) -> None:
        left, bottom, width, height = rect
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
        if label:
            arcade.draw_text(
                label,
                left + width / 2,
                bottom + height / 2,
                CELL_TEXT_COLOR,
                font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
