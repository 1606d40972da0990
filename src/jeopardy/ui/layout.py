from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from jeopardy.components.board import QuestionBoard
from jeopardy.components.cell import CellId
from jeopardy.components.team import Team
from jeopardy.constants import (
    BOARD_MARGIN,
    CELL_GAP,
    MODAL_BUTTON_GAP,
    MODAL_BUTTON_HEIGHT,
    MODAL_BUTTON_WIDTH,
    MODAL_HEIGHT_PCT,
    MODAL_MAX_HEIGHT,
    MODAL_MAX_WIDTH,
    MODAL_PADDING,
    MODAL_WIDTH_PCT,
    SCOREBOARD_HEIGHT,
    SCOREBOARD_PANEL_WIDTH_PCT,
)

# (left, bottom, width, height) in window coordinates, y pointing up.
Rect = Tuple[float, float, float, float]


def point_in_rect(x: float, y: float, rect: Rect | None) -> bool:
    if rect is None:
        return False
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height


@dataclass(slots=True)
class BoardLayout:
    """Screen rectangles for every clickable or drawable piece of the board."""

    window_width: float
    window_height: float
    team_panels: Dict[Team, Rect] = field(default_factory=dict)
    headers: Dict[str, Rect] = field(default_factory=dict)
    cells: Dict[CellId, Rect] = field(default_factory=dict)
    modal: Rect = (0.0, 0.0, 0.0, 0.0)
    reveal_button: Rect = (0.0, 0.0, 0.0, 0.0)
    correct_button: Rect = (0.0, 0.0, 0.0, 0.0)
    incorrect_button: Rect = (0.0, 0.0, 0.0, 0.0)

    def cell_at(self, x: float, y: float) -> CellId | None:
        for cell, rect in self.cells.items():
            if point_in_rect(x, y, rect):
                return cell
        return None


def compute_board_layout(window_width: float, window_height: float, board: QuestionBoard) -> BoardLayout:
    """Return the BoardLayout for a window of the given size.

    The scoreboard spans the top band, one column per category below it with a
    header row followed by one row per distinct value. Missing category/value
    pairs get no rect. The modal and its buttons are centered on the window.
    """
    layout = BoardLayout(window_width=window_width, window_height=window_height)

    panel_width = window_width * SCOREBOARD_PANEL_WIDTH_PCT
    panel_height = SCOREBOARD_HEIGHT - CELL_GAP
    panel_bottom = window_height - BOARD_MARGIN - panel_height
    layout.team_panels[Team.A] = (BOARD_MARGIN, panel_bottom, panel_width, panel_height)
    layout.team_panels[Team.B] = (
        window_width - BOARD_MARGIN - panel_width,
        panel_bottom,
        panel_width,
        panel_height,
    )

    categories = board.category_names
    values = board.values
    if categories:
        cols = len(categories)
        rows = len(values) + 1
        board_top = window_height - BOARD_MARGIN - SCOREBOARD_HEIGHT
        board_bottom = BOARD_MARGIN
        cell_w = (window_width - 2 * BOARD_MARGIN - CELL_GAP * (cols - 1)) / cols
        cell_h = (board_top - board_bottom - CELL_GAP * (rows - 1)) / rows
        for col, category in enumerate(categories):
            left = BOARD_MARGIN + col * (cell_w + CELL_GAP)
            layout.headers[category] = (left, board_top - cell_h, cell_w, cell_h)
            for row, value in enumerate(values, start=1):
                if not board.has_cell(category, value):
                    continue
                top = board_top - row * (cell_h + CELL_GAP)
                layout.cells[CellId(category, value)] = (left, top - cell_h, cell_w, cell_h)

    modal_w = min(window_width * MODAL_WIDTH_PCT, MODAL_MAX_WIDTH)
    modal_h = min(window_height * MODAL_HEIGHT_PCT, MODAL_MAX_HEIGHT)
    modal_left = (window_width - modal_w) / 2
    modal_bottom = (window_height - modal_h) / 2
    layout.modal = (modal_left, modal_bottom, modal_w, modal_h)

    # Judge buttons sit bottom-right in the modal. Reveal sits one row above
    # them so a repeated click on it never lands on a judge button.
    button_bottom = modal_bottom + MODAL_PADDING
    right_left = modal_left + modal_w - MODAL_PADDING - MODAL_BUTTON_WIDTH
    layout.reveal_button = (
        right_left,
        button_bottom + MODAL_BUTTON_HEIGHT + MODAL_BUTTON_GAP,
        MODAL_BUTTON_WIDTH,
        MODAL_BUTTON_HEIGHT,
    )
    layout.incorrect_button = (right_left, button_bottom, MODAL_BUTTON_WIDTH, MODAL_BUTTON_HEIGHT)
    layout.correct_button = (
        right_left - MODAL_BUTTON_GAP - MODAL_BUTTON_WIDTH,
        button_bottom,
        MODAL_BUTTON_WIDTH,
        MODAL_BUTTON_HEIGHT,
    )
    return layout
