from __future__ import annotations

import logging

from esper import World

from jeopardy.components.active_turn import ActiveTurn
from jeopardy.components.answered_cells import AnsweredCells
from jeopardy.components.board import QuestionBoard
from jeopardy.components.cell import CellId
from jeopardy.components.selection import Selection
from jeopardy.events.bus import (
    EventBus,
    EVENT_ANSWER_REVEALED,
    EVENT_CELL_CLICK,
    EVENT_DISMISS_REQUEST,
    EVENT_REVEAL_REQUEST,
    EVENT_SELECTION_DISMISSED,
    EVENT_SELECTION_OPENED,
)
from jeopardy.utils.components import first_component, require_component

logger = logging.getLogger(__name__)


class SelectionSystem:
    """Opens, reveals and dismisses the clue modal.

    Flow:
      - select_cell opens a Selection when none is open and the cell is a
        live, unanswered board cell.
      - reveal_answer flips the open Selection to revealed once.
      - dismiss_selection closes the Selection with no scoring or turn change.
    Requests that do not apply are ignored and return False; stale clicks and
    double clicks land here.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_REVEAL_REQUEST, self.on_reveal_request)
        self.event_bus.subscribe(EVENT_DISMISS_REQUEST, self.on_dismiss_request)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_cell_click(self, sender, **payload) -> None:
        category = payload.get("category")
        value = payload.get("value")
        if category is None or value is None:
            return
        self.select_cell(category, value)

    def on_reveal_request(self, sender, **payload) -> None:
        self.reveal_answer()

    def on_dismiss_request(self, sender, **payload) -> None:
        self.dismiss_selection(reason=payload.get("reason", "dismissed"))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def select_cell(self, category: str, value: int) -> bool:
        if first_component(self.world, Selection) is not None:
            logger.debug("Ignoring pick of %s / %s: a clue is already open", category, value)
            return False
        if isinstance(value, bool) or not isinstance(value, int):
            logger.debug("Ignoring pick of %s / %r: value is not an integer", category, value)
            return False
        cell = CellId(category, value)
        if cell in require_component(self.world, AnsweredCells):
            logger.debug("Ignoring pick of %s / %s: already answered", category, value)
            return False
        if not require_component(self.world, QuestionBoard).has_cell(category, value):
            logger.debug("Ignoring pick of %s / %s: not on the board", category, value)
            return False
        self.world.create_entity(Selection(cell=cell, revealed=False))
        self.event_bus.emit(
            EVENT_SELECTION_OPENED,
            category=category,
            value=value,
            team=require_component(self.world, ActiveTurn).team,
        )
        return True

    def reveal_answer(self) -> bool:
        entry = first_component(self.world, Selection)
        if entry is None:
            return False
        selection = entry[1]
        if selection.revealed:
            return False
        selection.revealed = True
        self.event_bus.emit(
            EVENT_ANSWER_REVEALED,
            category=selection.cell.category,
            value=selection.cell.value,
        )
        return True

    def dismiss_selection(self, reason: str = "dismissed") -> bool:
        entry = first_component(self.world, Selection)
        if entry is None:
            return False
        entity, selection = entry
        self.world.delete_entity(entity, immediate=True)
        self.event_bus.emit(
            EVENT_SELECTION_DISMISSED,
            category=selection.cell.category,
            value=selection.cell.value,
            reason=reason,
        )
        return True
