"""Read-only views of the game world used by presentation code and tests."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from esper import World

from jeopardy.components.active_turn import ActiveTurn
from jeopardy.components.answered_cells import AnsweredCells
from jeopardy.components.board import QuestionBoard
from jeopardy.components.cell import CellId
from jeopardy.components.scoreboard import Scoreboard
from jeopardy.components.selection import Selection
from jeopardy.components.team import Team
from jeopardy.errors import CellLookupError
from jeopardy.utils.components import first_component, require_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectionView:
    """Everything the modal needs to draw the open clue."""

    category: str
    value: int
    question: str
    answer: str
    revealed: bool


def board(world: World) -> QuestionBoard:
    return require_component(world, QuestionBoard)


def is_answered(world: World, category: str, value: int) -> bool:
    return CellId(category, value) in require_component(world, AnsweredCells)


def current_selection(world: World) -> SelectionView | None:
    """Return the open clue with its text, or None when nothing is selected.

    Raises CellLookupError if the selection points at a cell the board does
    not contain.
    """
    entry = first_component(world, Selection)
    if entry is None:
        return None
    selection = entry[1]
    cell = selection.cell
    try:
        clue = board(world).clue_for(cell)
    except KeyError:
        logger.error("Open selection %s / %s is not on the board", cell.category, cell.value)
        raise CellLookupError(cell.category, cell.value) from None
    return SelectionView(
        category=cell.category,
        value=cell.value,
        question=clue.question,
        answer=clue.answer,
        revealed=selection.revealed,
    )


def scores(world: World) -> Dict[Team, int]:
    return require_component(world, Scoreboard).snapshot()


def active_team(world: World) -> Team:
    return require_component(world, ActiveTurn).team


def remaining_cells(world: World) -> List[CellId]:
    answered = require_component(world, AnsweredCells)
    return [cell for cell in board(world).cells() if cell not in answered]


def is_board_cleared(world: World) -> bool:
    return not remaining_cells(world)


def leading_team(world: World) -> Team | None:
    """Team with the higher score, or None while the scores are level."""
    totals = scores(world)
    if totals[Team.A] == totals[Team.B]:
        return None
    return Team.A if totals[Team.A] > totals[Team.B] else Team.B
