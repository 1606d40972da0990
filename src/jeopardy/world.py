from __future__ import annotations

from typing import Any, Mapping

from esper import World

from jeopardy.components.active_turn import ActiveTurn
from jeopardy.components.answered_cells import AnsweredCells
from jeopardy.components.board import QuestionBoard
from jeopardy.components.scoreboard import Scoreboard
from jeopardy.components.turn_order import TurnOrder
from jeopardy.constants import TEAM_ORDER
from jeopardy.factories.board import build_board, create_default_board


def create_world(
    board: QuestionBoard | Mapping[str, Mapping[Any, Any]] | None = None,
) -> World:
    """Create a fresh game world: board, turn order, scores and answered set.

    ``board`` may be a QuestionBoard or a raw ``{category: {value: clue}}``
    table; the shipped clues are used when omitted. No selection is open.
    """
    world = World()

    # Board is a read-only resource on its own entity.
    question_board = create_default_board() if board is None else build_board(board)
    world.create_entity(question_board)

    order = TurnOrder(teams=list(TEAM_ORDER), index=0)
    world.create_entity(order, ActiveTurn(team=order.current()))

    world.create_entity(Scoreboard(), AnsweredCells())
    return world
