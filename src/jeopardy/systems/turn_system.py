from __future__ import annotations

from esper import World

from jeopardy.components.active_turn import ActiveTurn
from jeopardy.components.team import Team
from jeopardy.components.turn_order import TurnOrder
from jeopardy.utils.components import require_component


def advance_turn(world: World) -> tuple[Team, Team]:
    """Advance the turn order by one and sync ActiveTurn.

    Returns ``(previous_team, new_team)``. Emitting the change is left to the
    caller so it can be ordered after the rest of its state updates.
    """
    order = require_component(world, TurnOrder)
    active = require_component(world, ActiveTurn)
    previous_team = active.team
    order.advance()
    active.team = order.current()
    return previous_team, active.team
