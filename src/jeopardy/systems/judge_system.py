from __future__ import annotations

import logging

from esper import World

from jeopardy.components.active_turn import ActiveTurn
from jeopardy.components.answered_cells import AnsweredCells
from jeopardy.components.scoreboard import Scoreboard
from jeopardy.components.selection import Selection
from jeopardy.events.bus import (
    EventBus,
    EVENT_BOARD_CLEARED,
    EVENT_CELL_ANSWERED,
    EVENT_JUDGE_REQUEST,
    EVENT_JUDGED_CORRECT,
    EVENT_JUDGED_INCORRECT,
    EVENT_SCORE_CHANGED,
    EVENT_TURN_ADVANCED,
)
from jeopardy.systems.turn_system import advance_turn
from jeopardy.utils import queries
from jeopardy.utils.components import first_component, require_component

logger = logging.getLogger(__name__)


class JudgeSystem:
    """Resolves the open clue as correct or incorrect.

    A judgment marks the cell answered, credits the active team with the cell
    value when correct, and passes the turn to the other team either way. The
    world is fully updated before any signal goes out, so subscribers always
    observe the post-judgment state.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_JUDGE_REQUEST, self.on_judge_request)

    def on_judge_request(self, sender, **payload) -> None:
        correct = payload.get("correct")
        if correct is None:
            return
        self.judge(bool(correct))

    def judge(self, is_correct: bool) -> bool:
        entry = first_component(self.world, Selection)
        if entry is None:
            logger.debug("Ignoring judgment: no clue is open")
            return False
        selection_entity, selection = entry
        cell = selection.cell
        team = require_component(self.world, ActiveTurn).team

        require_component(self.world, AnsweredCells).mark(cell)
        new_score = None
        if is_correct:
            new_score = require_component(self.world, Scoreboard).award(team, cell.value)
        previous_team, new_team = advance_turn(self.world)
        self.world.delete_entity(selection_entity, immediate=True)
        logger.info(
            "Team %s judged %s on %s / %s",
            team.value,
            "correct" if is_correct else "incorrect",
            cell.category,
            cell.value,
        )

        self.event_bus.emit(
            EVENT_CELL_ANSWERED,
            category=cell.category,
            value=cell.value,
            correct=is_correct,
        )
        if new_score is not None:
            self.event_bus.emit(EVENT_SCORE_CHANGED, team=team, score=new_score, delta=cell.value)
        self.event_bus.emit(
            EVENT_JUDGED_CORRECT if is_correct else EVENT_JUDGED_INCORRECT,
            team=team,
            category=cell.category,
            value=cell.value,
            points=cell.value if is_correct else 0,
        )
        if new_team is not None:
            self.event_bus.emit(EVENT_TURN_ADVANCED, previous_team=previous_team, new_team=new_team)
        if queries.is_board_cleared(self.world):
            self.event_bus.emit(
                EVENT_BOARD_CLEARED,
                scores=queries.scores(self.world),
                leader=queries.leading_team(self.world),
            )
        return True
