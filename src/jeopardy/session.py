"""Single owning handle for one game of Jeopardy."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from jeopardy.components.board import QuestionBoard
from jeopardy.components.cell import CellId
from jeopardy.components.team import Team
from jeopardy.events.bus import EventBus
from jeopardy.systems.judge_system import JudgeSystem
from jeopardy.systems.selection_system import SelectionSystem
from jeopardy.utils import queries
from jeopardy.utils.queries import SelectionView
from jeopardy.world import create_world


class GameSession:
    """Builds the world and core systems and exposes the game operations.

    Every operation is synchronous and returns True when it changed the game,
    False when it did not apply. The same operations are reachable through
    intent events on ``event_bus`` for presentation code.
    """

    def __init__(
        self,
        board: QuestionBoard | Mapping[str, Mapping[Any, Any]] | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(board=board)
        self.selection_system = SelectionSystem(self.world, self.event_bus)
        self.judge_system = JudgeSystem(self.world, self.event_bus)

    # Operations
    def select_cell(self, category: str, value: int) -> bool:
        return self.selection_system.select_cell(category, value)

    def reveal_answer(self) -> bool:
        return self.selection_system.reveal_answer()

    def judge(self, is_correct: bool) -> bool:
        return self.judge_system.judge(is_correct)

    def dismiss_selection(self, reason: str = "dismissed") -> bool:
        return self.selection_system.dismiss_selection(reason=reason)

    # Queries
    @property
    def board(self) -> QuestionBoard:
        return queries.board(self.world)

    def is_answered(self, category: str, value: int) -> bool:
        return queries.is_answered(self.world, category, value)

    def current_selection(self) -> SelectionView | None:
        return queries.current_selection(self.world)

    def scores(self) -> Dict[Team, int]:
        return queries.scores(self.world)

    def active_team(self) -> Team:
        return queries.active_team(self.world)

    def remaining_cells(self) -> List[CellId]:
        return queries.remaining_cells(self.world)

    def is_board_cleared(self) -> bool:
        return queries.is_board_cleared(self.world)

    def leading_team(self) -> Team | None:
        return queries.leading_team(self.world)
