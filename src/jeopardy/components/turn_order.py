from dataclasses import dataclass, field
from typing import List

from jeopardy.components.team import Team

@dataclass(slots=True)
class TurnOrder:
    """Stores the fixed team rotation and the current index."""
    teams: List[Team] = field(default_factory=lambda: [Team.A, Team.B])
    index: int = 0

    def current(self) -> Team:
        return self.teams[self.index % len(self.teams)]

    def advance(self):
        self.index = (self.index + 1) % len(self.teams)
