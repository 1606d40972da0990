from dataclasses import dataclass, field
from typing import Dict

from jeopardy.components.team import Team


def _zero_scores() -> Dict[Team, int]:
    return {team: 0 for team in Team}


@dataclass(slots=True)
class Scoreboard:
    """Running point totals per team. Totals never go down."""
    points: Dict[Team, int] = field(default_factory=_zero_scores)

    def award(self, team: Team, amount: int) -> int:
        if amount < 0:
            raise ValueError(f"Cannot award a negative amount ({amount})")
        self.points[team] = self.points.get(team, 0) + amount
        return self.points[team]

    def snapshot(self) -> Dict[Team, int]:
        return {team: self.points.get(team, 0) for team in Team}
