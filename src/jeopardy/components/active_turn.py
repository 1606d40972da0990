from dataclasses import dataclass

from jeopardy.components.team import Team

@dataclass(slots=True)
class ActiveTurn:
    """Marks which team answers the open clue, or the next one picked.

    team: credited with the clue's value on a correct judgment.
    """
    team: Team
