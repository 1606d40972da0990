from enum import Enum


class Team(Enum):
    """The two competing teams."""
    A = "A"
    B = "B"
