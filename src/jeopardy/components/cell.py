from typing import NamedTuple


class CellId(NamedTuple):
    """Identifies one clue on the board by category and point value."""
    category: str
    value: int
