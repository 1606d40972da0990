"""Exceptions raised by the game core."""


class CellLookupError(LookupError):
    """The open selection names a cell that does not exist on the board.

    Selection only ever opens on existing cells, so seeing this means the world
    was modified outside the systems.
    """

    def __init__(self, category: str, value: int) -> None:
        super().__init__(f"No clue on the board for {category!r} / {value}")
        self.category = category
        self.value = value
