from dataclasses import dataclass

from jeopardy.components.cell import CellId

@dataclass(slots=True)
class Selection:
    """Marks the clue currently open in the modal.

    Fields:
      cell: the board cell that was picked.
      revealed: whether the answer text is showing.
    """
    cell: CellId
    revealed: bool = False
