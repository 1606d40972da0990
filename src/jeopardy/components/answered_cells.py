from dataclasses import dataclass, field
from typing import Set

from jeopardy.components.cell import CellId

@dataclass(slots=True)
class AnsweredCells:
    """Cells already judged this game. Only ever grows."""
    cells: Set[CellId] = field(default_factory=set)

    def mark(self, cell: CellId) -> None:
        self.cells.add(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self.cells

    def __len__(self) -> int:
        return len(self.cells)
