from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from jeopardy.components.cell import CellId


@dataclass(frozen=True, slots=True)
class Clue:
    """Question text shown to the teams and the answer revealed afterwards."""
    question: str
    answer: str


@dataclass(slots=True)
class QuestionBoard:
    """Static category -> value -> Clue table.

    Categories keep their insertion order; each category may carry its own set
    of values. Nothing in the game mutates the board after it is created.
    """
    categories: Dict[str, Dict[int, Clue]] = field(default_factory=dict)

    def has_cell(self, category: str, value: int) -> bool:
        clues = self.categories.get(category)
        return clues is not None and value in clues

    def clue_for(self, cell: CellId) -> Clue:
        """Return the clue for ``cell``; raises KeyError when it is not on the board."""
        return self.categories[cell.category][cell.value]

    @property
    def category_names(self) -> List[str]:
        return list(self.categories)

    @property
    def values(self) -> List[int]:
        """Sorted union of the values used by any category (grid row order)."""
        found: set[int] = set()
        for clues in self.categories.values():
            found.update(clues)
        return sorted(found)

    def cells(self) -> Iterator[CellId]:
        for category, clues in self.categories.items():
            for value in sorted(clues):
                yield CellId(category, value)

    def __len__(self) -> int:
        return sum(len(clues) for clues in self.categories.values())
