"""Helpers for turning authored clue tables into a QuestionBoard."""
from __future__ import annotations

from typing import Any, Mapping

from jeopardy.components.board import Clue, QuestionBoard

# Shipped content: category -> value -> clue, in the short q/a form.
DEFAULT_CATEGORIES: dict[str, dict[int, dict[str, str]]] = {
    "Sports": {
        200: {
            "q": (
                "First Indian captain who led India in Lords in 1932. He was also known as "
                "India's first cricket superstar and played first-class cricket until the age of 62"
            ),
            "a": "Who is CK Nayudu?",
        },
        1400: {
            "q": (
                "This badminton player won Bronze at 2024 Asian Championships. She previously "
                "made history as first Indian woman to win two Olympic medals"
            ),
            "a": "Who is PV Sindhu?",
        },
    },
    "Literature": {
        1400: {
            "q": (
                "Amartya Sen's autobiography released in 2021 shares its name with this concept "
                "from Indian philosophy meaning 'Home in the World'"
            ),
            "a": "What is Home in the World?",
        },
    },
}


def _coerce_value(category: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"Invalid point value {raw!r} in category {category!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid point value {raw!r} in category {category!r}") from None
    if value < 0:
        raise ValueError(f"Point value {value} in category {category!r} must not be negative")
    return value


def _coerce_clue(category: str, value: int, raw: Any) -> Clue:
    if isinstance(raw, Clue):
        return raw
    if not isinstance(raw, Mapping):
        raise ValueError(f"Clue for {category!r} / {value} must be a mapping, got {type(raw).__name__}")
    question = raw.get("question", raw.get("q"))
    answer = raw.get("answer", raw.get("a"))
    if not isinstance(question, str) or not isinstance(answer, str):
        raise ValueError(f"Clue for {category!r} / {value} needs both question and answer text")
    return Clue(question=question, answer=answer)


def build_board(categories: Mapping[str, Mapping[Any, Any]] | QuestionBoard) -> QuestionBoard:
    """Build a QuestionBoard from ``{category: {value: clue}}``.

    A clue may be a ``Clue``, a mapping with ``question``/``answer`` keys, or
    the short ``q``/``a`` form. Values are coerced to int. The result holds its
    own copies, so later edits to ``categories`` do not leak into the game.
    """
    if isinstance(categories, QuestionBoard):
        categories = categories.categories
    table: dict[str, dict[int, Clue]] = {}
    for category, clues in categories.items():
        if not isinstance(clues, Mapping):
            raise ValueError(f"Category {category!r} must map values to clues")
        row: dict[int, Clue] = {}
        for raw_value, raw_clue in clues.items():
            value = _coerce_value(category, raw_value)
            if value in row:
                raise ValueError(f"Duplicate value {value} in category {category!r}")
            row[value] = _coerce_clue(category, value, raw_clue)
        table[str(category)] = row
    return QuestionBoard(categories=table)


def create_default_board() -> QuestionBoard:
    return build_board(DEFAULT_CATEGORIES)
