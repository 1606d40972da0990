"""Invariants checked over longer sequences of mixed operations."""
import random

import pytest

from jeopardy.components.team import Team
from jeopardy.session import GameSession

from helpers import TWO_BY_TWO_BOARD, play_clue


def test_team_parity_counts_only_judged_clues(grid_session):
    judged = 0
    for category, value in [("Sports", 200), ("Sports", 400), ("Literature", 200)]:
        grid_session.select_cell(category, value)
        grid_session.dismiss_selection()
        assert grid_session.active_team() is (Team.A if judged % 2 == 0 else Team.B)
        play_clue(grid_session, category, value, correct=judged % 2 == 0)
        judged += 1
        assert grid_session.active_team() is (Team.A if judged % 2 == 0 else Team.B)


def test_turn_passes_on_incorrect_answer(grid_session):
    play_clue(grid_session, "Sports", 200, correct=False)
    assert grid_session.active_team() is Team.B
    assert grid_session.scores() == {Team.A: 0, Team.B: 0}
    assert grid_session.is_answered("Sports", 200)


def test_scores_credit_the_team_on_turn(grid_session):
    play_clue(grid_session, "Sports", 200, correct=True)       # A +200
    play_clue(grid_session, "Sports", 400, correct=True)       # B +400
    play_clue(grid_session, "Literature", 400, correct=False)  # A +0
    play_clue(grid_session, "Literature", 200, correct=True)   # B +200
    assert grid_session.scores() == {Team.A: 200, Team.B: 600}
    assert grid_session.leading_team() is Team.B


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_random_operation_sequences_keep_invariants(seed):
    rng = random.Random(seed)
    session = GameSession(board=TWO_BY_TWO_BOARD)
    cells = list(session.board.cells())
    judged = 0
    answered = set()
    previous_scores = session.scores()

    for _ in range(60):
        op = rng.choice(["select", "reveal", "judge", "dismiss"])
        team_before = session.active_team()
        selection_before = session.current_selection()
        if op == "select":
            cell = rng.choice(cells)
            applied = session.select_cell(cell.category, cell.value)
            if selection_before is not None or cell in answered:
                assert not applied
                assert session.current_selection() == selection_before
        elif op == "reveal":
            session.reveal_answer()
        elif op == "judge":
            correct = rng.random() < 0.5
            applied = session.judge(correct)
            assert applied == (selection_before is not None)
            if applied:
                judged += 1
                answered.add((selection_before.category, selection_before.value))
                expected = dict(previous_scores)
                if correct:
                    expected[team_before] += selection_before.value
                assert session.scores() == expected
        else:
            session.dismiss_selection()

        scores = session.scores()
        for team in Team:
            assert scores[team] >= previous_scores[team]
        if op != "judge":
            assert scores == previous_scores
        previous_scores = scores
        assert session.active_team() is (Team.A if judged % 2 == 0 else Team.B)
        for category, value in answered:
            assert session.is_answered(category, value)
