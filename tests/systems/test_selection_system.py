import pytest

from jeopardy.components.selection import Selection
from jeopardy.components.team import Team
from jeopardy.events.bus import (
    EventBus,
    EVENT_ANSWER_REVEALED,
    EVENT_CELL_CLICK,
    EVENT_DISMISS_REQUEST,
    EVENT_REVEAL_REQUEST,
    EVENT_SELECTION_DISMISSED,
    EVENT_SELECTION_OPENED,
)
from jeopardy.systems.selection_system import SelectionSystem
from jeopardy.world import create_world

from helpers import TWO_BY_TWO_BOARD, record


@pytest.fixture
def setup_world():
    bus = EventBus()
    world = create_world(board=TWO_BY_TWO_BOARD)
    system = SelectionSystem(world, bus)
    return bus, world, system


def _selections(world):
    return [comp for _, comp in world.get_component(Selection)]


def test_select_cell_opens_hidden_selection_and_signals(setup_world):
    bus, world, system = setup_world
    events = record(bus, EVENT_SELECTION_OPENED)
    assert system.select_cell("Sports", 400)
    selections = _selections(world)
    assert len(selections) == 1
    assert (selections[0].cell.category, selections[0].cell.value) == ("Sports", 400)
    assert selections[0].revealed is False
    assert events == [(EVENT_SELECTION_OPENED, {"category": "Sports", "value": 400, "team": Team.A})]


def test_second_select_keeps_existing_selection(setup_world):
    bus, world, system = setup_world
    events = record(bus, EVENT_SELECTION_OPENED)
    system.select_cell("Sports", 200)
    assert not system.select_cell("Literature", 400)
    assert not system.select_cell("Sports", 200)
    selections = _selections(world)
    assert len(selections) == 1
    assert selections[0].cell == ("Sports", 200)
    assert len(events) == 1


@pytest.mark.parametrize("category,value", [("Music", 200), ("Sports", 600), ("Sports", "200")])
def test_select_cell_ignores_cells_not_on_board(setup_world, category, value):
    bus, world, system = setup_world
    events = record(bus, EVENT_SELECTION_OPENED)
    assert not system.select_cell(category, value)
    assert _selections(world) == []
    assert events == []


@pytest.mark.parametrize("value", [200.0, 200.4, None])
def test_select_cell_rejects_non_integer_values(setup_world, value):
    bus, world, system = setup_world
    events = record(bus, EVENT_SELECTION_OPENED)
    assert not system.select_cell("Sports", value)
    assert _selections(world) == []
    assert events == []


def test_select_cell_rejects_bool_matching_a_value_of_one():
    bus = EventBus()
    world = create_world(board={"Trivia": {1: {"q": "One?", "a": "Yes"}}})
    system = SelectionSystem(world, bus)
    assert not system.select_cell("Trivia", True)
    assert _selections(world) == []
    assert system.select_cell("Trivia", 1)
    assert type(_selections(world)[0].cell.value) is int


def test_reveal_is_noop_without_selection(setup_world):
    bus, world, system = setup_world
    events = record(bus, EVENT_ANSWER_REVEALED)
    assert not system.reveal_answer()
    assert events == []


def test_reveal_only_applies_once(setup_world):
    bus, world, system = setup_world
    events = record(bus, EVENT_ANSWER_REVEALED)
    system.select_cell("Literature", 200)
    assert system.reveal_answer()
    assert not system.reveal_answer()
    assert _selections(world)[0].revealed is True
    assert events == [(EVENT_ANSWER_REVEALED, {"category": "Literature", "value": 200})]


def test_dismiss_is_idempotent(setup_world):
    bus, world, system = setup_world
    events = record(bus, EVENT_SELECTION_DISMISSED)
    system.select_cell("Sports", 200)
    system.reveal_answer()
    assert system.dismiss_selection(reason="escape")
    assert not system.dismiss_selection(reason="escape")
    assert _selections(world) == []
    assert events == [(EVENT_SELECTION_DISMISSED, {"category": "Sports", "value": 200, "reason": "escape"})]


def test_reselect_after_dismiss_starts_hidden(setup_world):
    bus, world, system = setup_world
    system.select_cell("Sports", 200)
    system.reveal_answer()
    system.dismiss_selection()
    assert system.select_cell("Sports", 200)
    assert _selections(world)[0].revealed is False


def test_intent_events_drive_operations(setup_world):
    bus, world, system = setup_world
    bus.emit(EVENT_CELL_CLICK, category="Literature", value=400)
    assert _selections(world)[0].cell == ("Literature", 400)
    bus.emit(EVENT_REVEAL_REQUEST)
    assert _selections(world)[0].revealed is True
    bus.emit(EVENT_DISMISS_REQUEST, reason="click_outside")
    assert _selections(world) == []


def test_cell_click_without_coordinates_is_ignored(setup_world):
    bus, world, system = setup_world
    bus.emit(EVENT_CELL_CLICK, category="Sports")
    assert _selections(world) == []
