import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from jeopardy.events.bus import EventBus
from jeopardy.session import GameSession
from helpers import SPORTS_BOARD, TWO_BY_TWO_BOARD


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def session(bus):
    return GameSession(board=SPORTS_BOARD, event_bus=bus)


@pytest.fixture
def grid_session(bus):
    return GameSession(board=TWO_BY_TWO_BOARD, event_bus=bus)
