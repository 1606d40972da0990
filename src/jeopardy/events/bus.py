from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that nobody else holds on to.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers


# ============================================================================
# PLAYER INTENTS (presentation -> core)
# ============================================================================
EVENT_CELL_CLICK = "cell_click"            # payload: category=str, value=int
EVENT_REVEAL_REQUEST = "reveal_request"    # payload: None
EVENT_JUDGE_REQUEST = "judge_request"      # payload: correct=bool
EVENT_DISMISS_REQUEST = "dismiss_request"  # payload: reason=str


# ============================================================================
# SELECTION
# ============================================================================
EVENT_SELECTION_OPENED = "selection_opened"        # payload: category=str, value=int, team=Team
EVENT_ANSWER_REVEALED = "answer_revealed"          # payload: category=str, value=int
EVENT_SELECTION_DISMISSED = "selection_dismissed"  # payload: category=str, value=int, reason=str


# ============================================================================
# JUDGMENT & SCORING
# ============================================================================
EVENT_CELL_ANSWERED = "cell_answered"        # payload: category=str, value=int, correct=bool
EVENT_SCORE_CHANGED = "score_changed"        # payload: team=Team, score=int, delta=int
EVENT_JUDGED_CORRECT = "judged_correct"      # payload: team=Team, category=str, value=int, points=int
EVENT_JUDGED_INCORRECT = "judged_incorrect"  # payload: team=Team, category=str, value=int, points=int


# ============================================================================
# TURN SYSTEM & GAME FLOW
# ============================================================================
EVENT_TURN_ADVANCED = "turn_advanced"    # payload: previous_team=Team, new_team=Team
EVENT_BOARD_CLEARED = "board_cleared"    # payload: scores=dict[Team,int], leader=Team|None
