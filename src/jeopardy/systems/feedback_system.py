from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict

from jeopardy.constants import SOUND_FILES
from jeopardy.events.bus import (
    EventBus,
    EVENT_JUDGED_CORRECT,
    EVENT_JUDGED_INCORRECT,
    EVENT_SELECTION_OPENED,
)

logger = logging.getLogger(__name__)

DEFAULT_SOUND_DIR = Path(__file__).resolve().parents[3] / "sounds"

# Outcome signal -> cue name
CUE_FOR_EVENT = {
    EVENT_SELECTION_OPENED: "select",
    EVENT_JUDGED_CORRECT: "correct",
    EVENT_JUDGED_INCORRECT: "wrong",
}


class ArcadeSoundPlayer:
    """Plays cue files through arcade, loading each file once."""

    def __init__(self, sound_dir: Path | None = None, files: Dict[str, str] | None = None) -> None:
        self.sound_dir = Path(sound_dir) if sound_dir is not None else DEFAULT_SOUND_DIR
        self.files = dict(SOUND_FILES if files is None else files)
        self._sounds: Dict[str, object] = {}
        self._missing: set[str] = set()

    def __call__(self, cue: str) -> None:
        if cue in self._missing:
            return
        sound = self._sounds.get(cue)
        if sound is None:
            sound = self._load(cue)
            if sound is None:
                return
        # Local import keeps tests headless without an audio backend.
        import arcade
        arcade.play_sound(sound)

    def _load(self, cue: str):
        file_name = self.files.get(cue)
        path = self.sound_dir / file_name if file_name else None
        if path is None or not path.is_file():
            logger.warning("No sound file for cue %r (looked for %s); cue disabled", cue, path)
            self._missing.add(cue)
            return None
        import arcade
        sound = arcade.load_sound(path)
        self._sounds[cue] = sound
        return sound


class FeedbackSystem:
    """Plays a cue for each outcome signal; never feeds back into the game.

    ``player`` is any callable taking a cue name. Playback is fire-and-forget.
    """

    def __init__(self, event_bus: EventBus, player: Callable[[str], None] | None = None) -> None:
        self.event_bus = event_bus
        self.player = player or ArcadeSoundPlayer()
        self.event_bus.subscribe(EVENT_SELECTION_OPENED, self.on_selection_opened)
        self.event_bus.subscribe(EVENT_JUDGED_CORRECT, self.on_judged_correct)
        self.event_bus.subscribe(EVENT_JUDGED_INCORRECT, self.on_judged_incorrect)

    def on_selection_opened(self, sender, **payload) -> None:
        self.play(CUE_FOR_EVENT[EVENT_SELECTION_OPENED])

    def on_judged_correct(self, sender, **payload) -> None:
        self.play(CUE_FOR_EVENT[EVENT_JUDGED_CORRECT])

    def on_judged_incorrect(self, sender, **payload) -> None:
        self.play(CUE_FOR_EVENT[EVENT_JUDGED_INCORRECT])

    def play(self, cue: str) -> None:
        self.player(cue)
