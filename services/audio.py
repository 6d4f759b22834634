"""Notification sounds for caddie events.

Playback is simulated: each sound is written to the log.
"""

import logging
from typing import Callable, Dict

from llm.schema import AudioCue

logger = logging.getLogger(__name__)


class AudioService:
    """Plays the sound that goes with a caddie event."""

    def _play_sound(self, sound_name: str, message: str) -> None:
        logger.info("Playing sound: %s - %s", sound_name, message)

    def discovery_chime(self) -> None:
        self._play_sound("Discovery Chime", "New course feature learned.")

    def update_ping(self) -> None:
        self._play_sound("Update Ping", "Strategy profile updated.")

    def memory_tone(self) -> None:
        self._play_sound("Memory Tone", "Accessing historical data...")

    def achievement_sound(self) -> None:
        self._play_sound("Celebration Sound", "Achievement unlocked!")

    def shot_logged(self) -> None:
        self._play_sound("Log Confirmation", "Shot logged successfully.")

    def start_round(self) -> None:
        self._play_sound("Startup Chime", "Loading historical data for the round.")

    def play(self, cue: AudioCue) -> bool:
        """Play the sound for a reply's audio cue. Returns False for AudioCue.NONE."""
        handlers: Dict[AudioCue, Callable[[], None]] = {
            AudioCue.DISCOVERY: self.discovery_chime,
            AudioCue.UPDATE: self.update_ping,
            AudioCue.MEMORY: self.memory_tone,
            AudioCue.ACHIEVEMENT: self.achievement_sound,
            AudioCue.LOG: self.shot_logged,
        }
        handler = handlers.get(cue)
        if handler is None:
            return False
        handler()
        return True
