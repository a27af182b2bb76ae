"""Looping background music for the game's scenes."""

from __future__ import annotations

import enum

try:
    import winsound
except ImportError:  # not available off Windows; the game then stays silent
    winsound = None


class Track(enum.Enum):
    """Music tracks, valued by their wave file names."""

    INTRO = "Main_Menu.wav"
    CLASS_SELECT = "selectClassANDExploring.wav"
    BOSS_FIGHT = "BattleFinal.wav"


class Sound:
    """Plays one looping track at a time and can stop it."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.playing: Track | None = None

    def _play(self, track: Track) -> None:
        self.playing = track
        if not self.enabled or winsound is None:
            return
        flags = winsound.SND_FILENAME | winsound.SND_ASYNC | winsound.SND_LOOP
        try:
            winsound.PlaySound(track.value, flags)
        except RuntimeError:
            # A missing or unplayable file leaves the game silent.
            pass

    def play_intro(self) -> None:
        """Start the main menu music in a loop."""
        self._play(Track.INTRO)

    def play_class_select(self) -> None:
        """Start the class selection and exploring music in a loop."""
        self._play(Track.CLASS_SELECT)

    def play_boss_fight(self) -> None:
        """Start the final battle music in a loop."""
        self._play(Track.BOSS_FIGHT)

    def stop(self) -> None:
        """Stop whatever is playing."""
        self.playing = None
        if not self.enabled or winsound is None:
            return
        try:
            winsound.PlaySound(None, 0)
        except RuntimeError:
            pass