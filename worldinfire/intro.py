"""The opening menu and scene description."""

from __future__ import annotations

import enum

from .console import Console, GameOver
from .sound import Sound


class Answer(enum.Enum):
    """How a yes/no reply was understood."""

    YES = 1
    NO = 2
    INVALID = 3


_YES = frozenset({"Yes", "y", "Y", "yes"})
_NO = frozenset({"No", "n", "N", "no"})


def check_answer(answer: str) -> Answer:
    """Classify a reply as yes, no or invalid."""
    if answer in _YES:
        return Answer.YES
    if answer in _NO:
        return Answer.NO
    return Answer.INVALID


class Intro:
    """The title screen; its music plays until it is closed."""

    def __init__(self, console: Console | None = None, sound: Sound | None = None) -> None:
        self.console = console if console is not None else Console()
        self.sound = sound if sound is not None else Sound()
        self.sound.play_intro()

    def main_menu(self) -> None:
        """Ask whether to play; raise GameOver if the player declines."""
        self.console.say("Do you want to play? (Type: y/yes/Yes or n/no/No)")
        while True:
            answer = check_answer(self.console.read_word())
            if answer is Answer.YES:
                self.console.say("Welcome to the World In Fire ")
                return
            if answer is Answer.NO:
                self.console.say("Have a great back! Hope to see you soon!")
                raise GameOver("player chose not to play")
            self.console.say(
                "Invalid input! Try again: (Type only y/yes/Yes or n/no/No)"
            )

    def print_info(self) -> None:
        """Describe the opening scene."""
        self.console.say(
            "Scene: The adventurers find themselves at the entrance of the "
            "Ancient Crypt of Eldoria, a forgotten tomb hidden deep within "
            "the Whispering Woods. "
        )
        self.console.pause(2)
        self.console.say(
            "The entrance is flanked by two weathered stone statues of "
            "forgotten kings, their faces eroded by time.A heavy iron door "
            "stands ajar, revealing a dimly lit passageway beyond. "
        )
        self.console.pause(2)
        self.console.say(
            "The air is thick with the scent of damp earth and the faint glow "
            "of enchanted torches casts eerie shadows on the walls."
        )
        self.console.pause(2)

    def close(self) -> None:
        """Stop the intro music."""
        self.sound.stop()

    def __enter__(self) -> Intro:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()