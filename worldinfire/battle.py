"""Monsters and the final battle's music."""

from __future__ import annotations

from dataclasses import dataclass

from .sound import Sound


@dataclass
class Monster:
    """A monster whose hit points never drop below zero."""

    hp: int

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` hit points, stopping at zero."""
        self.hp = max(self.hp - amount, 0)


class FinalBattle:
    """Plays the boss fight music from creation until the block exits."""

    def __init__(self, sound: Sound | None = None) -> None:
        self.sound = sound if sound is not None else Sound()
        self.sound.play_boss_fight()

    def __enter__(self) -> FinalBattle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.sound.stop()