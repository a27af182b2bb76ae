"""Player characters, their loot and their inventory."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar

from .console import Console, GameOver


@dataclass(frozen=True)
class Item:
    """A thing found in a chest."""

    name: str


class Player:
    """A character with health and an inventory of items."""

    race: ClassVar[int] = -1
    title: ClassVar[str] = ""
    loot: ClassVar[tuple[tuple[str, str], ...]] = (
        ("Axe", ""),
        ("Hammer", ""),
        ("Sword", ""),
        ("Wand of the Mystic Flame", ""),
        ("Orb of Eldritch Power", ""),
        ("Staff of Arcane Wisdom", ""),
        ("A pair of Daggers", ""),
        ("Crossbow", ""),
        ("Short Sword", ""),
    )

    _SYMBOL_MESSAGES: ClassVar[dict[int, str]] = {
        1: " You have found an axe!",
        2: " You have found a Magic Wand!",
        3: " You have found a Rogue's Sword!",
    }

    def __init__(self, name: str = "", health: int = 100) -> None:
        self.name = name
        self.health = health
        self.inventory: list[Item] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, health={self.health})"

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, stopping at zero."""
        self.health = max(self.health - amount, 0)

    def _draw(self, rng: random.Random | None) -> tuple[str, str]:
        rng = rng if rng is not None else random.Random()
        return self.loot[rng.randrange(len(self.loot))]

    def create_item(
        self, console: Console, rng: random.Random | None = None
    ) -> Item:
        """Open a chest and return the item found in it."""
        name, _ = self._draw(rng)
        console.say(
            "The chest has 3 symbols, Choose only the type of class you are: "
            "Type 1 for: Warrior or 2 for: Wizzard or 3 for: Rogue"
        )
        console.say("IF YOU DON'T TYPE 1, 2 OR 3 THE GAME WILL CLOSE")
        choice = console.read_int()
        console.say(self._SYMBOL_MESSAGES.get(choice, "Invalid input"))
        return Item(name)

    def add_item_to_inventory(self, item: Item, console: Console) -> None:
        """Offer to store ``item``; declining ends the game."""
        console.say(
            "Do you want to store the items that you have found in the chest? "
            "Type (yes for Yes and no for No)"
        )
        while True:
            answer = console.read_word()
            if answer == "yes":
                console.say(f"{item.name} is added to your inventory!")
                self.inventory.append(item)
                return
            if answer == "no":
                console.say(
                    "Ok, you chose not to sotre the items in your inventory!"
                )
                for line in (
                    "You encountered an evil Warrior",
                    "Due to the fact that you don't have a weapon to defend "
                    "yourself you decided to forfeit..",
                    "He decided to cut your head off",
                ):
                    console.pause(1)
                    console.say(line)
                console.pause(1)
                console.say("GAME OVER!")
                raise GameOver("player refused to store the item")
            console.say("Invalid input! Type again just yes or no !")


class _ClassHero(Player):
    """A player of a chosen class, whose chest holds class-specific loot."""

    def create_item(
        self, console: Console, rng: random.Random | None = None
    ) -> Item:
        name, message = self._draw(rng)
        console.pause(1)
        console.say("You have found a beautiful chest!")
        console.pause(1)
        console.say(
            "You decided to open it due to the fact that you are looking for "
            "something special for you"
        )
        console.say(message)
        return Item(name)


class Warrior(_ClassHero):
    """A fighter who finds axes, hammers and swords."""

    race = 1
    title = "Warrior"
    loot = (
        ("Axe", " You have found an Axe!"),
        ("Hammer", " You have found a Hammer!"),
        ("Sword", " You have found a Sword!"),
    )


class Wizard(_ClassHero):
    """A spellcaster who finds wands, orbs and staves."""

    race = 2
    title = "Wizzard"
    loot = (
        ("Wand of the Mystic Flame", " You have found a Wand of the Mystic Flame!"),
        ("Orb of Eldritch Power", " You have found an Orb of Eldritch Power!"),
        ("Staff of Arcane Wisdom", " You have found a Staff of Arcane Wisdom!"),
    )


class Rogue(_ClassHero):
    """A sneak who finds daggers, crossbows and short swords."""

    race = 3
    title = "Rogue"
    loot = (
        ("A pair of Daggers", " You have found A pair of Daggers!"),
        ("Crossbow", " You have found a Crossbow!"),
        ("Short Sword", " You have found a Short Sword!"),
    )


_CLASSES: dict[int, type[_ClassHero]] = {1: Warrior, 2: Wizard, 3: Rogue}


def select_class(console: Console) -> Player:
    """Ask for a class and a name until a valid class is chosen."""
    console.say("Type 1 for: Warrior or  2 for: Wizzard or 3 for: Rogue")
    while True:
        cls = _CLASSES.get(console.read_int())
        if cls is None:
            console.say("Invalid Input! Type Again:")
            continue
        console.say("Enter your name: ")
        name = console.read_word()
        console.say(f"{name} From now on you are a {cls.title}!")
        return cls(name)