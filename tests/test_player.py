import io
import random

import pytest

from worldinfire.console import Console, GameOver
from worldinfire.player import Item, Player, Rogue, Warrior, Wizard, select_class


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out, delay=0), out


def test_take_damage_reduces_health():
    player = Player("Hero", 100)
    player.take_damage(30)
    assert player.health == 70


def test_take_damage_clamps_at_zero():
    player = Player("Hero", 100)
    player.take_damage(150)
    assert player.health == 0


@pytest.mark.parametrize(
    "cls, race", [(Player, -1), (Warrior, 1), (Wizard, 2), (Rogue, 3)]
)
def test_races(cls, race):
    assert cls("x").race == race


@pytest.mark.parametrize(
    "choice, cls, title",
    [("1", Warrior, "Warrior"), ("2", Wizard, "Wizzard"), ("3", Rogue, "Rogue")],
)
def test_select_class(choice, cls, title):
    console, out = make_console(f"{choice}\nConan\n")
    player = select_class(console)
    assert type(player) is cls
    assert player.name == "Conan"
    assert f"Conan From now on you are a {title}!" in out.getvalue()


def test_select_class_retries_on_invalid():
    console, out = make_console("9 abc 2 Merlin\n")
    player = select_class(console)
    assert isinstance(player, Wizard)
    assert out.getvalue().count("Invalid Input! Type Again:") == 2


def test_select_class_runs_out_of_input():
    console, _ = make_console("7\n")
    with pytest.raises(EOFError):
        select_class(console)


@pytest.mark.parametrize("cls", [Warrior, Wizard, Rogue])
def test_class_chest_covers_its_loot(cls):
    names = {name for name, _ in cls.loot}
    found = set()
    for seed in range(60):
        console, _ = make_console()
        item = cls("x").create_item(console, random.Random(seed))
        assert item.name in names
        found.add(item.name)
    assert found == names


def test_warrior_chest_announces_item():
    console, out = make_console()
    item = Warrior("x").create_item(console, random.Random(1))
    text = out.getvalue()
    assert "You have found a beautiful chest!" in text
    assert item.name in text


def test_base_chest_reads_symbol():
    console, out = make_console("1\n")
    item = Player("x").create_item(console, random.Random(3))
    assert " You have found an axe!" in out.getvalue()
    assert item.name in {name for name, _ in Player.loot}


def test_base_chest_invalid_symbol():
    console, out = make_console("7\n")
    Player("x").create_item(console, random.Random(3))
    assert out.getvalue().rstrip().endswith("Invalid input")


def test_add_item_yes():
    console, out = make_console("yes\n")
    player = Warrior("x")
    player.add_item_to_inventory(Item("Axe"), console)
    assert player.inventory == [Item("Axe")]
    assert "Axe is added to your inventory!" in out.getvalue()


def test_add_item_retries_on_invalid():
    console, out = make_console("Yes maybe yes\n")
    player = Rogue("x")
    player.add_item_to_inventory(Item("Crossbow"), console)
    assert player.inventory == [Item("Crossbow")]
    assert out.getvalue().count("Invalid input! Type again just yes or no !") == 2


def test_add_item_no_ends_game():
    console, out = make_console("no\n")
    player = Wizard("x")
    with pytest.raises(GameOver):
        player.add_item_to_inventory(Item("Crossbow"), console)
    assert player.inventory == []
    assert "GAME OVER!" in out.getvalue()