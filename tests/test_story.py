import io

import pytest

from worldinfire.console import Console, GameOver
from worldinfire.player import Item, Player, Warrior
from worldinfire.story import crossroads


def _run(text, player=None):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, delay=0)
    player = player if player is not None else Player("Ana")
    crossroads(player, console)
    return out.getvalue().splitlines(), console


def _run_dying(text, player=None):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, delay=0)
    player = player if player is not None else Player("Ana")
    with pytest.raises(GameOver):
        crossroads(player, console)
    return out.getvalue().splitlines()


def test_menu_is_shown_first():
    lines, _ = _run("3\n")
    assert lines == [
        "Where do you want to go?",
        "Type 1 or 2 to choose your path",
        "1. Cave",
        "2. Stay where you are",
    ]


def test_torch_equipped_leads_outside():
    lines, _ = _run("1 1 yes\n")
    assert "You have a Torch in your inventory!" in lines
    assert lines[-1] == (
        "You are now outside..but behind the tree you see something "
        "big..you ran to it to see what it is.."
    )


def test_torch_refused_ends_game():
    lines = _run_dying("1 1 no\n")
    assert "You slowly but surely Died!" in lines
    assert lines[-1] == "GAME OVER!"


def test_torch_other_answer_continues_quietly():
    lines, _ = _run("1 1 maybe\n")
    assert lines[-1] == "Do you want to equip it? (Type y,yes,Yes) or (Type n,no,No)"


def test_inventory_items_break_the_wall():
    player = Warrior("Ana")
    player.inventory.append(Item("Axe"))
    lines, _ = _run("1 1\n", player)
    assert "You have: Axe in your inventory!" in lines
    assert "You chose to use the Axein order to escape from the cave!" in lines
    assert lines[-1] == "You successfully escaped from inside of that cave! "
    assert "You have a Torch in your inventory!" not in lines


def test_each_item_is_used_in_order():
    player = Player("Ana")
    player.inventory.extend([Item("Axe"), Item("Crossbow")])
    lines, _ = _run("1 1\n", player)
    used = [line for line in lines if line.startswith("You have: ")]
    assert used == [
        "You have: Axe in your inventory!",
        "You have: Crossbow in your inventory!",
    ]


def test_left_lantern_path_survives():
    lines, _ = _run("1 2 l yes\n")
    assert lines[-1] == "What is that???"


def test_left_refusal_springs_trap():
    lines = _run_dying("1 2 left no\n")
    assert lines[-1] == "GAME OVER!"
    assert any("arrows" in line for line in lines)


def test_right_stay_meets_scorpion():
    lines = _run_dying("1 2 r stay\n")
    assert "YOU DIED BY A MUTANT SCORPION!" in lines
    assert lines[-1] == "GAME OVER!"


def test_pulling_lever_collapses_cave_without_scorpion():
    lines = _run_dying("1 2 Right jump left pull\n")
    assert "The cave is starting to collapse instantly" in lines
    assert "Krrk..Krrkj..Krrrkji" not in lines
    assert lines[-1] == "GAME OVER!"


def test_running_from_spider_still_meets_scorpion():
    lines = _run_dying("1 2 right Jump Left leave run\n")
    assert "You finally found the exit of the cave!" in lines
    assert "YOU DIED BY A MUTANT SCORPION!" in lines
    assert lines.index("You finally found the exit of the cave!") < lines.index(
        "YOU DIED BY A MUTANT SCORPION!"
    )


def test_goblin_talk_sets_the_goal():
    lines, _ = _run("2 1\n")
    assert "The Goblin has died due to internal bleeding" in lines
    assert lines[-1] == "Your Main Focus Is To Kill That Thing!"


def test_goblin_ignored_leads_to_cascade():
    lines, _ = _run("2 2\n")
    assert lines[-1] == "You saw something that was in front of the Cascade."


def test_goblin_invalid_choice():
    lines, _ = _run("2 7\n")
    assert lines[-1] == "Invalid Input!"


def test_only_needed_input_is_consumed():
    _, console = _run("2 2 leftover\n")
    assert console.read_word() == "leftover"


def test_inventory_is_left_unchanged():
    player = Player("Ana")
    player.inventory.append(Item("Sword"))
    _run("1 1\n", player)
    assert player.inventory == [Item("Sword")]