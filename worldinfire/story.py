"""The crossroads: the branching exploration before the first fight."""

from __future__ import annotations

from .console import Console, GameOver
from .player import Player


def _tell(console: Console, *lines: str) -> None:
    """Say each line after a one-second pause."""
    for line in lines:
        console.pause(1)
        console.say(line)


def _game_over(console: Console, reason: str) -> None:
    console.say("GAME OVER!")
    raise GameOver(reason)


def crossroads(player: Player, console: Console) -> None:
    """Let the player choose a path; deadly choices raise GameOver."""
    _tell(console, "Where do you want to go?")
    console.say("Type 1 or 2 to choose your path")
    _tell(console, "1. Cave")
    _tell(console, "2. Stay where you are")

    choice = console.read_int()
    if choice == 1:
        _enter_cave(player, console)
    elif choice == 2:
        _meet_goblin(console)


def _enter_cave(player: Player, console: Console) -> None:
    _tell(
        console,
        "It's dark, look for some ways to make light:",
        "Type 1 or 2 to choose: ",
        "1. Check your innventory.",
        "2. Look around the cave.",
    )
    choice = console.read_int()
    if choice == 1:
        _check_inventory(player, console)
    elif choice == 2:
        _look_around(console)


def _check_inventory(player: Player, console: Console) -> None:
    if not player.inventory:
        _tell(
            console,
            "You have a Torch in your inventory!",
            "Do you want to equip it? (Type y,yes,Yes) or (Type n,no,No)",
        )
        console.pause(1)
        answer = console.read_word()
        if answer in ("Yes", "yes", "y"):
            _tell(
                console,
                "You have equipped your torch! Now you have some sort of light",
                "It's dark but you finally find a big hole so you decided to "
                "get out using it.",
                "You are now outside..but behind the tree you see something "
                "big..you ran to it to see what it is..",
            )
        elif answer in ("No", "no", "n"):
            _tell(
                console,
                "Ok, you will remain in the darkness",
                "You try to go in darkness but you feel something climbing on you.",
                "It started to make a sound: Shhshhh...",
                "You don't know what to do, so you try to stay still but it "
                "bites you and when you looked at it ou saw it's red eyes...",
                "You slowly but surely Died!",
            )
            console.pause(1)
            _game_over(console, "bitten in the dark")
        return

    for item in player.inventory:
        _tell(
            console,
            f"You have: {item.name} in your inventory!",
            f"You chose to use the {item.name}in order to escape from the cave!",
            f"You put all your force in destroying a corner of the cave with {item.name}",
            "You successfully escaped from inside of that cave! ",
        )
        console.pause(1)


def _look_around(console: Console) -> None:
    _tell(console, "Do you want to go to the (type r) right or (type l) left?")
    direction = console.read_word()
    if direction in ("l", "left", "Left"):
        _go_left(console)
    elif direction in ("r", "right", "Right"):
        _go_right(console)


def _go_left(console: Console) -> None:
    _tell(
        console,
        "You saw something that lightened the left corner of the cave",
        "Do you want to go to see what is it? (Type yes/y or no/n) ",
    )
    console.pause(1)
    answer = console.read_word()
    if answer in ("yes", "Yes"):
        _tell(
            console,
            "You found a gas lantern, but it doesn't has much gas left in it",
            "Try to find the exit!",
            "You managed to see a small crack in the corner of the cave and "
            "you escaped from that cave.",
            "You see what different the world is..everything is rotten...even "
            "all the birds are laying on the ground and their skin is cut out..",
            "What is that???",
        )
        console.pause(1)
    elif answer in ("no", "No"):
        _tell(
            console,
            "You chose to not seach that area but you stepped on a tile that "
            "opened a trap where a lot of arrows come in your direction and "
            "you Died!",
        )
        console.pause(1)
        _game_over(console, "killed by an arrow trap")


def _go_right(console: Console) -> None:
    _tell(
        console,
        "It's very dark, you don't know what could happen to you if you will "
        "try to go further in the darkness of the cave ",
        "You fell in a pit!",
        "Do you want to: ",
    )
    console.say(
        "(Type jump or Jump to:  Jump) or (Type Stay or stay to:  Stay and cry)"
    )
    console.pause(1)
    answer = console.read_word()
    if answer in ("jump", "Jump"):
        _climb_out(console)
    if answer in ("stay", "Stay"):
        console.pause(1)

    # Whatever happened in the pit, the scorpion finds the player.
    console.say(
        "You tried to reach the surface in the last 2 hours but you hear some sounds:"
    )
    _tell(
        console,
        "Krrk..Krrkj..Krrrkji",
        "It's a scorpion! But it's a very weird one...he looks so strange..",
    )
    console.say(" You tried to kill it but it killed you!")
    _tell(console, "YOU DIED BY A MUTANT SCORPION!")
    console.pause(1)
    _game_over(console, "killed by a mutant scorpion")


def _climb_out(console: Console) -> None:
    _tell(
        console,
        "You managed to  jump and climb to the surface",
        "Try to find the exit of the cave in darkness",
        "Where do you want to go? (type left for left or rght for right)",
    )
    console.pause(1)
    if console.read_word() not in ("left", "Left"):
        return

    _tell(
        console,
        "You found a lever, what do you want to to? (type pull to pull or "
        "leave it alone to leave it alone)",
    )
    lever = console.read_word()
    if lever in ("pull", "Pull"):
        _tell(
            console,
            "The cave is starting to collapse instantly",
            "You couldn't save yourself due to the fact that you didn't see "
            "anything so you DIED!",
        )
        _game_over(console, "crushed by the collapsing cave")
    elif lever in ("leave", "Leave"):
        _tell(
            console,
            "You decided to leave the lever alone but you see a giant spider "
            "that comes at you, what do you decide?",
            "Type attack to attack or run to run",
        )
        console.pause(1)
        action = console.read_word()
        if action in ("attack", "Attack"):
            _tell(
                console,
                "You tried to take a swing at the spider but it jumped in your "
                "face and started to suffocate you",
                "You tried so hard to get this far, but you DIED!",
            )
            console.pause(1)
        elif action in ("run", "Run"):
            console.say("You decided to run and managed to escape!")
            _tell(
                console,
                "You suddenly see a spot of a cracked rock within the light "
                "entered so you decide to go there",
                "You finally found the exit of the cave!",
            )
            console.pause(1)


_GOBLIN_DIALOGUE = (
    "YOU: What happened?",
    "The Goblin: I...tried to warn my people of him...but he got at my "
    "village before me...",
    "YOU: Who?",
    "The Goblin: There is a thing..a big one.. half human and half wolf",
    "YOU: What are you talking about?",
    "The Goblin: I don't know..but the important thing is that he attacked "
    "half of the region..did you not notice anything?",
    "YOU: No...I am living in the forrest for a while..because my king has "
    "been killed not so long time ago....and I don't know what to do..all the "
    "kingdom was in flames...",
    "The Goblin: I don't care what you went through...I want to know that you "
    "will kill him because if not, all the region will be in his hands..",
    "YOU: Why do you want him to be dead so badly?",
    "The Goblin: Because..he....",
    "YOU: Hey! Don't die on me!",
    "The Goblin: My time...has..passed..",
    "YOU: Give me an answer!!!",
    "The Goblin: .......",
    "The Goblin has died due to internal bleeding",
)


def _meet_goblin(console: Console) -> None:
    _tell(
        console,
        "An injured Goblin  comes in your way ",
        "Type 1 or 2 to choose: ",
        "1. Talk with him",
        "2. Ignore him",
    )
    console.pause(1)
    choice = console.read_int()
    if choice == 1:
        for line in _GOBLIN_DIALOGUE:
            console.say(line)
            console.pause(1)
        console.say("Your Main Focus Is To Kill That Thing!")
    elif choice == 2:
        _tell(
            console,
            "You need to figure out what hapened in this region by yourself now.",
            "You went to the beutifull Armenia Cascade.",
            "You saw something that was in front of the Cascade.",
        )
        console.pause(1)
    else:
        console.say("Invalid Input!")