"""The fight against the mutant rabbit: alternating attack and dodge rounds."""

from __future__ import annotations

from dataclasses import dataclass

from .battle import Monster
from .console import Console, GameOver
from .player import Player

_RIGHT = frozenset({"Right", "right", "r"})
_LEFT = frozenset({"Left", "left", "l"})
_DASH = frozenset({"Dash", "dash", "d"})
_HEAD = frozenset({"F", "f"})
_BODY = frozenset({"G", "g"})

_MISS = "You missed! "
_SUCCESS = "You succefully dodged the attack!"
_RETRY_ATTACK = "Type again just f or F"
_RETRY_DODGE = "Try again to type d or D or Dash!"
_DODGE_PROMPT = "Type Left or Right or right or r or d (to dash) in order to dodge!"


class Victory(Exception):
    """Raised when the monster's hit points reach zero."""


@dataclass(frozen=True)
class Strike:
    """The outcome of one attack choice.

    A strike with no damage is a miss. ``show_hp`` tells whether the
    monster's remaining hit points are reported afterwards.
    """

    damage: int = 0
    message: str = _MISS
    show_hp: bool = True

    @property
    def hits(self) -> bool:
        return self.damage > 0


@dataclass(frozen=True)
class Dodge:
    """The outcome of one dodge choice.

    A dodge with no damage succeeds. ``hp_line`` is formatted with the
    player's remaining health as ``hp``.
    """

    damage: int = 0
    message: str = _SUCCESS
    hp_line: str = "Now you have {hp} hp left!"

    @property
    def hurts(self) -> bool:
        return self.damage > 0


@dataclass(frozen=True)
class AttackRound:
    """A turn where the player picks where to hit the monster."""

    head_target: str
    body_target: str
    on_head: Strike
    on_body: Strike
    retry: str = _RETRY_ATTACK

    def prompt(self, item_name: str) -> tuple[str, str]:
        return (
            f"Type F or f in order to hit it in {self.head_target} with your {item_name}!",
            f"Type G or G in order to hit it in {self.body_target} with your {item_name}!",
        )


@dataclass(frozen=True)
class DodgeRound:
    """A turn where the player picks how to dodge the monster's attack."""

    on_right: Dodge
    on_left: Dodge
    on_dash: Dodge
    intro: tuple[str, ...] = ()
    retry: str = _RETRY_DODGE


def run_attack(
    round_: AttackRound, monster: Monster, console: Console, item_name: str
) -> Strike:
    """Play one attack round and return the chosen strike.

    Raises Victory when the monster is brought down to zero hit points.
    """
    for line in round_.prompt(item_name):
        console.say(line)
    while True:
        word = console.read_word()
        if word in _HEAD:
            strike = round_.on_head
        elif word in _BODY:
            strike = round_.on_body
        else:
            console.say("Invalid input!")
            console.say(round_.retry)
            continue
        break

    if strike.hits:
        monster.take_damage(strike.damage)
    console.pause(1)
    console.say(strike.message)
    console.pause(1)
    if strike.hits and monster.hp <= 0:
        console.say("You Won the Game!")
        console.say("The First Part is completed, the next part will be done soon!")
        raise Victory("the monster was defeated")
    if strike.show_hp:
        console.say(f"Monster hp: {monster.hp}")
        console.pause(1)
    return strike


def run_dodge(round_: DodgeRound, player: Player, console: Console) -> Dodge:
    """Play one dodge round and return the chosen dodge.

    Raises GameOver when the player's health is brought down to zero.
    """
    for line in round_.intro:
        console.say(line)
    console.say(_DODGE_PROMPT)
    console.pause(1)
    while True:
        word = console.read_word()
        if word in _RIGHT:
            dodge = round_.on_right
        elif word in _LEFT:
            dodge = round_.on_left
        elif word in _DASH:
            dodge = round_.on_dash
        else:
            console.say("Invalid Input!")
            console.say(round_.retry)
            continue
        break

    console.pause(1)
    console.say(dodge.message)
    if not dodge.hurts:
        console.pause(1)
        return dodge
    player.take_damage(dodge.damage)
    console.say(dodge.hp_line.format(hp=player.health))
    if player.health <= 0:
        console.say("Game Over! You have no HP left.")
        raise GameOver("killed by the monster")
    return dodge


def _hit(damage: int, message: str | None = None) -> Strike:
    text = message if message is not None else f"You gave {damage} Hp damage to the rabbit! "
    return Strike(damage, text)


_MISS_AND_STOP = Strike(show_hp=False)
_MISS_AND_REPORT = Strike()

_HEAD_40 = Dodge(40, "You tried to dodge but you got hit in the head!(You lost 40 hp)")
_BACK_15 = Dodge(15, "You tried to dodge but you got hit in the back! (You lost 15 hp)")
_DODGED = Dodge()

_AGAIN = ("the head again", "the chest again")

_SARUKE = DodgeRound(on_right=_HEAD_40, on_left=_DODGED, on_dash=_HEAD_40)

RABBIT_ROUNDS: tuple[tuple[AttackRound, DodgeRound], ...] = (
    (
        AttackRound(
            "the head",
            "the chest",
            _hit(30, "You gave 30 Hp damage to your rabbit! "),
            _hit(20),
            retry="Type again just f or F or G or g",
        ),
        DodgeRound(
            on_right=Dodge(
                35,
                "You tried to dodge but you got hit in the head!(You lost 35 hp)",
                "Now you have {hp}hp left!",
            ),
            on_left=_DODGED,
            on_dash=_BACK_15,
            intro=("The rabbit becomes angry at you and is preparing it's first attack",),
            retry="Try again to type d or dash or Dash or r or right or Right "
            "or l or left or left!",
        ),
    ),
    (
        AttackRound(*_AGAIN, _MISS_AND_STOP, _hit(30, "You gave 20 Hp damage to the rabbit! ")),
        DodgeRound(on_right=_DODGED, on_left=_HEAD_40, on_dash=_BACK_15),
    ),
    (
        AttackRound(*_AGAIN, _hit(30, "You gave 20 Hp damage to the rabbit! "), _MISS_AND_STOP),
        DodgeRound(
            on_right=Dodge(35, "You tried to dodge but you got hit in the back! (You lost 35 hp)"),
            on_left=Dodge(
                45,
                "You tried to dodge but you got hit in the head!(You lost 45 hp)",
                "Now you have 65 hp left!",
            ),
            on_dash=Dodge(message="You easily managed to slip between it's legs"),
        ),
    ),
    (
        AttackRound("the back", "the back of the neck", _MISS_AND_STOP, _hit(35)),
        DodgeRound(
            on_right=_DODGED,
            on_left=_HEAD_40,
            on_dash=_BACK_15,
            intro=("It turns back at you and starts shouting at you: Kirttss! KIRSTTTS!!! ",),
        ),
    ),
    (
        AttackRound(*_AGAIN, _MISS_AND_STOP, _hit(35)),
        DodgeRound(
            on_right=_DODGED,
            on_left=_HEAD_40,
            on_dash=Dodge(25, "You tried to dodge but you got hit in the back! (You lost 25 hp)"),
        ),
    ),
    (
        AttackRound(*_AGAIN, _hit(35), _MISS_AND_REPORT),
        DodgeRound(
            on_right=_HEAD_40,
            on_left=_HEAD_40,
            on_dash=Dodge(message="You managed to slip through the rabbit's legs again!"),
        ),
    ),
    (
        AttackRound("the back again", "the legs", _MISS_AND_REPORT, _hit(35)),
        DodgeRound(
            on_right=_HEAD_40,
            on_left=_DODGED,
            on_dash=_HEAD_40,
            intro=(
                "It turn again and starts a surprise attack (It is using it's "
                "special attack named SARUKE, be careful!)",
            ),
        ),
    ),
    (AttackRound(*_AGAIN, _MISS_AND_REPORT, _hit(35)), _SARUKE),
    (AttackRound(*_AGAIN, _MISS_AND_REPORT, _hit(35)), _SARUKE),
)


def rabbit_fight(player: Player, item_name: str, console: Console) -> Monster:
    """Fight the mutant rabbit through every round.

    Raises Victory if the rabbit falls and GameOver if the player does;
    otherwise returns the rabbit as it stands after the last round.
    """
    console.pause(1)
    console.say("You encountered a mutant rabbit that is x3 bigger than you!")
    rabbit = Monster(100)
    for attack, dodge in RABBIT_ROUNDS:
        run_attack(attack, rabbit, console, item_name)
        run_dodge(dodge, player, console)
    return rabbit