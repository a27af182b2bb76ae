"""Command line entry point that plays the whole adventure."""

from __future__ import annotations

import argparse
import sys

from .battle import FinalBattle
from .console import Console, GameOver
from .fight import Victory, rabbit_fight
from .intro import Intro
from .player import Player, select_class
from .sound import Sound
from .story import crossroads


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="worldinfire",
        description="A text adventure in a world in fire.",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=1.0,
        help="scale for the pauses between story lines (0 for none)",
    )
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="do not play background music",
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    return args


def _play(console: Console, sound: Sound) -> None:
    with Intro(console, sound) as intro:
        intro.main_menu()
        intro.print_info()

    hero = select_class(console)
    sound.play_class_select()
    # Health in the fight is tracked on a separate, unnamed fighter.
    fighter = Player(health=100)

    console.say("REMINDER: ")
    console.say(f"The class that you have selected is: {hero.race}")

    item = hero.create_item(console)
    hero.add_item_to_inventory(item, console)
    crossroads(hero, console)

    with FinalBattle(sound):
        rabbit_fight(fighter, item.name, console)
    sound.stop()


def main(argv: list[str] | None = None) -> int:
    """Run the game and return the process exit status."""
    args = _parse_args(argv)
    console = Console(delay=args.delay)
    sound = Sound(enabled=not args.no_sound)
    try:
        _play(console, sound)
    except (GameOver, Victory):
        pass
    except EOFError:
        sound.stop()
        return 1
    except KeyboardInterrupt:
        sound.stop()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())