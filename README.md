# worldinfire

World In Fire is a small text adventure that runs in your terminal.

The game first asks whether you want to play. It then describes the
entrance of an ancient crypt. Next you pick a class (Warrior, Wizard or
Rogue) and give your name. You find a chest that holds a weapon for your
class, and you choose whether to keep it. At a crossroads you either
explore a dark cave or stay where you are and meet an injured goblin.
Some choices end the game on the spot.

If you survive, a mutant rabbit three times your size attacks you. The
fight alternates between strikes and dodges over a fixed series of
rounds. It ends when the rabbit's hit points or yours reach zero, or
when the last round is over.

## Installing

```
pip install .
```

## Playing

```
worldinfire
```

Options:

- `--delay SECONDS_SCALE` scales the pauses between story lines. The
  default is `1.0`. Use `0` for no pauses. A negative value is rejected.
- `--no-sound` turns off the background music.

Answer each prompt with a single word or number, as the game asks:

- `y`, `Y`, `yes` or `Yes` to play at the opening question, or `n`,
  `N`, `no` or `No` to leave.
- `1`, `2` or `3` to pick Warrior, Wizard or Rogue, followed by your
  name.
- `yes` or `no` when asked whether to store what you found. Answering
  `no` ends the game.
- `1` or `2`, or a word, at each turn of the crossroads.
- `f` or `F`, and `g` or `G`, to strike during the fight.
- `l`/`left`/`Left`, `r`/`right`/`Right` or `d`/`dash`/`Dash` to dodge.

When the opening question, the class choice, the store question or a
fight prompt gets an invalid answer, the game says what to type and
asks again.

The command exits with status 0 when the game ends, whether you win or
lose. It exits with 1 if input runs out, and with 130 if you interrupt
it.

## Sound

Background music loops through the menu, the class selection and the
fight. It plays the files `Main_Menu.wav`, `selectClassANDExploring.wav`
and `BattleFinal.wav` from the current directory through the standard
`winsound` module.

Where `winsound` is not available, which means anywhere but Windows, the
game runs silently. It also runs silently when a file is missing.

## Using it from Python

The game logic lives in plain modules. Each one reads from any text
stream, so you can script a session:

```python
import io

from worldinfire.console import Console
from worldinfire.intro import check_answer, Answer

print(check_answer("yes") is Answer.YES)

console = Console(io.StringIO("Y\n"), io.StringIO(), 0)
print(console.read_word())
```

Modules:

- `worldinfire.console`
  - `Console` reads whitespace-separated words (`read_word`) and
    integers (`read_int`). It also writes lines (`say`) and waits
    (`pause`).
  - `GameOver` is raised when the story ends.
- `worldinfire.intro`
  - `check_answer` classifies a reply as an `Answer`.
  - `Intro` runs the opening menu and scene. It can be used as a context
    manager that stops the intro music.
- `worldinfire.player`
  - `Player` and its classes `Warrior`, `Wizard` and `Rogue`. Each has
    health, an inventory of `Item`s, `create_item` and
    `add_item_to_inventory`.
  - `select_class` asks for a class and a name.
- `worldinfire.story`
  - `crossroads` plays the branching exploration.
- `worldinfire.battle`
  - `Monster` tracks hit points, which never drop below zero.
  - `FinalBattle` plays the boss music while its `with` block runs.
- `worldinfire.fight`
  - `run_attack` and `run_dodge` play single rounds, described by
    `AttackRound` and `DodgeRound`.
  - `rabbit_fight` plays the whole fight. It raises `Victory` when the
    rabbit falls and `GameOver` when you do.
- `worldinfire.sound`
  - `Sound` plays one looping `Track` at a time.
- `worldinfire.cli`
  - `main` is the entry point of the `worldinfire` command.

## What it does not do

The adventure ends after the rabbit fight; there is no further chapter.
Progress cannot be saved, so every run starts from the opening question.

## Running the tests

```
pip install ".[test]"
pytest
```