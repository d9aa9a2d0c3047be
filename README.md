# monsterbattle

A small console puzzle game. Your party of four monsters makes its way
through a dungeon of five enemies. You attack by lining up gems: move one
gem along a row of fourteen, and any run of three or more of the same kind
disappears. The monsters whose element matches the cleared gems strike the
enemy. Clearing soul gems heals the party. Each further clear that follows
in the same turn is a combo, and combos multiply the effect.

The game's messages are in Japanese.

## Installation

```
pip install .
```

## Playing

```
monsterbattle
```

On your turn you see the board, with the gem positions labelled `A` to `N`.
Type two letters: the first is the gem to pick up and the second is where to
put it down. `AD`, for example, moves the gem at `A` to position `D`, and
the gems in between shift one place along. The command is asked for again
until you give two different letters between `A` and `N`. Input is read as
whitespace-separated words, and a longer word is taken two letters at a
time, so `ADBC` gives two commands.

Gem marks:

| Mark | Element |
|------|---------|
| `*`  | Flame   |
| `~`  | Aqua    |
| `%`  | Leaf    |
| `#`  | Ground  |
| `+`  | Soul (heals) |

Flame beats Leaf, Leaf beats Ground, Ground beats Aqua, and Aqua beats Flame.
Each strong match does double damage and the reverse does half.

Beat all five enemies to clear the game. If the party's HP falls to zero in
a battle, that battle is lost. At the end the game prints how many enemies
were defeated. Ending the input (or pressing Ctrl-C) stops the game.

## Other console programs

The package also comes with three small programs:

```
monsterbattle-guess
```

A hit-and-blow guessing game with a three-digit number. The secret digits
are printed when the game starts. You enter the digits one at a time. A
*hit* is a correct digit in the correct place. A *blow* is counted for each
digit of the answer that equals a guessed digit in another place. After a
miss, enter `0` to stop or any other number to guess again.

```
monsterbattle-scores
```

Prints the maximum, minimum and average of a fixed set of five scores.

```
monsterbattle-shopping
```

Shows how many apples and how many oranges a fixed budget of 3000 buys, as a
row of stars for each, and what money is left.

## Using it as a library

The game logic can be used without the console. `monsterbattle.gems` has the
gem-row operations, such as `identify_removable_gems`, `move_gem`,
`compact_gems`, `fill_empty_gems`, `format_gems` and `parse_command`.
`monsterbattle.battle` has the damage formulas (`randomized_damage`,
`compute_enemy_attack`, `compute_party_attack`, `compute_recovery_amount`),
`assemble_team`, and a `Game` class. `Game` takes a random generator, a
function called with no arguments that returns a line of input, and a
function that writes text, so you can drive it from a script or from tests:

```python
import random
from monsterbattle.battle import Game, assemble_team, default_dungeon, default_party_monsters

output = []
game = Game(random.Random(1), read=lambda: "AB", write=output.append)
party = assemble_team("player", default_party_monsters())
wins = game.traverse_dungeon(default_dungeon(), party)
```

`monsterbattle.guessing` offers `generate_answer` and `score_guess`,
`monsterbattle.scores` offers `summarize` and `format_summary`, and
`monsterbattle.shopping` offers `purchase_line`.

## What it does not do

The dungeon, the party and the player name ("test") are fixed in the
`monsterbattle` command; there is no way to choose them from the command
line. Games cannot be saved or resumed, and there is no graphical screen.

## Running the tests

```
pip install .[test]
pytest
```