# invaders_arcade

A retro space invaders arcade game. A fleet of squids, crabs and octopuses marches
down the screen. You defend the ground from behind four brick barricades, and you
can shoot the bonus UFO when it crosses the top of the screen.

## Installing

```
pip install .
```

This also installs `pygame`, which opens the window and reads the keyboard.

## Playing

```
invaders-arcade
```

The game opens on the menu screen. The command takes these options:

| Option        | Meaning                                   |
|---------------|-------------------------------------------|
| `--fps N`     | frames per second (default 20)            |
| `--seed N`    | seed for the random numbers, for repeatable games |

| Key    | Menu  | Playing           | Paused | Defeat     |
|--------|-------|-------------------|--------|------------|
| Enter  | start | –                 | resume | play again |
| Escape | quit  | pause             | quit   | quit       |
| A / D  | –     | move left / right | –      | –          |
| Space  | –     | fire              | –      | –          |

Enter and Escape act when you press them, so holding one down does not skip
through screens. Closing the window also quits.

### Rules

- You start with three lives. A hit from an invader's shot costs a life and resets
  the field. Your score and the lives you have left carry over.
- Only one of your shots can be on screen at once. The invaders may have up to three.
- Each barricade brick takes two hits before it breaks. Shots from either side
  wear the bricks down.
- Squids are worth 40 points, crabs 20 and octopuses 10.
- The UFO is worth 200 points. It is worth 300 on your 23rd shot and on every 15th
  shot after that.
- The fleet speeds up as it thins out. If it drops down 11 lines, the game is
  lost. Clear the whole fleet and a new wave begins.

### What it does not do

The window draws everything as plain coloured rectangles and text. There are no
sprite images, no sound, and no high-score table; the score is lost once the game
closes.

## Using the pieces

The game logic does not need a window. `invaders_arcade.game.Game` steps one frame
at a time from a set of pressed `invaders_arcade.player.Key` values (`LEFT`,
`RIGHT`, `FIRE`, `ENTER`, `ESCAPE`). You can pass it your own `random.Random` to
get repeatable runs:

```python
import random

from invaders_arcade.game import Game, GameState
from invaders_arcade.player import Key

game = Game(random.Random(1))
game.update({Key.ENTER})
assert game.state is GameState.PLAY
game.update({Key.FIRE})
print(game.score_text())
```

`Game.update` returns `False` once the game has been closed. The playfield parts
are in `game.player`, `game.fleet`, `game.ufo` and `game.barricades`. They come
from `invaders_arcade.player`, `invaders_arcade.invaders`, `invaders_arcade.ufo` and
`invaders_arcade.barricades`, and each can also be used on its own.

## Running the tests

```
pip install .[test]
pytest
```