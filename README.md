# flappycoin

A small side-scrolling arcade game in the Flappy Bird style. Steer a
yellow bird through gaps between green pipes and pick up the gold coin that
floats in each gap. Each coin is worth one point. The more points you have,
the narrower the gaps get.

## Installing

```
pip install .
```

This also installs `pygame`, which the game uses for its window, drawing and
sound.

## Playing

Start the game with:

```
flappycoin
```

Options:

| Option                | Meaning                                            |
|-----------------------|----------------------------------------------------|
| `--music PATH`        | Audio file to loop as background music             |
| `--coin-sound PATH`   | Audio file played each time a coin is collected    |
| `--seed N`            | Seed for pipe placement, for a repeatable game     |

Controls:

| Key     | Action                                        |
|---------|-----------------------------------------------|
| `SPACE` | Start the game, then flap to fly upward       |
| `R`     | Restart after a game over                     |
| `ESC`   | Quit                                          |

Closing the window also quits. The game ends when the bird hits a pipe, the
ground or the top of the screen. A new pipe appears every 120 frames, and the
game runs at 60 frames per second.

### Difficulty

Every new pipe is made using the score at that moment. Each point makes the
gap 3 pixels narrower, down to at most 40 pixels narrower than at the start.
The gap is never smaller than 120 pixels. While you play, the on-screen
level is `score // 3 + 1`, and it stops at 15.

## Using the pieces

The game logic needs no window, so you can drive it from code:

```python
import random

import pygame

from flappycoin.game import Game

game = Game(audio=None, rng=random.Random(1))
game.handle_key(pygame.K_SPACE)   # start and flap
for _ in range(200):
    game.tick()                   # one frame: update, and add a pipe when it is due
print(game.score, game.game_over, game.difficulty_level())
```

`Game.handle_key` returns `False` when the key is `pygame.K_ESCAPE`, and
`True` otherwise. `Game.draw(surface)` renders the current frame onto any
pygame surface.

The `Bird`, `Pipe` and `Coin` classes in `flappycoin.bird`,
`flappycoin.pipe` and `flappycoin.coin` hold the movement and collision
rules. `flappycoin.audio.AudioManager` plays the background music and the
coin sound; `set_volume` takes a value from 0 to 100 and clamps anything
outside that range. The gameplay numbers and colours are in
`flappycoin.constants`.

## What it does not do

No music or sound files come with the package. The game is silent unless
you pass audio files with `--music` and `--coin-sound`; a missing or
unreadable file is skipped without an error. There are no high scores and
nothing is saved between games.

## Running the tests

```
pip install .[test]
pytest
```