# pacmaze

A small maze-chasing arcade game built on pygame. You steer Pac-Man around a
fixed maze and eat pellets while five ghosts wander the corridors. Special
items appear on the board:

- **Pellets**: 10 points each. When all ten are eaten, ten new ones are placed.
- **Cherry**: for ten seconds the mouth stays open and you can eat ghosts for
  50 points each. An eaten ghost disappears until cherry mode ends.
- **Apple**: one extra life.
- **Mushroom**: costs one life.
- **Pepper**: for ten seconds each step covers one more cell.

If you touch a visible ghost outside cherry mode, you lose a life. After a hit
there is a one-second grace period. You start with three lives, and the game
ends when none are left.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
pacmaze [--assets DIR] [--data DIR]
```

- `--assets DIR` is the directory that holds images and music. The default is
  `../assets`.
- `--data DIR` is the directory for the score files. The default is the
  current directory.

The window is 960×720 and runs at 60 frames per second. Closing the window or
pressing Escape at any point quits the program.

The main menu has three entries. Move between them with Up and Down and
choose with Enter:

1. **Start Game**: asks for your name. Typing only works while the mouse is
   over the input box. The box takes up to 15 printable characters, and
   Backspace deletes the last one. Enter starts the game.
2. **Score**: shows the first ten records saved in the data directory. Press
   Enter to go back.
3. **Exit**: quits.

Use the arrow keys to move during play. When the game ends, the ending screen
shows your name, your score and the date and time. Press Enter there to save
the result and return to the menu.

## Assets

The package does not include any images or music. It looks for these files
under the assets directory:

- `background4.jpg`: the menu background
- `items/cherry.png`, `items/apple1.png`, `items/mushroom.png`,
  `items/pepper.png`: the item sprites
- `sprites/pac/pacClosed.png`, `sprites/pac/pacWide.png`: the Pac-Man sprites
- `sprites/ghosts/blue/blue0.png`, `sprites/ghosts/clyde/clyde4.png`,
  `sprites/ghosts/inky/inky2.png`, `sprites/ghosts/pinky/pinky1.png`,
  `sprites/ghosts/blue/blue3.png`: the ghost sprites
- `background.mp3`: the music played during a game

If an image cannot be loaded, the game prints a warning and leaves that image
out. If the music file is missing, the game runs without sound.

## Saved results

Each saved result is appended to two files in the data directory:

- `output.txt` is a readable log. Each entry has the name, the score, the
  timestamp (`YYYY-MM-DD  HH:MM:SS`) and a separator line.
- `output.bin` is a binary form. Each entry has a length-prefixed,
  NUL-terminated name, a 32-bit score and a length-prefixed, NUL-terminated
  timestamp. The score board reads from this file.

## Using the pieces from code

- `pacmaze.board` has the game rules and needs no window. `Game` and `Board`
  take an injectable `random.Random` and a clock. `Game.step(direction)`
  advances one frame and returns whether the game is over.
- `pacmaze.records` has `ScoreRecord`, `format_timestamp`, `append_text`,
  `append_binary`, `save_record` and `read_records`.
- `pacmaze.screen` has `GameScreen`, `Key`, `FrameInput`, `Session` and the
  `Screen` interface (`init`, `update`, `draw`, `unload`, `finish`). The screens
  themselves are `MenuScreen`, `NameScreen`, `GameplayScreen`, `ScoreScreen`
  and `EndingScreen`.
- `pacmaze.app` has `App`, which switches between screens and runs the main
  loop, and `Transition`, a fade to black and back.

## What it does not do

The score board does not sort records. It always shows the first ten entries
in `output.bin`, and later results are not shown once ten are stored.

## Running the tests

```
pip install .[test]
pytest
```