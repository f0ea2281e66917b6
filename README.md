# sansfight

A tiny arcade game. Steer a heart around a box and dodge the shots that the
opponent at the top of the screen fires at you, while a two-channel chiptune
plays.

The game draws to a 160×160 screen with a four-colour palette and is shown,
scaled up, in a pygame window.

## Installing

```
pip install .
```

## Playing

```
sansfight
```

Options:

- `--scale N` — window pixels per console pixel (default 3, must be at least 1).
- `--frames N` — quit after this many frames.

Controls:

| Key          | Button     |
|--------------|------------|
| Arrow keys   | directions |
| X, Space     | button 1   |
| Z            | button 2   |

- On the title screen, pressing any of these keys starts the game.
- Move the heart with the arrow keys; it is kept inside the box.
- Every 60 frames (one second at 60 FPS) the opponent fires a shot aimed at
  where the heart is at that moment. Shots fly in a straight line and vanish
  once they leave the screen.
- Each hit costs one of your five life segments, shown under the box.
- When all five are gone the game shows "FIM DE JOGO" and stays there.

Sound is played only if pygame's mixer can be opened; otherwise the game runs
silently.

## Using the pieces

- `sansfight.console.Console` — the framebuffer console: `blit`, `blit_sub`,
  `line`, `hline`, `vline`, `oval`, `rect`, `text`, `tone`, `trace`,
  `pixel` to read back a palette index, and `begin_frame` to clear the
  previous frame's output. `Button` and `ToneFlag` hold the gamepad and
  tone bit flags. Tones, text calls and trace messages are collected in
  `Console.tones`, `Console.texts` and `Console.traces`.
- `sansfight.heart.Heart` and `sansfight.heart.Point` — the player, its
  movement (`Heart.update(gamepad)`) and its hit box (`Heart.is_hit`).
- `sansfight.projectile.launch(origin, target)` — makes a `Projectile`
  moving from one point towards another at 1.5 pixels per frame.
- `sansfight.enemy.Enemy` — fires projectiles and checks them against the
  heart.
- `sansfight.score.note_to_freq` — turns a note number into hertz (0 for a
  rest); `sansfight.score.Note` is one step of a track and
  `sansfight.harmony.harmony_track()` returns the bass line.
- `sansfight.music.MusicPlayer` — steps the melody and harmony one frame at a
  time and loops once both have ended.
- `sansfight.game.Game` — the title, playing and game-over states
  (`GameState`); call `Game.update(console)` once per frame.
- `sansfight.app` — the pygame front end: `render(console, surface)`,
  `gamepad_from_keys(pressed)` and `main(argv=None)`.

```python
from sansfight.console import Button, Console
from sansfight.game import Game

console = Console()
game = Game()

console.begin_frame()
console.gamepads[0] = Button.BUTTON_2   # press a key on the title screen
game.update(console)                     # now in GameState.PLAYING
```

## What it does not do

- There is no way to restart after the game-over screen short of closing the
  window and running `sansfight` again.
- Nothing is saved: no scores or settings are stored between runs.
- Text is not drawn into the framebuffer with a pixel font. `Console.text`
  only fills each 8×8 character cell with the background colour and records
  the call; the window draws the characters with pygame's default font.

## Running the tests

```
pip install .[test]
pytest
```