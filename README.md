# gameboiler

A starting point for a small 2D game built on pygame. It provides:

- a game object (`gameboiler.game.Game`) with a main loop that, once per
  frame, polls the window, measures the time since the last frame
  (`delta_time`) and runs the current state's update handler;
- a state machine (`gameboiler.states`) with `GameState` values `BOOT`,
  `MENU`, `SETTINGS`, `PLAYING`, `PAUSED` and `SHUTDOWN`, each with enter,
  update and exit handlers, and `update_game_state()` to move between them;
- action-based input (`gameboiler.input`): logical actions (`InputKey`)
  such as `MOVE_UP`, `INTERACT` or `PAUSE` bound to physical keys
  (`PhysicalKey`) on keyboard, mouse and gamepad, with default bindings from
  `default_input_bindings()` and queries through
  `InputSystem.action_pressed()` and `InputSystem.action_down()`;
- a pygame renderer (`gameboiler.pygame_render.PygameRenderer`) and a pygame
  input backend (`gameboiler.pygame_input.PygameInput`), behind the small
  `RenderAPI` and `PlatformInput` interfaces so other backends can be used;
- category-tagged logging (`gameboiler.log`): `CategoryLogger`, `log_msg()`,
  a replaceable global logger, and `StdLogBackend`, which writes to stderr
  (and optionally a file) and filters by a `LogMask` of enabled levels;
- default settings (`gameboiler.settings.Settings`) with JSON persistence
  through `load_settings()` and `save_settings()`;
- a window description (`gameboiler.window.Window`) and whole-file helpers
  (`gameboiler.files.read_file`, `gameboiler.files.save_file`).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
gameboiler
```

This opens an 800x600 window titled "gameboiler" and runs the game loop
until the window is closed or Escape is pressed. `gameboiler --version`
prints the version.

The state machine as shipped is a skeleton: the game boots, passes through
the menu state and enters the playing state on the following frames. While
playing, F1 toggles a debug overlay showing the frame rate and frame time,
and the gamepad Start button pauses; the paused state then moves on to the
settings state and from there to shutdown, which ends the loop.

## Using it in code

```python
from gameboiler.game import Game
from gameboiler.log import StdLogBackend
from gameboiler.pygame_input import PygameInput
from gameboiler.pygame_render import PygameRenderer

platform_input = PygameInput()
renderer = PygameRenderer(input_sink=platform_input)
with Game(renderer, platform_input, StdLogBackend()) as game:
    game.init()
    game.start()
```

The renderer polls pygame events in `window_should_close()` and hands each
one to its `input_sink`, so passing the input backend there is what makes
key presses reach the game.

Logging from your own code goes through a `CategoryLogger`, which tags each
message with its category:

```python
from gameboiler.log import CategoryLogger

log = CategoryLogger("World")
log.info("Loaded %d entities", 42)
```

Actions are checked through the game's `InputSystem`:

```python
from gameboiler.input import InputKey

if game.input.action_pressed(InputKey.INTERACT):
    ...
```

Settings can be written to and read back from a JSON file; entries missing
from the file keep their defaults:

```python
from gameboiler.settings import default_settings, load_settings, save_settings

settings = default_settings()
settings.music_volume = 0.5
save_settings(settings, "settings.json")
restored = load_settings("settings.json")
```

## What it does not do

- There is no gameplay, and the menu, paused and settings states draw
  nothing: they only log and pass on to the next state.
- `Game` starts from the default settings; it does not load a settings file
  by itself, and nothing applies settings such as fullscreen or volumes.
- There is no sound, no asset loading and no screen for changing key
  bindings.