# gamecore

Building blocks for the runtime side of a small game engine, in plain Python:
frame clocks, timers, named events, a developer console's command line, keyboard,
cursor and gamepad state, and a few colour, image, XML and string helpers.

## Modules

- `gamecore.clock` – `Clock`, a frame clock that can be paused, unpaused, toggled,
  stepped one frame at a time (`step_single_frame()`) and scaled (`time_scale`).
  Each `tick()` measures the time since the previous tick, caps it at
  `max_delta_seconds` (0.1 by default), and ticks the clock's children.
  A `Clock()` created without a parent becomes a child of the system clock;
  `get_system_clock()` returns that root and `tick_system_clock()` ticks it.
  `detach()` removes a clock from its parent. A custom `time_source` can be passed
  in, which makes clocks easy to drive by hand.
- `gamecore.time_source` – `current_time_seconds()`, seconds since the module was loaded,
  from `time.perf_counter()`.
- `gamecore.timer` – `Timer(period, clock)` with `start()`, `stop()`, `elapsed_time()`,
  `elapsed_fraction()`, `has_period_elapsed()`, `decrement_period_if_elapsed()`,
  `force_complete()` and `remaining_time()`. A start time of zero means stopped.
- `gamecore.event_system` – `EventSystem` with `subscribe()`, `unsubscribe()`,
  `fire_event()` and `registered_event_names()`. Event names are compared without
  regard to case; subscribers run in order, and one that returns `True` consumes the
  event. `fire_event()` returns the number of subscription slots, or 0 if nobody
  ever subscribed.
- `gamecore.named_strings` – `NamedStrings`, string keys and values read back with
  `get_value(key, default)` as the type of the default (`str`, `bool`, `int`, `float`,
  `Rgba8`). It can be filled from an `xml.etree.ElementTree` element's attributes.
- `gamecore.dev_console` – `DevConsole`, `DevConsoleConfig`, `DevConsoleLine` and
  `DevConsoleMode`. `execute()` runs each line as a command with `key=value` arguments
  through an `EventSystem`, echoes it, keeps a history and reports unknown commands.
  `startup()` registers the `help` and `clear` commands and a `CharInput` handler.
  `handle_key_pressed()` edits the command line (enter, tilde/escape, arrows with
  history recall, home, end, delete, backspace); `handle_char_input()` appends
  printable characters. `begin_frame()` blinks the insertion point on a 0.5 s timer.
- `gamecore.keycodes` – `KeyCode`, the virtual key codes used by the input and console code.
- `gamecore.input_system` – `InputSystem`, `CursorMode` and `CursorState`. It tracks
  256 key states (`is_key_down()`, `was_key_just_pressed()`, `was_key_just_released()`),
  four controllers (`get_controller()`), and the cursor (`update_cursor()`,
  `cursor_client_delta()`, `cursor_normalized_position()`). `startup()` subscribes it
  to `KeyPressed` and `KeyReleased` events; while an attached console is open, key
  presses go to the console instead.
- `gamecore.xbox_controller` – `XboxController`, `XboxButton`, `KeyButtonState`,
  `GamepadState` and `BUTTON_FLAGS`. `update(state)` takes a raw reading (button bit
  mask, 0..255 triggers, signed 16-bit thumb axes); `update(None)` marks it disconnected.
- `gamecore.analog_joystick` – `AnalogJoystick` with inner (0.30) and outer (0.95)
  dead zones by default; exposes `position`, `magnitude`, `orientation_degrees` and
  `raw_position`.
- `gamecore.rgba8` – the frozen `Rgba8` colour with named constants (`Rgba8.RED`, …),
  `Rgba8.from_text("r,g,b[,a]")`, `scaled()`, `as_floats()`, and `interpolate()`.
- `gamecore.image` – `Image`, RGBA texels stored bottom row first, from
  `Image.load(path)` (through Pillow; an unreadable file gives an empty image) or
  `Image.filled(size, color)`; `texel_at()` and `raw_data()`.
- `gamecore.tile_heat_map` – `TileHeatMap`, one float per tile, with
  `heat_colors()` and `solid_colors()` giving one `Rgba8` per tile.
- `gamecore.xml_utils` – `parse_xml_attribute()`, `parse_xml_char_attribute()` and
  `parse_xml_float_range_attribute()` read typed attributes of an `ElementTree` element.
- `gamecore.string_utils` – `stringf()` (printf-style, length-capped) and
  `split_string_on_delimiter()` (drops empty pieces).
- `gamecore.file_utils` – `read_file_to_bytes()` and `read_file_to_string()`; an empty
  file raises `ValueError`.
- `gamecore.errors` – `fatal_error()` and `error_and_die()` / `guarantee_or_die()` print
  a report and raise `FatalError`; `recoverable_warning()` and `error_recoverable()` /
  `guarantee_recoverable()` issue a `RecoverableWarning` through `warnings` and continue.

## Installing

```
pip install .
```

## A short example

```python
from gamecore.clock import Clock
from gamecore.timer import Timer
from gamecore.event_system import EventSystem
from gamecore.named_strings import NamedStrings

clock = Clock()
blink = Timer(0.5, clock)
blink.start()

events = EventSystem()

def on_hello(args: NamedStrings) -> bool:
    print("hello", args.get_value("name", "world"))
    return True

events.subscribe("Hello", on_hello)
args = NamedStrings()
args.set_value("name", "gamecore")
events.fire_event("hello", args)
```

## What it does not do

The package keeps state; it does not talk to the operating system or draw anything.
There is no window, renderer, font or audio playback. `InputSystem` does not poll the
keyboard, mouse or gamepads itself: the caller fires `KeyPressed`/`KeyReleased` events,
passes `GamepadState` readings to `begin_frame()`, and passes the cursor position to
`update_cursor()`, which returns the point to move the cursor to in FPS mode rather
than moving it. The developer console keeps its lines and input text but has no
on-screen rendering.

## Running the tests

```
pip install .[test]
pytest
```