"""Keyboard, cursor and game controller input."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

from .dev_console import DevConsole
from .event_system import EventArgs, EventSystem
from .xbox_controller import GamepadState, KeyButtonState, XboxController

NUM_KEYCODES = 256
NUM_XBOX_CONTROLLERS = 4


class CursorMode(enum.Enum):
    POINTER = enum.auto()
    FPS = enum.auto()


@dataclass
class CursorState:
    """Cursor position and per-frame movement in client coordinates."""

    client_delta: tuple[int, int] = (0, 0)
    client_position: tuple[int, int] = (0, 0)
    mode: CursorMode = CursorMode.POINTER


def _check_key_code(key_code: int) -> int:
    if not 0 <= key_code < NUM_KEYCODES:
        raise ValueError(f"key code must be in 0..{NUM_KEYCODES - 1}, got {key_code}")
    return key_code


@dataclass
class InputSystem:
    """Tracks key states, controllers and the cursor from frame to frame."""

    event_system: EventSystem = field(default_factory=EventSystem)
    dev_console: DevConsole | None = None
    cursor_state: CursorState = field(default_factory=CursorState)

    def __post_init__(self) -> None:
        self._key_states = [KeyButtonState() for _ in range(NUM_KEYCODES)]
        self._controllers = [XboxController() for _ in range(NUM_XBOX_CONTROLLERS)]
        self._prev_cursor_mode: CursorMode | None = None

    def startup(self) -> None:
        """Number the controllers and subscribe to key events."""
        for index, controller in enumerate(self._controllers):
            controller.controller_id = index
        self.event_system.subscribe("KeyPressed", self.event_key_pressed)
        self.event_system.subscribe("KeyReleased", self.event_key_released)

    def begin_frame(self, gamepad_states: Sequence[GamepadState | None] = ()) -> None:
        """Feed each controller its reading; missing readings mean disconnected."""
        if len(gamepad_states) > NUM_XBOX_CONTROLLERS:
            raise ValueError(
                f"at most {NUM_XBOX_CONTROLLERS} gamepad states, got {len(gamepad_states)}"
            )
        for index, controller in enumerate(self._controllers):
            state = gamepad_states[index] if index < len(gamepad_states) else None
            controller.update(state)

    def end_frame(self) -> None:
        for state in self._key_states:
            state.was_key_just_pressed = state.is_key_down

    def was_key_just_pressed(self, key_code: int) -> bool:
        state = self._key_states[_check_key_code(key_code)]
        return state.is_key_down and not state.was_key_just_pressed

    def was_key_just_released(self, key_code: int) -> bool:
        state = self._key_states[_check_key_code(key_code)]
        return not state.is_key_down and state.was_key_just_pressed

    def is_key_down(self, key_code: int) -> bool:
        return self._key_states[_check_key_code(key_code)].is_key_down

    def handle_key_pressed(self, key_code: int) -> None:
        self._key_states[_check_key_code(key_code)].is_key_down = True

    def handle_key_released(self, key_code: int) -> None:
        self._key_states[_check_key_code(key_code)].is_key_down = False

    def get_controller(self, controller_id: int) -> XboxController:
        if not 0 <= controller_id < NUM_XBOX_CONTROLLERS:
            raise IndexError(f"controller id {controller_id} out of range")
        return self._controllers[controller_id]

    def set_cursor_mode(self, cursor_mode: CursorMode) -> None:
        self.cursor_state.mode = cursor_mode

    def update_cursor(
        self, client_position: tuple[int, int], client_dimensions: tuple[int, int]
    ) -> tuple[int, int] | None:
        """Record the cursor's client position for this frame.

        In FPS mode the delta is measured from the window centre and the
        centre is returned: the caller should move the cursor there. In
        pointer mode nothing needs moving and None is returned.
        """
        state = self.cursor_state
        if self._prev_cursor_mode is None:
            self._prev_cursor_mode = state.mode

        prev_x, prev_y = state.client_position
        x, y = client_position
        state.client_position = (x, y)
        state.client_delta = (x - prev_x, y - prev_y)

        warp_to = None
        if state.mode == CursorMode.FPS:
            width, height = client_dimensions
            center = (width // 2, height // 2)
            if self._prev_cursor_mode == CursorMode.POINTER:
                state.client_delta = (0, 0)
            else:
                state.client_delta = (x - center[0], y - center[1])
            state.client_position = center
            warp_to = center

        self._prev_cursor_mode = state.mode
        return warp_to

    def cursor_client_delta(self) -> tuple[float, float]:
        """Cursor movement this frame in FPS mode; zero in pointer mode."""
        if self.cursor_state.mode == CursorMode.FPS:
            dx, dy = self.cursor_state.client_delta
            return (float(dx), float(dy))
        return (0.0, 0.0)

    def cursor_normalized_position(self, client_dimensions: tuple[int, int]) -> tuple[float, float]:
        """Last cursor position as 0..1 with y pointing up; centre for an empty window."""
        width, height = client_dimensions
        if width == 0 or height == 0:
            return (0.5, 0.5)
        x, y = self.cursor_state.client_position
        return (x / width, 1.0 - y / height)

    def event_key_pressed(self, args: EventArgs) -> bool:
        """Record a key press, or pass it to the console while the console is open."""
        key_code = args.get_value("KeyCode", -1) % NUM_KEYCODES
        if self.dev_console is not None and self.dev_console.is_open():
            return self.dev_console.handle_key_pressed(args)
        self.handle_key_pressed(key_code)
        return True

    def event_key_released(self, args: EventArgs) -> bool:
        key_code = args.get_value("KeyCode", -1) % NUM_KEYCODES
        self.handle_key_released(key_code)
        return True