"""Game controller state: buttons, triggers and analog sticks."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .analog_joystick import AnalogJoystick

_JOYSTICK_MIN_VALUE = -32768.0
_JOYSTICK_MAX_VALUE = 32767.0
_TRIGGER_MAX_VALUE = 255.0


def _range_map_clamped(
    value: float, in_start: float, in_end: float, out_start: float, out_end: float
) -> float:
    fraction = (value - in_start) / (in_end - in_start)
    fraction = min(max(fraction, 0.0), 1.0)
    return out_start + (out_end - out_start) * fraction


@dataclass
class KeyButtonState:
    """Whether a key or button is down now and whether it was down last frame."""

    is_key_down: bool = False
    was_key_just_pressed: bool = False


class XboxButton(enum.IntEnum):
    """Buttons of a game controller, in storage order."""

    A = 0
    B = 1
    X = 2
    Y = 3
    LB = 4
    RB = 5
    BACK = 6
    START = 7
    LS = 8
    RS = 9
    DPAD_UP = 10
    DPAD_DOWN = 11
    DPAD_LEFT = 12
    DPAD_RIGHT = 13


# Bit of each button in a gamepad's button mask.
BUTTON_FLAGS: dict[XboxButton, int] = {
    XboxButton.DPAD_UP: 0x0001,
    XboxButton.DPAD_DOWN: 0x0002,
    XboxButton.DPAD_LEFT: 0x0004,
    XboxButton.DPAD_RIGHT: 0x0008,
    XboxButton.START: 0x0010,
    XboxButton.BACK: 0x0020,
    XboxButton.LS: 0x0040,
    XboxButton.RS: 0x0080,
    XboxButton.LB: 0x0100,
    XboxButton.RB: 0x0200,
    XboxButton.A: 0x1000,
    XboxButton.B: 0x2000,
    XboxButton.X: 0x4000,
    XboxButton.Y: 0x8000,
}

_UPDATE_ORDER = (
    XboxButton.A,
    XboxButton.B,
    XboxButton.X,
    XboxButton.Y,
    XboxButton.LB,
    XboxButton.RB,
    XboxButton.BACK,
    XboxButton.START,
    XboxButton.LS,
    XboxButton.RS,
    XboxButton.DPAD_UP,
    XboxButton.DPAD_DOWN,
    XboxButton.DPAD_LEFT,
    XboxButton.DPAD_RIGHT,
)


@dataclass(frozen=True)
class GamepadState:
    """One raw reading of a gamepad.

    ``buttons`` is a bit mask (see ``BUTTON_FLAGS``); triggers are 0..255 and
    thumb axes are signed 16-bit values.
    """

    buttons: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


class XboxController:
    """Tracks the buttons, triggers and sticks of one controller across frames."""

    def __init__(self, controller_id: int = -1) -> None:
        self.controller_id = controller_id
        self._is_connected = False
        self._left_trigger = 0.0
        self._right_trigger = 0.0
        self._buttons = [KeyButtonState() for _ in XboxButton]
        self.left_stick = AnalogJoystick()
        self.right_stick = AnalogJoystick()

    @property
    def is_connected(self) -> bool:
        return self._is_connected

    @property
    def left_trigger(self) -> float:
        return self._left_trigger

    @property
    def right_trigger(self) -> float:
        return self._right_trigger

    def get_button(self, button: XboxButton) -> KeyButtonState:
        return self._buttons[XboxButton(button)]

    def is_button_down(self, button: XboxButton) -> bool:
        return self.get_button(button).is_key_down

    def was_button_just_pressed(self, button: XboxButton) -> bool:
        state = self.get_button(button)
        return state.is_key_down and not state.was_key_just_pressed

    def was_button_just_released(self, button: XboxButton) -> bool:
        """True when the button is up now and was not down on the previous update."""
        state = self.get_button(button)
        return not state.is_key_down and not state.was_key_just_pressed

    def update(self, state: GamepadState | None) -> None:
        """Take a new reading; ``None`` means the controller is not connected."""
        if state is None:
            self.reset()
            return
        self._is_connected = True

        self._update_joystick(self.left_stick, state.thumb_lx, state.thumb_ly)
        self._update_joystick(self.right_stick, state.thumb_rx, state.thumb_ry)

        self._left_trigger = _range_map_clamped(
            float(state.left_trigger), 0.0, _TRIGGER_MAX_VALUE, 0.0, 1.0
        )
        self._right_trigger = _range_map_clamped(
            float(state.right_trigger), 0.0, _TRIGGER_MAX_VALUE, 0.0, 1.0
        )

        for button in _UPDATE_ORDER:
            flag = BUTTON_FLAGS[button]
            button_state = self._buttons[button]
            button_state.was_key_just_pressed = button_state.is_key_down
            button_state.is_key_down = (state.buttons & flag) == flag

    def reset(self) -> None:
        """Forget every reading and mark the controller disconnected."""
        self._is_connected = False
        self._left_trigger = 0.0
        self._right_trigger = 0.0
        self._buttons = [KeyButtonState() for _ in XboxButton]
        self.left_stick.reset()
        self.right_stick.reset()

    @staticmethod
    def _update_joystick(joystick: AnalogJoystick, raw_x: int, raw_y: int) -> None:
        x = _range_map_clamped(float(raw_x), _JOYSTICK_MIN_VALUE, _JOYSTICK_MAX_VALUE, -1.0, 1.0)
        y = _range_map_clamped(float(raw_y), _JOYSTICK_MIN_VALUE, _JOYSTICK_MAX_VALUE, -1.0, 1.0)
        joystick.update_position(x, y)