"""An in-game developer console: command line, history and output lines."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

from .clock import Clock, get_system_clock
from .event_system import EventArgs, EventSystem
from .keycodes import KeyCode
from .named_strings import NamedStrings
from .rgba8 import Rgba8
from .string_utils import split_string_on_delimiter
from .timer import Timer

_BLINK_PERIOD_SECONDS = 0.5


class DevConsoleMode(enum.Enum):
    OPEN_FULL = enum.auto()
    OPEN_PARTIAL = enum.auto()
    COMMAND_PROMPT_ONLY = enum.auto()
    HIDDEN = enum.auto()


@dataclass(frozen=True)
class DevConsoleLine:
    """One line of console output."""

    color: Rgba8
    text: str


@dataclass
class DevConsoleConfig:
    font_name: str = "SquirrelFixedFont"
    font_aspect: float = 0.7
    lines_on_screen: int = 40
    max_command_history: int = 128
    start_open: bool = False


class DevConsole:
    """Runs typed commands through an event system and keeps their output."""

    ERROR_COLOR: ClassVar[Rgba8] = Rgba8(255, 0, 0, 255)
    WARNING: ClassVar[Rgba8] = Rgba8(255, 255, 0, 255)
    INFO_MAJOR: ClassVar[Rgba8] = Rgba8(0, 255, 255, 255)
    INFO_MINOR: ClassVar[Rgba8] = Rgba8(0, 180, 180, 255)
    ECHO: ClassVar[Rgba8] = Rgba8(200, 0, 200, 255)
    INPUT_TEXT: ClassVar[Rgba8] = Rgba8(200, 200, 255, 255)
    INPUT_INSERTION_POINT: ClassVar[Rgba8] = Rgba8(255, 255, 255, 255)
    GAME_MAJOR: ClassVar[Rgba8] = Rgba8(255, 80, 0, 255)
    GAME_MINOR: ClassVar[Rgba8] = Rgba8(0, 180, 255, 255)
    GAME_DEBUG: ClassVar[Rgba8] = Rgba8(120, 255, 120, 255)

    BANNER_COLOR: ClassVar[Rgba8] = Rgba8(0, 200, 50, 255)
    BANNER_TEXT: ClassVar[str] = "Dev Console v1.0"

    def __init__(
        self,
        config: DevConsoleConfig | None = None,
        event_system: EventSystem | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config if config is not None else DevConsoleConfig()
        self.event_system = event_system if event_system is not None else EventSystem()
        self.insertion_point_blink_timer = Timer(
            _BLINK_PERIOD_SECONDS, clock if clock is not None else get_system_clock()
        )
        self.mode = DevConsoleMode.HIDDEN
        self.input_text = ""
        self.insertion_point_position = 0
        self.insertion_point_visible = True
        self.command_history: list[str] = []
        self.history_index = 0
        self.lines: list[DevConsoleLine] = []
        self.frame_number = 0
        self.font_path = ""
        self._is_open = False

    def startup(self) -> None:
        """Register the console's own commands and print the banner."""
        self.font_path = "Data/Fonts/" + self.config.font_name
        self.event_system.subscribe("CharInput", self.handle_char_input)
        self.event_system.subscribe("help", self.command_help)
        self.event_system.subscribe("clear", self.command_clear)
        self.event_system.fire_event("clear")

    def begin_frame(self) -> None:
        """Count the frame and blink the insertion point."""
        self.frame_number += 1
        while self.insertion_point_blink_timer.decrement_period_if_elapsed():
            self.insertion_point_visible = not self.insertion_point_visible

    def execute(self, command_text: str, echo_command: bool = True) -> None:
        """Run each line of ``command_text`` as a command with key=value arguments."""
        for line in split_string_on_delimiter(command_text, "\n"):
            parts = split_string_on_delimiter(line, " ")
            if not parts:
                continue
            command_name = parts[0]

            arguments = NamedStrings()
            for part in parts[1:]:
                key_value = split_string_on_delimiter(part, "=")
                if len(key_value) == 2:
                    arguments.set_value(key_value[0], key_value[1])

            self.add_line(self.ECHO, line)

            if not self.command_history or self.command_history[-1] != line:
                self.command_history.append(line)
            self.history_index = len(self.command_history)

            handled = self.event_system.fire_event(command_name.lower(), arguments)
            if echo_command and not handled:
                self.add_line(self.ERROR_COLOR, f"Error: Unknown Command '{line}'")

    def add_line(self, color: Rgba8, text: str) -> None:
        self.lines.append(DevConsoleLine(color, text))

    def toggle_open(self) -> None:
        """Show the console if hidden, hide it otherwise."""
        if self.mode == DevConsoleMode.HIDDEN:
            self.mode = DevConsoleMode.OPEN_FULL
            self._is_open = True
            self.insertion_point_blink_timer.start()
        else:
            self.mode = DevConsoleMode.HIDDEN
            self._is_open = False
            self.insertion_point_blink_timer.stop()
            self.history_index = len(self.command_history)

    def is_open(self) -> bool:
        return self._is_open

    def handle_key_pressed(self, args: EventArgs) -> bool:
        """Edit the command line for the key in ``args["KeyCode"]``; never consumes."""
        key_code = args.get_value("KeyCode", -1) % 256
        text_length = len(self.input_text)

        if key_code == KeyCode.ENTER:
            if not self.input_text:
                self.toggle_open()
            else:
                self.execute(self.input_text)
                self.input_text = ""
                self.insertion_point_position = 0
        elif key_code in (KeyCode.TILDE, KeyCode.ESC):
            self.toggle_open()
        elif key_code == KeyCode.UPARROW:
            if self.command_history and self.history_index > 0:
                self.history_index -= 1
                self._recall_history()
        elif key_code == KeyCode.DOWNARROW:
            if self.command_history and self.history_index < len(self.command_history) - 1:
                self.history_index += 1
                self._recall_history()
            else:
                self.input_text = ""
                self.history_index = len(self.command_history)
        elif key_code == KeyCode.LEFTARROW:
            if self.insertion_point_position > 0:
                self.insertion_point_position -= 1
        elif key_code == KeyCode.RIGHTARROW:
            if self.insertion_point_position < text_length:
                self.insertion_point_position += 1
        elif key_code == KeyCode.HOME:
            self.insertion_point_position = 0
        elif key_code == KeyCode.END:
            self.insertion_point_position = text_length
        elif key_code == KeyCode.DELETE:
            pos = self.insertion_point_position
            if pos < text_length:
                self.input_text = self.input_text[:pos] + self.input_text[pos + 1 :]
        elif key_code == KeyCode.BACKSPACE:
            pos = self.insertion_point_position
            if pos > 0:
                self.input_text = self.input_text[: pos - 1] + self.input_text[pos:]
                self.insertion_point_position -= 1
        return False

    def _recall_history(self) -> None:
        self.input_text = self.command_history[self.history_index]
        self.insertion_point_position = len(self.input_text)

    def handle_char_input(self, args: EventArgs) -> bool:
        """Append the printable character code in ``args["Char"]``; consume it if taken."""
        code = args.get_value("Char", 0) & 0xFF
        if code == 0:
            return False
        if 32 <= code <= 126:
            self.input_text += chr(code)
            self.insertion_point_position = len(self.input_text)
            return True
        return False

    def command_clear(self, args: EventArgs) -> bool:
        """Erase the output and print the banner."""
        self.lines.clear()
        self.add_line(self.BANNER_COLOR, self.BANNER_TEXT)
        self.add_line(self.INFO_MAJOR, "Type help for a list of commands")
        return True

    def command_help(self, args: EventArgs) -> bool:
        """List every registered event name."""
        self.add_line(self.INFO_MAJOR, "Registered Command: ")
        for name in self.event_system.registered_event_names():
            self.add_line(self.INFO_MINOR, name)
        return True