"""Runtime building blocks for small game engines: clocks, timers, events, console, input and colours."""

__version__ = "0.1.0"