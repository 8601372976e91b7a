[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamecore"
version = "0.1.0"
description = "Runtime building blocks for small game engines: clocks, timers, events, a developer console, input state and colour utilities."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "engine", "clock", "timer", "events", "input", "console", "gamepad"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gamecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
