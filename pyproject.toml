[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameboiler"
version = "0.1.0"
description = "A small game skeleton with a state machine, action-based input, category logging and a pygame backend"
requires-python = ">=3.10"
keywords = ["game", "boilerplate", "pygame", "state-machine", "input", "game-loop"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gameboiler = "gameboiler.main:main"

[tool.hatch.build.targets.wheel]
packages = ["gameboiler"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
