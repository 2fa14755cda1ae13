[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casinotable"
version = "0.1.0"
description = "Game rules for a small card casino: blackjack, belote, the end-of-round menu, fades, joypad input and sound names"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "blackjack", "belote", "casino", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["casinotable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
