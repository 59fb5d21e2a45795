[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "projswitch"
version = "0.1.0"
description = "Fuzzy-pick a project directory and open or switch to its tmux session"
requires-python = ">=3.10"
dependencies = []
keywords = ["tmux", "fzf", "projects", "sessions", "laio", "television"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
project = "projswitch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["projswitch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
