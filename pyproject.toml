[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kabmat"
version = "2.8.0"
description = "Terminal program for managing kanban boards with vim-like keybindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["kanban", "tui", "curses", "todo", "board", "vim"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kabmat = "kabmat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kabmat"]

[tool.pytest.ini_options]
addopts = "-ra"
