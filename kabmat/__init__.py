"""Kanban boards in the terminal with vim-like keybindings: data model, plain-text storage and a curses interface."""

__version__ = "2.8.0"