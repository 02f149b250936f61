"""Program settings, constants and file locations."""

import os
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

NAME = "kabmat"
VERSION = "2.8.0"

_DATA_DIR = Path(".local") / "share" / "kabmat"


@dataclass
class Config:
    """Settings chosen on the command line."""

    tui_enabled: bool = True
    default_board: str = ""
    move_card_to_column_bottom: bool = False


class Mode(IntEnum):
    """Editing mode of an input field."""

    NORMAL = 0
    INSERT = 1


class ColorPair(IntEnum):
    """Colour pair numbers used by the terminal interface."""

    FOOTER = 1
    MODE = 2
    HEADER = 3
    BORDER = 4
    KEY_HINT = 5


def _home():
    home = os.environ.get("HOME")
    return Path(home) if home else Path.home()


def default_data_file():
    """Path of the file that holds all boards."""
    return _home() / _DATA_DIR / "data"


def default_backup_file():
    """Path of the backup kept of the data file before each save."""
    return _home() / _DATA_DIR / "data_bkp"