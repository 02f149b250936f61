"""Command line entry point: option parsing and terminal set-up."""

import curses
import sys

from .board_screen import BoardScreen
from .config import NAME, VERSION, ColorPair, Config, default_data_file
from .main_menu import MainMenu
from .storage import DataError, DataManager


class UsageError(Exception):
    """A command line option was unknown or lacked its value."""


_OPTIONS = {
    "-h": "help",
    "--help": "help",
    "-v": "version",
    "--version": "version",
    "-l": "list",
    "--list": "list",
    "-c": "create",
    "--create": "create",
    "-o": "open",
    "--open": "open",
    "-d": "delete",
    "--delete": "delete",
    "-t": "text",
    "--text": "text",
    "-b": "bottom",
    "--card-at-bottom": "bottom",
}

_NEEDS_VALUE = {"create", "open", "delete"}


def usage():
    """The help text printed by -h."""
    return "\n".join(
        [
            f"{NAME} {VERSION}",
            "TUI program for managing kanban boards with vim-like keybindings",
            "",
            "Usage: kabmat [OPTION]...",
            "",
            "Options: ",
            "  -h, --help              print this help message",
            "  -v, --version           print program version",
            "",
            "  -l, --list              list all boards",
            "  -c, --create <name>     create a new board with the name <name>",
            "  -o, --open <name>       open board with name <name>",
            "  -d, --delete <name>     delete board with name <name>",
            "",
            "  -t, --text              disable tui",
            "  -b, --card-at-bottom    when moving cards between columns, put "
            "them at the bottom",
            "",
            "Consult the man page for more information",
        ]
    )


def _apply(option, value, data_manager, config):
    if option == "version":
        config.tui_enabled = False
        print(f"{NAME} {VERSION}")
    elif option == "help":
        config.tui_enabled = False
        print(usage())
    elif option == "create":
        data_manager.create_board(value)
    elif option == "list":
        config.tui_enabled = False
        for name in data_manager.board_names():
            print(name)
    elif option == "open":
        data_manager.get_board(value)
        config.default_board = value
    elif option == "delete":
        data_manager.delete_board(value)
    elif option == "text":
        config.tui_enabled = False
    elif option == "bottom":
        config.move_card_to_column_bottom = True


def parse_args(argv, data_manager, config):
    """Act on each option in turn, updating ``config``.

    Returns the options seen, mapped to their values ("" for flags).
    Raises UsageError for an unknown option or a missing value.
    """
    arguments = {}
    remaining = iter(argv)
    for argument in remaining:
        option = _OPTIONS.get(argument)
        if option is None:
            raise UsageError(f"Unknown option `{argument}`")
        value = ""
        if option in _NEEDS_VALUE:
            value = next(remaining, None)
            if value is None:
                raise UsageError(f"Not enough arguments for option `{argument}`")
        arguments[argument] = value
        _apply(option, value, data_manager, config)
    return arguments


def _error_message(error):
    message = str(error)
    return message if message.startswith("ERROR") else f"ERROR: {message}"


def _ensure_data_file():
    path = default_data_file()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
    except OSError as error:
        raise DataError(f'Couldn\'t read data from file "{path}"') from error


class _NoColorError(Exception):
    pass


def _session(screen, data_manager, config):
    if not curses.has_colors():
        raise _NoColorError
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.start_color()
    background = -1
    try:
        curses.use_default_colors()
    except curses.error:
        background = curses.COLOR_BLACK

    curses.init_pair(ColorPair.FOOTER, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(ColorPair.MODE, curses.COLOR_BLACK, curses.COLOR_BLUE)
    curses.init_pair(ColorPair.HEADER, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(ColorPair.BORDER, curses.COLOR_BLUE, background)
    curses.init_pair(ColorPair.KEY_HINT, curses.COLOR_WHITE, background)

    if config.default_board:
        BoardScreen(config.default_board, data_manager, config, False, screen).show()
    else:
        MainMenu(data_manager, config, screen).show()


def main(argv=None):
    """Run the program; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    config = Config()
    try:
        _ensure_data_file()
        data_manager = DataManager()
        parse_args(args, data_manager, config)
    except (UsageError, DataError) as error:
        print(_error_message(error), file=sys.stderr)
        return 1

    if not config.tui_enabled:
        return 0

    try:
        curses.wrapper(_session, data_manager, config)
    except _NoColorError:
        print("Your terminal does not support color", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())