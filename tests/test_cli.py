import pytest

from kabmat.cli import UsageError, main, parse_args, usage
from kabmat.config import Config


class FakeData:
    def __init__(self, names=()):
        self.names = list(names)
        self.opened = []

    def board_names(self):
        return list(self.names)

    def create_board(self, name):
        self.names.append(name)

    def delete_board(self, name):
        self.names.remove(name)

    def get_board(self, name):
        self.opened.append(name)
        return name


def test_version_prints_and_disables_tui(capsys):
    config = Config()
    parse_args(["-v"], FakeData(), config)
    assert capsys.readouterr().out == "kabmat 2.8.0\n"
    assert config.tui_enabled is False


def test_help_prints_usage(capsys):
    config = Config()
    parse_args(["--help"], FakeData(), config)
    out = capsys.readouterr().out
    assert "Usage: kabmat [OPTION]..." in out
    assert config.tui_enabled is False


def test_usage_lists_options():
    text = usage()
    assert text.startswith("kabmat 2.8.0")
    assert "  -c, --create <name>     create a new board with the name <name>" in text
    assert text.endswith("Consult the man page for more information")


def test_unknown_option():
    with pytest.raises(UsageError, match="Unknown option `-x`"):
        parse_args(["-x"], FakeData(), Config())


def test_missing_value():
    with pytest.raises(UsageError, match="Not enough arguments for option `--create`"):
        parse_args(["--create"], FakeData(), Config())


def test_create_and_delete_boards():
    data = FakeData(["Old"])
    config = Config()
    arguments = parse_args(["-c", "New", "-d", "Old"], data, config)
    assert data.names == ["New"]
    assert arguments == {"-c": "New", "-d": "Old"}
    assert config.tui_enabled is True


def test_open_sets_default_board():
    data = FakeData(["Work"])
    config = Config()
    parse_args(["--open", "Work"], data, config)
    assert config.default_board == "Work"
    assert data.opened == ["Work"]


def test_flags_mix_with_values():
    config = Config()
    arguments = parse_args(["-b", "-c", "X", "-t"], FakeData(), config)
    assert config.move_card_to_column_bottom is True
    assert config.tui_enabled is False
    assert arguments == {"-b": "", "-c": "X", "-t": ""}


def test_list_prints_names(capsys):
    config = Config()
    parse_args(["-l"], FakeData(["Work", "Home"]), config)
    assert capsys.readouterr().out == "Work\nHome\n"
    assert config.tui_enabled is False


def test_main_version(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["-v"]) == 0
    assert capsys.readouterr().out == "kabmat 2.8.0\n"
    assert (tmp_path / ".local" / "share" / "kabmat" / "data").exists()


def test_main_unknown_option(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["--nope"]) == 1
    assert "Unknown option `--nope`" in capsys.readouterr().err


def test_main_create_then_list(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["-c", "Work", "-t"]) == 0
    capsys.readouterr()
    assert main(["-l"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Work"]