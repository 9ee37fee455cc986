"""Settings loading and the command-line entry point."""

import pytest

from Qirkat_AI import main as main_mod
from Qirkat_AI.utils.cli import parse_args


def test_packaged_settings_load():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["search_depth"] == 5
    assert settings["white_player"] == "human"
    assert settings["black_player"] == "ai"


def test_missing_settings_file_gives_defaults(tmp_path):
    settings = main_mod.load_settings(tmp_path / "absent.yaml")
    assert settings == main_mod.DEFAULT_SETTINGS


def test_settings_file_overrides_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("search_depth: 2\nblack_player: random\n", encoding="utf-8")
    settings = main_mod.load_settings(path)
    assert settings["search_depth"] == 2
    assert settings["black_player"] == "random"
    assert settings["white_player"] == "human"


def test_parse_args():
    args = parse_args(["--depth", "3", "--white", "ai", "--timing", "a.txt", "b.txt"])
    assert args.depth == 3
    assert args.white == "ai"
    assert args.black is None
    assert args.timing
    assert args.files == ["a.txt", "b.txt"]


def test_main_runs_command_file(tmp_path, capsys):
    script = tmp_path / "session.txt"
    script.write_text("set black ----- -w--- -b--- ----- -----\nstart\nquit\n", encoding="utf-8")
    assert main_mod.main(["--depth", "1", str(script)]) == 0
    printed = capsys.readouterr().out
    assert "Black moves b3-b1." in printed
    assert "Black wins." in printed


def test_depth_below_one_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--depth", "0"])


def test_command_line_depth_overrides_settings(tmp_path, monkeypatch):
    settings = tmp_path / "settings.yaml"
    settings.write_text("search_depth: 4\n", encoding="utf-8")
    seen = {}

    class FakeGame:
        def __init__(self, **kwargs):
            seen.update(kwargs)

        def process(self):
            pass

    monkeypatch.setattr(main_mod, "Qirkatgame", FakeGame)
    main_mod.main(["--settings", str(settings), "--depth", "1"])
    assert seen["depth"] == 1
    main_mod.main(["--settings", str(settings)])
    assert seen["depth"] == 4
