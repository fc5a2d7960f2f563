"""
Tests for the terminal front end.
"""
import io
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othebot import __version__
from othebot.cli import build_parser, load_config, main
from othebot.config import get_default_config


def run(argv, text):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(text), stdout=stdout)
    return code, stdout.getvalue()


def test_play_and_quit():
    code, output = run(['--white', 'Alice', '--black', 'Bob'], "d3\nquit\n")

    assert code == 0
    assert "Legal moves: d3 c4 f5 e6" in output
    assert "Bob (Black) to move:" in output
    assert "Alice (White) to move:" in output
    assert "Final score - Bob: 3, Alice: 2" in output


def test_illegal_input_reprompts():
    code, output = run([], "a1\nzz\nd3\nexit\n")

    assert code == 0
    assert output.count("illegal move, you can't put your disc here") == 2
    assert "Final score - Black: 3, White: 2" in output


def test_eof_stops_the_game():
    code, output = run([], "")
    assert code == 0
    assert "Final score - Black: 2, White: 2" in output


def test_capture_flag():
    code, output = run(['--capture'], "d3\nquit\n")
    assert code == 0
    assert "Final score - Black: 4, White: 1" in output


def test_config_file(tmp_path):
    config = get_default_config()
    config.game.capture = True
    config.game.black_name = "Bob"
    config.game.show_legal_moves = False
    path = tmp_path / "config.json"
    config.save(str(path))

    code, output = run(['--config', str(path)], "d3\nquit\n")

    assert code == 0
    assert "Legal moves:" not in output
    assert "Final score - Bob: 4, White: 1" in output


def test_missing_config_file(tmp_path):
    code, output = run(['--config', str(tmp_path / "missing.json")], "")
    assert code == 2
    assert output == ""


def test_config_file_not_an_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]")

    code, output = run(['--config', str(path)], "")

    assert code == 2
    assert output == ""


def test_config_file_null_log_level(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"logging": {"log_level": null}}')

    code, output = run(['--config', str(path)], "")

    assert code == 2
    assert output == ""


def test_command_line_overrides():
    args = build_parser().parse_args(['--white', 'Alice', '--log-level', 'DEBUG', '--log-file'])
    config = load_config(args)
    assert config.game.white_name == "Alice"
    assert config.game.black_name == "Black"
    assert config.logging.log_level == "DEBUG"
    assert config.logging.log_to_file is True


def test_package_metadata():
    import othebot
    assert '__license__' in othebot.__all__
    assert '__version__' in othebot.__all__


def test_version(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--version'])
    assert __version__ in capsys.readouterr().out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
