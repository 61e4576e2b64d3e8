import io

import pytest

from pokedexcli import repl
from pokedexcli.commands import Config
from pokedexcli.repl import PROMPT, clean_input, main, start_repl


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  ", []),
        ("  hello  ", ["hello"]),
        ("  hello  world  ", ["hello", "world"]),
        ("  HellO  World  ", ["hello", "world"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


class FailingClient:
    def get_pokemon(self, name):
        raise OSError("network down")


def run(text, capsys, client=None):
    cfg = Config(client=client or FailingClient())
    start_repl(cfg, io.StringIO(text))
    return cfg, capsys.readouterr().out


def test_unknown_command_is_echoed(capsys):
    _, out = run("Foo bar\n", capsys)
    assert "Your command was: foo" in out


def test_blank_lines_only_prompt(capsys):
    _, out = run("\n   \n", capsys)
    assert out.count(PROMPT) == 3
    assert "Your command was" not in out


def test_command_error_is_printed(capsys):
    _, out = run("pokedex\n", capsys)
    assert "you have not caught any pokemon" in out


def test_client_error_is_printed(capsys):
    cfg, out = run("catch pikachu\n", capsys)
    assert "network down" in out
    assert cfg.caught_pokemon == {}


def test_commands_are_case_insensitive(capsys):
    _, out = run("HELP\n", capsys)
    assert "Welcome to the Pokedex!" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(repl.sys, "stdin", io.StringIO("help\n"))
    assert main([]) == 0
    assert "Welcome to the Pokedex!" in capsys.readouterr().out